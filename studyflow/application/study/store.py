"""
Study store: the single owner of subjects, assignments and study sessions.

All mutations go through the store's operations. Unmet preconditions
(empty required fields, unknown ids) make an operation a silent no-op;
every successful mutation emits exactly one domain event to the
registered change handlers.
"""

import copy
import math
import random
from collections.abc import Callable, Sequence
from datetime import UTC, date, datetime
from typing import TypeVar

import structlog

from studyflow.application.study.protocols import StudyPersistenceGatewayProtocol
from studyflow.domain.common.exceptions import DomainError
from studyflow.domain.common.value_objects import (
    AssignmentId,
    MonotonicIdGenerator,
    StudySessionId,
    SubjectId,
)
from studyflow.domain.study.entities import (
    SUBJECT_COLORS,
    Assignment,
    Priority,
    StudySession,
    Subject,
)
from studyflow.domain.study.entities.subject import DEFAULT_TARGET_HOURS
from studyflow.domain.study.events import (
    AssignmentAdded,
    AssignmentCompletionToggled,
    AssignmentRemoved,
    StudyEvent,
    StudyTimeLogged,
    SubjectAdded,
    SubjectRemoved,
)
from studyflow.domain.study.snapshot import StudySnapshot
from studyflow.exceptions import PersistenceError

logger = structlog.get_logger(__name__)

ChangeHandler = Callable[[StudyEvent], None]

T = TypeVar("T")
IdT = TypeVar("IdT", SubjectId, AssignmentId)


def _utc_now() -> datetime:
    return datetime.now(UTC)


def _is_positive(value: float) -> bool:
    return 0 < value < math.inf


def _coerce_id(id_type: type[IdT], raw: IdT | str) -> IdT | None:
    try:
        return id_type(str(raw))
    except ValueError:
        return None


class StudyStore:
    """Owns the three study collections and enforces their invariants."""

    def __init__(
        self,
        *,
        default_target_hours: float = DEFAULT_TARGET_HOURS,
        clock: Callable[[], datetime] = _utc_now,
        id_generator: MonotonicIdGenerator | None = None,
        color_picker: Callable[[Sequence[str]], str] = random.choice,
    ) -> None:
        self._default_target_hours = default_target_hours
        self._clock = clock
        self._ids = id_generator or MonotonicIdGenerator()
        self._pick_color = color_picker
        self._subjects: list[Subject] = []
        self._assignments: list[Assignment] = []
        self._sessions: list[StudySession] = []
        self._handlers: list[ChangeHandler] = []

    # --- Loading ---

    def load(self, gateway: StudyPersistenceGatewayProtocol) -> None:
        """
        Replace the in-memory collections with the persisted ones.

        Each collection is loaded independently; one that cannot be read
        starts empty. Loading does not notify change handlers.
        """
        self._subjects = self._load_collection("subjects", gateway.load_subjects)
        self._assignments = self._load_collection("assignments", gateway.load_assignments)
        self._sessions = self._load_collection("sessions", gateway.load_sessions)

        for entity in (*self._subjects, *self._assignments, *self._sessions):
            self._ids.observe(entity.id.value)

        logger.info(
            "study_store_loaded",
            subjects=len(self._subjects),
            assignments=len(self._assignments),
            sessions=len(self._sessions),
        )

    @staticmethod
    def _load_collection(name: str, loader: Callable[[], list[T]]) -> list[T]:
        try:
            return list(loader())
        except PersistenceError as e:
            logger.warning("study_store_load_failed", collection=name, error=str(e))
            return []

    # --- Reading ---

    def snapshot(self) -> StudySnapshot:
        """Return copies of the current collections; later mutations do not affect it."""
        return StudySnapshot(
            subjects=tuple(copy.copy(s) for s in self._subjects),
            assignments=tuple(copy.copy(a) for a in self._assignments),
            sessions=tuple(self._sessions),
        )

    @property
    def now(self) -> datetime:
        """Current time according to the store's clock."""
        return self._clock()

    # --- Change notification ---

    def subscribe(self, handler: ChangeHandler) -> Callable[[], None]:
        """
        Register a handler called with each event after a successful mutation.

        Returns:
            A callable that unregisters the handler
        """
        self._handlers.append(handler)

        def unsubscribe() -> None:
            if handler in self._handlers:
                self._handlers.remove(handler)

        return unsubscribe

    def _emit(self, event: StudyEvent) -> None:
        logger.debug("study_store_changed", **event.to_dict())
        for handler in list(self._handlers):
            try:
                handler(event)
            except Exception:
                logger.exception("study_change_handler_failed", event_type=event.event_type)

    # --- Subjects ---

    def add_subject(self, name: str, target_hours: float | None = None) -> Subject | None:
        """
        Add a subject with a random palette color and no studied time.

        No-op (returns None) when the name is empty or whitespace-only, or
        when an explicit target is not positive.
        """
        if not name or not name.strip():
            logger.debug("add_subject_skipped", reason="empty_name")
            return None
        target = self._default_target_hours if target_hours is None else target_hours
        if not _is_positive(target):
            logger.debug("add_subject_skipped", reason="non_positive_target", target=target)
            return None

        subject = Subject.create(
            id=SubjectId(self._ids.next_id()),
            name=name,
            color=self._pick_color(SUBJECT_COLORS),
            target_hours=target,
        )
        self._subjects.append(subject)
        logger.info("subject_added", subject_id=subject.id.value, name=subject.name)
        self._emit(SubjectAdded(subject_id=subject.id, name=subject.name))
        return copy.copy(subject)

    def remove_subject(self, subject_id: SubjectId | str) -> bool:
        """
        Remove a subject and every study session logged against it.

        Returns:
            True if the subject existed, False otherwise (no-op)
        """
        target = _coerce_id(SubjectId, subject_id)
        if target is None or self._find_subject(target) is None:
            logger.debug("remove_subject_skipped", reason="not_found", subject_id=str(subject_id))
            return False
        subject_id = target

        removed_sessions = tuple(s.id for s in self._sessions if s.belongs_to(subject_id))
        self._subjects = [s for s in self._subjects if s.id != subject_id]
        self._sessions = [s for s in self._sessions if not s.belongs_to(subject_id)]

        logger.info(
            "subject_removed",
            subject_id=subject_id.value,
            removed_sessions=len(removed_sessions),
        )
        self._emit(SubjectRemoved(subject_id=subject_id, removed_session_ids=removed_sessions))
        return True

    def log_study_time(self, subject_id: SubjectId | str, hours: float) -> StudySession | None:
        """
        Add studied hours to a subject and record a study session.

        No-op (returns None) when the subject does not exist or hours is
        not positive.
        """
        target = _coerce_id(SubjectId, subject_id)
        subject = self._find_subject(target) if target is not None else None
        if subject is None:
            logger.debug("log_study_time_skipped", reason="not_found", subject_id=str(subject_id))
            return None
        subject_id = subject.id
        if not _is_positive(hours):
            logger.debug("log_study_time_skipped", reason="non_positive_hours", hours=hours)
            return None

        now = self._clock()
        subject.log_time(hours, now)
        session = StudySession.create(
            id=StudySessionId(self._ids.next_id()),
            subject=subject,
            duration=hours,
            date=now,
        )
        self._sessions.append(session)

        logger.info(
            "study_time_logged",
            subject_id=subject_id.value,
            hours=hours,
            studied_hours=subject.studied_hours,
        )
        self._emit(StudyTimeLogged(subject_id=subject_id, session_id=session.id, hours=hours))
        return session

    def _find_subject(self, subject_id: SubjectId) -> Subject | None:
        return next((s for s in self._subjects if s.id == subject_id), None)

    # --- Assignments ---

    def add_assignment(
        self,
        title: str,
        subject: str,
        deadline: str | date | datetime | None,
        priority: Priority | str = Priority.MEDIUM,
    ) -> Assignment | None:
        """
        Add an incomplete assignment.

        No-op (returns None) unless title, subject and deadline are all
        present and the deadline and priority can be parsed.
        """
        if not title or not subject:
            logger.debug("add_assignment_skipped", reason="missing_field")
            return None
        if deadline is None or (isinstance(deadline, str) and not deadline.strip()):
            logger.debug("add_assignment_skipped", reason="missing_deadline")
            return None

        try:
            assignment = Assignment.create(
                id=AssignmentId(self._ids.next_id()),
                title=title,
                subject=subject,
                deadline=deadline,
                priority=priority,
            )
        except DomainError as e:
            logger.debug("add_assignment_skipped", reason="invalid_field", error=str(e))
            return None

        self._assignments.append(assignment)
        logger.info(
            "assignment_added",
            assignment_id=assignment.id.value,
            deadline=assignment.deadline.isoformat(),
            priority=assignment.priority.value,
        )
        self._emit(AssignmentAdded(assignment_id=assignment.id, title=assignment.title))
        return copy.copy(assignment)

    def toggle_assignment_completion(self, assignment_id: AssignmentId | str) -> Assignment | None:
        """
        Flip the completed flag of an assignment.

        Returns:
            The updated assignment, or None if it does not exist (no-op)
        """
        target = _coerce_id(AssignmentId, assignment_id)
        assignment = self._find_assignment(target) if target is not None else None
        if assignment is None:
            logger.debug(
                "toggle_assignment_skipped", reason="not_found", assignment_id=str(assignment_id)
            )
            return None
        assignment_id = assignment.id

        completed = assignment.toggle_completion()
        logger.info(
            "assignment_completion_toggled",
            assignment_id=assignment_id.value,
            completed=completed,
        )
        self._emit(AssignmentCompletionToggled(assignment_id=assignment_id, completed=completed))
        return copy.copy(assignment)

    def remove_assignment(self, assignment_id: AssignmentId | str) -> bool:
        """
        Remove an assignment.

        Returns:
            True if the assignment existed, False otherwise (no-op)
        """
        target = _coerce_id(AssignmentId, assignment_id)
        if target is None or self._find_assignment(target) is None:
            logger.debug(
                "remove_assignment_skipped", reason="not_found", assignment_id=str(assignment_id)
            )
            return False
        assignment_id = target

        self._assignments = [a for a in self._assignments if a.id != assignment_id]
        logger.info("assignment_removed", assignment_id=assignment_id.value)
        self._emit(AssignmentRemoved(assignment_id=assignment_id))
        return True

    def _find_assignment(self, assignment_id: AssignmentId) -> Assignment | None:
        return next((a for a in self._assignments if a.id == assignment_id), None)
