"""Domain events emitted by the study store after each successful mutation."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from studyflow.domain.common.domain_event import DomainEvent
from studyflow.domain.common.value_objects import AssignmentId, StudySessionId, SubjectId


class Collection(str, Enum):
    """Independently persisted collections of the study store."""

    SUBJECTS = "subjects"
    ASSIGNMENTS = "assignments"
    SESSIONS = "sessions"


@dataclass(frozen=True)
class StudyEvent(DomainEvent, ABC):
    """Base class for study events; names the collections the change touched."""

    @property
    @abstractmethod
    def collections(self) -> frozenset[Collection]: ...


@dataclass(frozen=True)
class SubjectAdded(StudyEvent):
    subject_id: SubjectId
    name: str

    @property
    def collections(self) -> frozenset[Collection]:
        return frozenset({Collection.SUBJECTS})


@dataclass(frozen=True)
class SubjectRemoved(StudyEvent):
    """A subject was removed together with all of its study sessions."""

    subject_id: SubjectId
    removed_session_ids: tuple[StudySessionId, ...] = ()

    @property
    def collections(self) -> frozenset[Collection]:
        if self.removed_session_ids:
            return frozenset({Collection.SUBJECTS, Collection.SESSIONS})
        return frozenset({Collection.SUBJECTS})


@dataclass(frozen=True)
class StudyTimeLogged(StudyEvent):
    subject_id: SubjectId
    session_id: StudySessionId
    hours: float

    @property
    def collections(self) -> frozenset[Collection]:
        return frozenset({Collection.SUBJECTS, Collection.SESSIONS})


@dataclass(frozen=True)
class AssignmentAdded(StudyEvent):
    assignment_id: AssignmentId
    title: str

    @property
    def collections(self) -> frozenset[Collection]:
        return frozenset({Collection.ASSIGNMENTS})


@dataclass(frozen=True)
class AssignmentCompletionToggled(StudyEvent):
    assignment_id: AssignmentId
    completed: bool

    @property
    def collections(self) -> frozenset[Collection]:
        return frozenset({Collection.ASSIGNMENTS})


@dataclass(frozen=True)
class AssignmentRemoved(StudyEvent):
    assignment_id: AssignmentId

    @property
    def collections(self) -> frozenset[Collection]:
        return frozenset({Collection.ASSIGNMENTS})
