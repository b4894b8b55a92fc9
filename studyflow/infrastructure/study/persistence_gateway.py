"""Loads and saves the study collections as JSON text in key-value storage."""

from collections.abc import Callable, Sequence
from typing import Any, Protocol, TypeVar

import pydantic
import structlog

from studyflow.domain.common.exceptions import DomainError
from studyflow.domain.study.entities import Assignment, StudySession, Subject
from studyflow.exceptions import PersistenceError
from studyflow.infrastructure.study.mappers import (
    AssignmentMapper,
    StudySessionMapper,
    SubjectMapper,
)
from studyflow.schemas.study_schemas import (
    AssignmentRecord,
    AssignmentRecordList,
    StoredRecord,
    StudySessionRecord,
    StudySessionRecordList,
    SubjectRecord,
    SubjectRecordList,
)

logger = structlog.get_logger(__name__)

DEFAULT_SUBJECTS_KEY = "studyflow_subjects"
DEFAULT_ASSIGNMENTS_KEY = "studyflow_assignments"
DEFAULT_SESSIONS_KEY = "studyflow_sessions"

# camelCase keys; lastStudied omitted until set
_DUMP_OPTIONS = {"by_alias": True, "exclude_none": True}

# Outer shape only; records are validated one by one
_RawRecordList = pydantic.TypeAdapter(list[Any])

RecordT = TypeVar("RecordT", bound=StoredRecord)
EntityT = TypeVar("EntityT")


class KeyValueStore(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class StudyPersistenceGateway:
    """Persistence gateway for the three study collections.

    Every collection lives under its own key as a JSON array; timestamps
    are re-hydrated into aware datetimes on load. A value that is not a
    JSON array fails the whole collection, while a single bad record is
    logged and skipped so the rest of the collection survives.
    """

    def __init__(
        self,
        storage: KeyValueStore,
        subjects_key: str = DEFAULT_SUBJECTS_KEY,
        assignments_key: str = DEFAULT_ASSIGNMENTS_KEY,
        sessions_key: str = DEFAULT_SESSIONS_KEY,
    ) -> None:
        self.storage = storage
        self.subjects_key = subjects_key
        self.assignments_key = assignments_key
        self.sessions_key = sessions_key
        self.subject_mapper = SubjectMapper()
        self.assignment_mapper = AssignmentMapper()
        self.session_mapper = StudySessionMapper()

    def load_subjects(self) -> list[Subject]:
        return self._load(self.subjects_key, SubjectRecord, self.subject_mapper.to_domain)

    def load_assignments(self) -> list[Assignment]:
        return self._load(
            self.assignments_key, AssignmentRecord, self.assignment_mapper.to_domain
        )

    def load_sessions(self) -> list[StudySession]:
        return self._load(self.sessions_key, StudySessionRecord, self.session_mapper.to_domain)

    def save_subjects(self, subjects: Sequence[Subject]) -> None:
        records = [self.subject_mapper.to_record(s) for s in subjects]
        self._write(self.subjects_key, SubjectRecordList.dump_json(records, **_DUMP_OPTIONS))

    def save_assignments(self, assignments: Sequence[Assignment]) -> None:
        records = [self.assignment_mapper.to_record(a) for a in assignments]
        self._write(self.assignments_key, AssignmentRecordList.dump_json(records, **_DUMP_OPTIONS))

    def save_sessions(self, sessions: Sequence[StudySession]) -> None:
        records = [self.session_mapper.to_record(s) for s in sessions]
        self._write(self.sessions_key, StudySessionRecordList.dump_json(records, **_DUMP_OPTIONS))

    def _load(
        self,
        key: str,
        record_type: type[RecordT],
        to_domain: Callable[[RecordT], EntityT],
    ) -> list[EntityT]:
        """
        Read one collection.

        Raises:
            PersistenceError: If the stored value is not a JSON array
        """
        raw = self.storage.get(key)
        if raw is None:
            return []
        try:
            items = _RawRecordList.validate_json(raw)
        except pydantic.ValidationError as e:
            raise PersistenceError(key, f"malformed data: {e}") from e

        entities: list[EntityT] = []
        for index, item in enumerate(items):
            try:
                entities.append(to_domain(record_type.model_validate(item)))
            except (DomainError, ValueError) as e:
                # pydantic.ValidationError is a ValueError
                logger.warning("stored_record_skipped", key=key, index=index, error=str(e))
        return entities

    def _write(self, key: str, payload: bytes) -> None:
        self.storage.set(key, payload.decode("utf-8"))
        logger.debug("collection_saved", key=key)
