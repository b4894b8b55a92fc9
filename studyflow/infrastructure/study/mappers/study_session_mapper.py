"""Mapper for StudySession record ↔ Domain conversion."""

from studyflow.domain.common.value_objects import StudySessionId, SubjectId
from studyflow.domain.study.entities import StudySession
from studyflow.schemas.study_schemas import StudySessionRecord


class StudySessionMapper:
    """Mapper for StudySession record ↔ Domain conversion."""

    def to_domain(self, record: StudySessionRecord) -> StudySession:
        """Convert persisted record to domain entity."""
        return StudySession.create_with_id(
            id=StudySessionId(record.id),
            subject_id=SubjectId(record.subject_id),
            subject_name=record.subject_name,
            duration=record.duration,
            date=record.date,
        )

    def to_record(self, session: StudySession) -> StudySessionRecord:
        """Convert domain entity to persisted record."""
        return StudySessionRecord(
            id=session.id.value,
            subject_id=session.subject_id.value,
            subject_name=session.subject_name,
            duration=session.duration,
            date=session.date,
        )
