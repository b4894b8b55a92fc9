"""Mapper for Subject record ↔ Domain conversion."""

from studyflow.domain.common.value_objects import SubjectId
from studyflow.domain.study.entities import Subject
from studyflow.schemas.study_schemas import SubjectRecord


class SubjectMapper:
    """Mapper for Subject record ↔ Domain conversion."""

    def to_domain(self, record: SubjectRecord) -> Subject:
        """Convert persisted record to domain entity."""
        return Subject.create_with_id(
            id=SubjectId(record.id),
            name=record.name,
            color=record.color,
            studied_hours=record.studied_hours,
            target_hours=record.target_hours,
            last_studied=record.last_studied,
        )

    def to_record(self, subject: Subject) -> SubjectRecord:
        """Convert domain entity to persisted record."""
        return SubjectRecord(
            id=subject.id.value,
            name=subject.name,
            color=subject.color,
            studied_hours=subject.studied_hours,
            target_hours=subject.target_hours,
            last_studied=subject.last_studied,
        )
