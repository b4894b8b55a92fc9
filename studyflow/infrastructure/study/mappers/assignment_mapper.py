"""Mapper for Assignment record ↔ Domain conversion."""

from studyflow.domain.common.value_objects import AssignmentId
from studyflow.domain.study.entities import Assignment
from studyflow.schemas.study_schemas import AssignmentRecord


class AssignmentMapper:
    """Mapper for Assignment record ↔ Domain conversion."""

    def to_domain(self, record: AssignmentRecord) -> Assignment:
        """Convert persisted record to domain entity."""
        return Assignment.create_with_id(
            id=AssignmentId(record.id),
            title=record.title,
            subject=record.subject,
            deadline=record.deadline,
            priority=record.priority,
            completed=record.completed,
        )

    def to_record(self, assignment: Assignment) -> AssignmentRecord:
        """Convert domain entity to persisted record."""
        return AssignmentRecord(
            id=assignment.id.value,
            title=assignment.title,
            subject=assignment.subject,
            deadline=assignment.deadline,
            priority=assignment.priority,
            completed=assignment.completed,
        )
