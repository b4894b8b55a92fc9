"""Common value objects shared across all domain modules."""

from .id_generator import MonotonicIdGenerator
from .ids import AssignmentId, StudySessionId, SubjectId

__all__ = [
    # IDs
    "AssignmentId",
    "StudySessionId",
    "SubjectId",
    # Generation
    "MonotonicIdGenerator",
]
