"""
StudySession entity: an immutable record of time spent on a subject.
"""

from dataclasses import dataclass
from datetime import datetime

from studyflow.domain.common.entity import Entity
from studyflow.domain.common.exceptions import ValidationError
from studyflow.domain.common.value_objects import StudySessionId, SubjectId
from studyflow.domain.study.entities.subject import Subject


@dataclass(frozen=True, eq=False)
class StudySession(Entity[StudySessionId]):
    """
    Study session logged against a subject.

    Business Rules:
    - Duration is strictly positive
    - subject_name is the subject's name when the session was logged
      and is never updated afterwards
    - Sessions are removed only together with their subject
    """

    id: StudySessionId
    subject_id: SubjectId
    subject_name: str
    duration: float
    date: datetime

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.duration <= 0:
            raise ValidationError(
                "Session duration must be positive", field="duration", value=self.duration
            )

    def belongs_to(self, subject_id: SubjectId) -> bool:
        return self.subject_id == subject_id

    def occurred_since(self, start: datetime) -> bool:
        """Check whether the session happened at or after `start`."""
        return self.date >= start

    @classmethod
    def create(
        cls,
        id: StudySessionId,
        subject: Subject,
        duration: float,
        date: datetime,
    ) -> "StudySession":
        """Record a session for a subject, snapshotting its current name."""
        return cls(
            id=id,
            subject_id=subject.id,
            subject_name=subject.name,
            duration=duration,
            date=date,
        )

    @classmethod
    def create_with_id(
        cls,
        id: StudySessionId,
        subject_id: SubjectId,
        subject_name: str,
        duration: float,
        date: datetime,
    ) -> "StudySession":
        """Reconstitute a session from persistence."""
        return cls(
            id=id,
            subject_id=subject_id,
            subject_name=subject_name,
            duration=duration,
            date=date,
        )
