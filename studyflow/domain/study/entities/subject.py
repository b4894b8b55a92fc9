"""
Subject entity: a tracked area of study.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Final

from studyflow.domain.common.entity import Entity
from studyflow.domain.common.exceptions import ValidationError
from studyflow.domain.common.value_objects import SubjectId

SUBJECT_COLORS: Final[tuple[str, ...]] = (
    "#FF6B6B",
    "#4ECDC4",
    "#45B7D1",
    "#FFA07A",
    "#98D8C8",
    "#F7DC6F",
)

DEFAULT_TARGET_HOURS: Final[float] = 40.0


@dataclass(eq=False)
class Subject(Entity[SubjectId]):
    """
    Subject with accumulated and target study hours.

    Business Rules:
    - Name cannot be empty
    - Studied hours are never negative and only grow through logged time
    - Target hours are strictly positive
    - Last studied is refreshed whenever time is logged
    """

    id: SubjectId
    name: str
    color: str
    studied_hours: float = 0.0
    target_hours: float = DEFAULT_TARGET_HOURS
    last_studied: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.name or not self.name.strip():
            raise ValidationError("Subject name cannot be empty", field="name")
        if self.studied_hours < 0:
            raise ValidationError(
                "Studied hours cannot be negative", field="studied_hours", value=self.studied_hours
            )
        if self.target_hours <= 0:
            raise ValidationError(
                "Target hours must be positive", field="target_hours", value=self.target_hours
            )

    @property
    def progress(self) -> float:
        """Raw progress percentage; exceeds 100 once the target is passed."""
        return self.studied_hours / self.target_hours * 100

    @property
    def progress_indicator(self) -> float:
        """Progress clamped to 100 for sizing a bounded indicator."""
        return min(self.progress, 100.0)

    @property
    def hours_remaining(self) -> float:
        return max(self.target_hours - self.studied_hours, 0.0)

    @property
    def target_achieved(self) -> bool:
        return self.progress >= 100

    def name_contains(self, *fragments: str) -> bool:
        """Check case-insensitively whether the name contains any of the fragments."""
        lowered = self.name.lower()
        return any(fragment.lower() in lowered for fragment in fragments)

    def log_time(self, hours: float, studied_at: datetime) -> None:
        """
        Add studied time.

        Args:
            hours: Positive number of hours studied
            studied_at: When the time was logged

        Raises:
            ValidationError: If hours is not positive
        """
        if hours <= 0:
            raise ValidationError("Logged hours must be positive", field="hours", value=hours)
        self.studied_hours += hours
        self.last_studied = studied_at

    @classmethod
    def create(
        cls,
        id: SubjectId,
        name: str,
        color: str,
        target_hours: float = DEFAULT_TARGET_HOURS,
    ) -> "Subject":
        """Create a new subject with no studied time yet."""
        return cls(
            id=id,
            name=name,
            color=color,
            studied_hours=0.0,
            target_hours=target_hours,
            last_studied=None,
        )

    @classmethod
    def create_with_id(
        cls,
        id: SubjectId,
        name: str,
        color: str,
        studied_hours: float,
        target_hours: float,
        last_studied: datetime | None = None,
    ) -> "Subject":
        """Reconstitute a subject from persistence."""
        return cls(
            id=id,
            name=name,
            color=color,
            studied_hours=studied_hours,
            target_hours=target_hours,
            last_studied=last_studied,
        )
