"""
Assignment entity: a deadline-bound task with priority and completion state.
"""

import math
from dataclasses import dataclass
from datetime import UTC, date, datetime, time, timedelta
from enum import Enum

from studyflow.domain.common.entity import Entity
from studyflow.domain.common.exceptions import ValidationError
from studyflow.domain.common.value_objects import AssignmentId

ONE_DAY = timedelta(days=1)


class Priority(str, Enum):
    """Assignment priority levels."""

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


def parse_deadline(value: str | date | datetime) -> datetime:
    """
    Parse a deadline into an aware datetime.

    Accepts ISO-8601 date or datetime strings, dates and datetimes.
    A bare date means midnight UTC of that day; naive datetimes are
    taken as UTC.

    Raises:
        ValidationError: If the value is empty or cannot be parsed
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, time.min)
    else:
        text = value.strip() if isinstance(value, str) else ""
        if not text:
            raise ValidationError("Deadline cannot be empty", field="deadline")
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError as e:
            raise ValidationError("Invalid deadline", field="deadline", value=value) from e

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


@dataclass(eq=False)
class Assignment(Entity[AssignmentId]):
    """
    Assignment with a deadline.

    Business Rules:
    - Title and subject cannot be empty (whitespace is kept as typed)
    - Subject is a free-text label, not a reference to a Subject entity
    - Deadline is always timezone-aware
    - Completion can be toggled back and forth
    """

    id: AssignmentId
    title: str
    subject: str
    deadline: datetime
    priority: Priority = Priority.MEDIUM
    completed: bool = False

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.title:
            raise ValidationError("Assignment title cannot be empty", field="title")
        if not self.subject:
            raise ValidationError("Assignment subject cannot be empty", field="subject")
        if self.deadline.tzinfo is None:
            self.deadline = self.deadline.replace(tzinfo=UTC)
        self.priority = Priority(self.priority)

    def toggle_completion(self) -> bool:
        """Flip the completed flag and return the new value."""
        self.completed = not self.completed
        return self.completed

    def days_until_deadline(self, now: datetime) -> int:
        """Whole days until the deadline, rounded up; negative once overdue by a day or more."""
        return math.ceil((self.deadline - now) / ONE_DAY)

    def is_overdue(self, now: datetime) -> bool:
        return not self.completed and self.deadline < now

    def is_due_soon(self, now: datetime, within_days: int) -> bool:
        """Check whether an incomplete assignment is due in the next `within_days` days."""
        if self.completed:
            return False
        days = self.days_until_deadline(now)
        return 0 < days <= within_days

    @classmethod
    def create(
        cls,
        id: AssignmentId,
        title: str,
        subject: str,
        deadline: str | date | datetime,
        priority: Priority | str = Priority.MEDIUM,
    ) -> "Assignment":
        """
        Create a new, incomplete assignment.

        Raises:
            ValidationError: If the deadline or priority cannot be parsed
        """
        try:
            priority = Priority(priority)
        except ValueError as e:
            raise ValidationError("Unknown priority", field="priority", value=priority) from e
        return cls(
            id=id,
            title=title,
            subject=subject,
            deadline=parse_deadline(deadline),
            priority=priority,
            completed=False,
        )

    @classmethod
    def create_with_id(
        cls,
        id: AssignmentId,
        title: str,
        subject: str,
        deadline: datetime,
        priority: Priority,
        completed: bool,
    ) -> "Assignment":
        """Reconstitute an assignment from persistence."""
        return cls(
            id=id,
            title=title,
            subject=subject,
            deadline=deadline,
            priority=priority,
            completed=completed,
        )
