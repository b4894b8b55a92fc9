"""Base class for events describing a completed change to domain state."""

from dataclasses import dataclass, field, fields
from datetime import UTC, datetime
from enum import Enum
from uuid import UUID, uuid4


def _primitive(value: object) -> object:
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, UUID):
        return str(value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, tuple | list | frozenset):
        return [_primitive(item) for item in value]
    to_primitive = getattr(value, "to_primitive", None)
    if callable(to_primitive):
        return to_primitive()
    return value


@dataclass(frozen=True)
class DomainEvent:
    """
    Immutable record of something that already happened.

    Subclasses are frozen dataclasses named in the past tense
    (``SubjectAdded``). The identifying metadata is keyword-only so
    subclasses can declare required fields of their own.
    """

    event_id: UUID = field(default_factory=uuid4, kw_only=True)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC), kw_only=True)

    @property
    def event_type(self) -> str:
        return self.__class__.__name__

    def to_dict(self) -> dict[str, object]:
        """Flatten the event into JSON-friendly values, e.g. for structured logs."""
        result = {f.name: _primitive(getattr(self, f.name)) for f in fields(self)}
        result["event_type"] = self.event_type
        return result
