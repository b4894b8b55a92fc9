"""
Identity base classes.

Subjects, assignments and study sessions are entities: two instances
with the same id are the same thing even if their fields differ (for
example a subject before and after study time was logged).
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, TypeVar

from .value_object import ValueObject


@dataclass(frozen=True)
class EntityId(ValueObject):
    """
    Opaque, non-empty string identifier.

    Each entity gets its own subclass so a SubjectId can never be passed
    where an AssignmentId is expected, even though both wrap the same
    kind of timestamp string.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValueError(f"{self.__class__.__name__} must be a non-empty string")

    def __str__(self) -> str:
        return self.value

    def to_primitive(self) -> str:
        return self.value


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Mutable domain object compared by id.

    Dataclass subclasses must pass ``eq=False`` so these methods are kept.
    """

    id: IdType

    def __eq__(self, other: object) -> bool:
        return isinstance(other, self.__class__) and self.id == other.id

    def __hash__(self) -> int:
        return hash((self.__class__.__name__, self.id))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id.value!r})"
