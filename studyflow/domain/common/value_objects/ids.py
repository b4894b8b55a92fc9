from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True)
class SubjectId(EntityId):
    """Strongly-typed subject identifier."""

    value: str


@dataclass(frozen=True)
class AssignmentId(EntityId):
    """Strongly-typed assignment identifier."""

    value: str


@dataclass(frozen=True)
class StudySessionId(EntityId):
    """Strongly-typed study session identifier."""

    value: str
