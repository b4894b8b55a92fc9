"""
Domain common module.

Contains base classes for domain modeling:
- ValueObject: Immutable objects defined by their attributes
- Entity: Objects with identity and lifecycle
- DomainEvent: Notifications of significant domain occurrences
"""

from .domain_event import DomainEvent
from .entity import Entity, EntityId
from .exceptions import DomainError, ValidationError
from .value_object import ValueObject

__all__ = [
    "DomainError",
    "DomainEvent",
    "Entity",
    "EntityId",
    "ValidationError",
    "ValueObject",
]
