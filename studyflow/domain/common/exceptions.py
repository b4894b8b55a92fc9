"""
Domain layer exceptions.

Entities raise these when constructed or mutated with data that breaks
their rules. The study store checks preconditions first and treats a
failed check as a no-op, so in practice they surface when entities are
built directly, e.g. from stored records.
"""


class DomainError(Exception):
    """Base exception for all domain errors; ``details`` carries structured context."""

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if not self.details:
            return self.message
        context = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
        return f"{self.message} ({context})"


class ValidationError(DomainError):
    """
    A field value is not acceptable.

    Example: empty subject name, non-positive target hours, unknown priority.
    """

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        details: dict[str, object] = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        super().__init__(message, details)
        self.field = field
        self.value = value
