"""Custom exception hierarchy for the studyflow application."""


class StudyflowError(Exception):
    """Base exception for all studyflow errors outside the domain layer."""

    def __init__(self, message: str) -> None:
        """Initialize exception with message."""
        self.message = message
        super().__init__(self.message)


class PersistenceError(StudyflowError):
    """Durable storage could not be read or written."""

    def __init__(self, key: str, reason: str) -> None:
        """Initialize with the storage key and reason for failure."""
        self.key = key
        self.reason = reason
        super().__init__(f"Storage record '{key}' failed: {reason}")
