from .store import StudyStore

__all__ = ["StudyStore"]
