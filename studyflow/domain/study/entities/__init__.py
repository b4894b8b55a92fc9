from .assignment import Assignment, Priority
from .study_session import StudySession
from .subject import SUBJECT_COLORS, Subject

__all__ = [
    "SUBJECT_COLORS",
    "Assignment",
    "Priority",
    "StudySession",
    "Subject",
]
