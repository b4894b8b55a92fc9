from .assignment_mapper import AssignmentMapper
from .study_session_mapper import StudySessionMapper
from .subject_mapper import SubjectMapper

__all__ = ["AssignmentMapper", "StudySessionMapper", "SubjectMapper"]
