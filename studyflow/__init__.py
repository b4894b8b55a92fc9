"""Personal study tracker: subjects, study time, assignments, analytics and recommendations."""

__version__ = "0.1.0"
