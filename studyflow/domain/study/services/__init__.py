from .recommendation_service import RecommendationService
from .study_analytics_service import (
    DeadlineStatus,
    StudyAnalyticsService,
    SubjectProgress,
)

__all__ = [
    "DeadlineStatus",
    "RecommendationService",
    "StudyAnalyticsService",
    "SubjectProgress",
]
