"""Read-side facade over the study store for a presentation layer."""

from dataclasses import dataclass
from datetime import datetime

from studyflow.application.study.store import StudyStore
from studyflow.domain.study.entities import Assignment, StudySession
from studyflow.domain.study.services import (
    RecommendationService,
    StudyAnalyticsService,
    SubjectProgress,
)
from studyflow.domain.study.services.study_analytics_service import (
    RECENT_SESSIONS_LIMIT,
    UPCOMING_DEADLINES_LIMIT,
    WEEKLY_WINDOW_DAYS,
)


@dataclass(frozen=True)
class StudyDashboard:
    """Everything the analytics view shows, computed from one snapshot."""

    generated_at: datetime
    total_study_hours: float
    weekly_study_hours: float
    completion_rate: float
    recommendations: list[str]
    subject_breakdown: list[SubjectProgress]
    upcoming_deadlines: list[Assignment]
    recent_sessions: list[StudySession]


class StudyDashboardService:
    """Computes metrics and recommendations against a fresh store snapshot on every call."""

    def __init__(
        self,
        store: StudyStore,
        weekly_window_days: int = WEEKLY_WINDOW_DAYS,
        recent_sessions_limit: int = RECENT_SESSIONS_LIMIT,
        upcoming_deadlines_limit: int = UPCOMING_DEADLINES_LIMIT,
    ) -> None:
        self.store = store
        self.analytics = StudyAnalyticsService()
        self.recommender = RecommendationService()
        self.weekly_window_days = weekly_window_days
        self.recent_sessions_limit = recent_sessions_limit
        self.upcoming_deadlines_limit = upcoming_deadlines_limit

    def total_study_hours(self) -> float:
        return self.analytics.total_study_hours(self.store.snapshot())

    def weekly_study_hours(self) -> float:
        return self.analytics.weekly_study_hours(
            self.store.snapshot(), self.store.now, self.weekly_window_days
        )

    def completion_rate(self) -> float:
        return self.analytics.completion_rate(self.store.snapshot())

    def recommendations(self) -> list[str]:
        return self.recommender.recommendations(self.store.snapshot(), self.store.now)

    def build_dashboard(self) -> StudyDashboard:
        """Compute every figure from a single snapshot and a single reading of the clock."""
        snapshot = self.store.snapshot()
        now = self.store.now
        return StudyDashboard(
            generated_at=now,
            total_study_hours=self.analytics.total_study_hours(snapshot),
            weekly_study_hours=self.analytics.weekly_study_hours(
                snapshot, now, self.weekly_window_days
            ),
            completion_rate=self.analytics.completion_rate(snapshot),
            recommendations=self.recommender.recommendations(snapshot, now),
            subject_breakdown=self.analytics.subject_breakdown(snapshot),
            upcoming_deadlines=self.analytics.upcoming_deadlines(
                snapshot, now, self.upcoming_deadlines_limit
            ),
            recent_sessions=self.analytics.recent_sessions(snapshot, self.recent_sessions_limit),
        )
