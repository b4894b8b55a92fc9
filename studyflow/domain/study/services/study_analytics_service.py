"""Domain service computing aggregate study metrics from a snapshot."""

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Final

from studyflow.domain.study.entities import Assignment, StudySession, Subject
from studyflow.domain.study.snapshot import StudySnapshot

WEEKLY_WINDOW_DAYS: Final[int] = 7
URGENT_WITHIN_DAYS: Final[int] = 3
RECENT_SESSIONS_LIMIT: Final[int] = 10
UPCOMING_DEADLINES_LIMIT: Final[int] = 5


class DeadlineStatus(str, Enum):
    OVERDUE = "overdue"
    URGENT = "urgent"
    ON_TRACK = "on_track"


@dataclass(frozen=True)
class SubjectProgress:
    """Per-subject progress figures."""

    subject_name: str
    color: str
    studied_hours: float
    target_hours: float
    progress: float
    progress_indicator: float
    hours_remaining: float
    target_achieved: bool


class StudyAnalyticsService:
    """Stateless domain service for study metrics.

    Every method is a pure function of its arguments: nothing is cached
    and the snapshot is never modified.
    """

    @staticmethod
    def total_study_hours(snapshot: StudySnapshot) -> float:
        """Sum of studied hours across all subjects."""
        return sum((s.studied_hours for s in snapshot.subjects), 0.0)

    @staticmethod
    def weekly_study_hours(
        snapshot: StudySnapshot,
        now: datetime,
        window_days: int = WEEKLY_WINDOW_DAYS,
    ) -> float:
        """Sum of session durations logged at or after `now - window_days`."""
        window_start = now - timedelta(days=window_days)
        return sum(
            (s.duration for s in snapshot.sessions if s.occurred_since(window_start)),
            0.0,
        )

    @staticmethod
    def completion_rate(snapshot: StudySnapshot) -> float:
        """Percentage of completed assignments; 0 when there are none."""
        if not snapshot.assignments:
            return 0.0
        completed = sum(1 for a in snapshot.assignments if a.completed)
        return completed / len(snapshot.assignments) * 100

    @staticmethod
    def subject_progress(subject: Subject) -> SubjectProgress:
        return SubjectProgress(
            subject_name=subject.name,
            color=subject.color,
            studied_hours=subject.studied_hours,
            target_hours=subject.target_hours,
            progress=subject.progress,
            progress_indicator=subject.progress_indicator,
            hours_remaining=subject.hours_remaining,
            target_achieved=subject.target_achieved,
        )

    @staticmethod
    def subject_breakdown(snapshot: StudySnapshot) -> list[SubjectProgress]:
        """Progress figures for every subject, in insertion order."""
        return [StudyAnalyticsService.subject_progress(s) for s in snapshot.subjects]

    @staticmethod
    def deadline_status(
        assignment: Assignment,
        now: datetime,
        urgent_within_days: int = URGENT_WITHIN_DAYS,
    ) -> DeadlineStatus:
        days = assignment.days_until_deadline(now)
        if days < 0:
            return DeadlineStatus.OVERDUE
        if days <= urgent_within_days:
            return DeadlineStatus.URGENT
        return DeadlineStatus.ON_TRACK

    @staticmethod
    def pending_assignments(snapshot: StudySnapshot) -> list[Assignment]:
        return [a for a in snapshot.assignments if not a.completed]

    @staticmethod
    def completed_assignments(snapshot: StudySnapshot) -> list[Assignment]:
        return [a for a in snapshot.assignments if a.completed]

    @staticmethod
    def upcoming_deadlines(
        snapshot: StudySnapshot,
        now: datetime,
        limit: int = UPCOMING_DEADLINES_LIMIT,
    ) -> list[Assignment]:
        """
        Incomplete assignments that are not yet due, soonest first.

        Args:
            snapshot: Current store snapshot
            now: Reference time
            limit: Maximum number of assignments returned

        Returns:
            Up to `limit` assignments ordered by deadline ascending
        """
        upcoming = [a for a in snapshot.assignments if not a.completed and a.deadline >= now]
        upcoming.sort(key=lambda a: a.deadline)
        return upcoming[:limit]

    @staticmethod
    def recent_sessions(
        snapshot: StudySnapshot,
        limit: int = RECENT_SESSIONS_LIMIT,
    ) -> list[StudySession]:
        """The last `limit` logged sessions, newest first."""
        if limit <= 0:
            return []
        return list(reversed(snapshot.sessions[-limit:]))
