"""Domain service producing rule-based study recommendations."""

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Final

from studyflow.domain.study.entities import Subject
from studyflow.domain.study.snapshot import StudySnapshot

LOW_PROGRESS_THRESHOLD: Final[float] = 30.0
UPCOMING_DEADLINE_DAYS: Final[int] = 3

DSA_KEYWORDS: Final[tuple[str, ...]] = ("dsa", "algorithm")
DBMS_KEYWORDS: Final[tuple[str, ...]] = ("dbms", "database")
OS_KEYWORDS: Final[tuple[str, ...]] = ("os", "operating")
GATE_KEYWORD: Final[str] = "gate"

OVERDUE_MESSAGE: Final[str] = (
    "⚠️ You have {count} overdue assignment(s). Complete them urgently!"
)
UPCOMING_MESSAGE: Final[str] = "📅 {count} assignment(s) due in the next 3 days."
DSA_MESSAGE: Final[str] = (
    "💡 DSA needs attention: Practice LeetCode/CodeForces problems daily "
    "(Arrays, LinkedLists, Trees)."
)
DBMS_MESSAGE: Final[str] = (
    "💡 DBMS: Focus on Normalization, SQL queries, Transactions, and Indexing for GATE."
)
OS_MESSAGE: Final[str] = (
    "💡 OS: Cover Process Scheduling, Deadlocks, Memory Management, and Paging."
)
LOW_PROGRESS_MESSAGE: Final[str] = (
    "💡 {name}: You're at {progress}% progress. Increase study time!"
)
GATE_MESSAGE: Final[str] = (
    "🎯 GATE Prep: Solve previous year questions and take mock tests regularly."
)
ENCOURAGEMENT_MESSAGES: Final[tuple[str, str]] = (
    "✅ Great work! Keep maintaining your study schedule.",
    "📚 Consider adding more subjects or increasing target hours for comprehensive preparation.",
)


def _round_half_up(value: float) -> int:
    # Exact binary value, so 0.49999999999999994 stays 0
    return int(Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))


class RecommendationService:
    """Stateless domain service for advisory messages.

    Rules, all evaluated in this order and concatenated:
    1. Overdue incomplete assignments (one combined message)
    2. Incomplete assignments due within the next 3 days (one combined message)
    3. One message per subject below 30% progress, chosen by name keywords
    4. A GATE preparation message if any subject name mentions GATE
    5. Two encouragement messages if nothing above fired
    """

    def recommendations(self, snapshot: StudySnapshot, now: datetime) -> list[str]:
        messages: list[str] = []

        overdue = sum(1 for a in snapshot.assignments if a.is_overdue(now))
        if overdue > 0:
            messages.append(OVERDUE_MESSAGE.format(count=overdue))

        upcoming = sum(
            1 for a in snapshot.assignments if a.is_due_soon(now, UPCOMING_DEADLINE_DAYS)
        )
        if upcoming > 0:
            messages.append(UPCOMING_MESSAGE.format(count=upcoming))

        messages.extend(
            self._low_progress_message(s)
            for s in snapshot.subjects
            if s.progress < LOW_PROGRESS_THRESHOLD
        )

        if any(s.name_contains(GATE_KEYWORD) for s in snapshot.subjects):
            messages.append(GATE_MESSAGE)

        if not messages:
            messages.extend(ENCOURAGEMENT_MESSAGES)

        return messages

    @staticmethod
    def _low_progress_message(subject: Subject) -> str:
        if subject.name_contains(*DSA_KEYWORDS):
            return DSA_MESSAGE
        if subject.name_contains(*DBMS_KEYWORDS):
            return DBMS_MESSAGE
        if subject.name_contains(*OS_KEYWORDS):
            return OS_MESSAGE
        return LOW_PROGRESS_MESSAGE.format(
            name=subject.name, progress=_round_half_up(subject.progress)
        )
