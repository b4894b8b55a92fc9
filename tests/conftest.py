"""Pytest configuration and fixtures."""

from collections.abc import Generator
from datetime import UTC, datetime, timedelta

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from studyflow import models  # noqa: F401
from studyflow.application.study.store import StudyStore
from studyflow.database import Base
from studyflow.domain.common.value_objects import AssignmentId, StudySessionId, SubjectId
from studyflow.domain.study.entities import Assignment, Priority, StudySession, Subject
from studyflow.infrastructure.study import SqlAlchemyKeyValueStore, StudyPersistenceGateway

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite:///:memory:"

test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

# Fixed reference time used across tests
NOW = datetime(2026, 3, 10, 12, 0, 0, tzinfo=UTC)


class FakeClock:
    """Callable clock that only moves when told to."""

    def __init__(self, now: datetime = NOW) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def session_factory() -> Generator[sessionmaker[Session], None, None]:
    """Create fresh tables for each test."""
    Base.metadata.create_all(bind=test_engine)
    try:
        yield TestSessionLocal
    finally:
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def key_value_store(session_factory: sessionmaker[Session]) -> SqlAlchemyKeyValueStore:
    return SqlAlchemyKeyValueStore(session_factory)


@pytest.fixture
def gateway(key_value_store: SqlAlchemyKeyValueStore) -> StudyPersistenceGateway:
    return StudyPersistenceGateway(key_value_store)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store(clock: FakeClock) -> StudyStore:
    """Store with a fixed clock and a deterministic color."""
    return StudyStore(clock=clock, color_picker=lambda colors: colors[0])


# --- Entity factories ---


def make_subject(
    id: str = "1",
    name: str = "Data Structures",
    studied_hours: float = 0.0,
    target_hours: float = 40.0,
    last_studied: datetime | None = None,
    color: str = "#FF6B6B",
) -> Subject:
    return Subject.create_with_id(
        id=SubjectId(id),
        name=name,
        color=color,
        studied_hours=studied_hours,
        target_hours=target_hours,
        last_studied=last_studied,
    )


def make_assignment(
    id: str = "1",
    title: str = "Lab Report",
    subject: str = "OS",
    deadline: datetime = NOW + timedelta(days=10),
    priority: Priority = Priority.MEDIUM,
    completed: bool = False,
) -> Assignment:
    return Assignment.create_with_id(
        id=AssignmentId(id),
        title=title,
        subject=subject,
        deadline=deadline,
        priority=priority,
        completed=completed,
    )


def make_session(
    id: str = "1",
    subject_id: str = "1",
    subject_name: str = "Data Structures",
    duration: float = 1.0,
    date: datetime = NOW,
) -> StudySession:
    return StudySession.create_with_id(
        id=StudySessionId(id),
        subject_id=SubjectId(subject_id),
        subject_name=subject_name,
        duration=duration,
        date=date,
    )
