"""Wires settings, storage, the study store and its read services together."""

from dataclasses import dataclass

import structlog
from sqlalchemy.orm import Session, sessionmaker

from studyflow.application.study.services import StudyDashboardService, attach_persistence
from studyflow.application.study.store import StudyStore
from studyflow.config import Settings, configure_logging, get_settings
from studyflow.database import initialize_database
from studyflow.infrastructure.study import SqlAlchemyKeyValueStore, StudyPersistenceGateway

logger = structlog.get_logger(__name__)


@dataclass
class StudyflowApp:
    """What a presentation layer holds on to: the store for mutations, the dashboard for reads."""

    settings: Settings
    store: StudyStore
    dashboard: StudyDashboardService
    gateway: StudyPersistenceGateway


def create_app(
    settings: Settings | None = None,
    session_factory: sessionmaker[Session] | None = None,
) -> StudyflowApp:
    """
    Build a ready-to-use application.

    Loads the persisted collections once and subscribes the persistence
    sync so every later mutation is mirrored to durable storage.

    Args:
        settings: Settings to use (defaults to the cached environment settings)
        session_factory: Existing session factory; a new database is initialized if omitted

    Returns:
        StudyflowApp with a loaded store
    """
    settings = settings or get_settings()
    configure_logging(settings.ENVIRONMENT)

    if session_factory is None:
        session_factory = initialize_database(settings)

    gateway = StudyPersistenceGateway(
        SqlAlchemyKeyValueStore(session_factory),
        subjects_key=settings.subjects_key,
        assignments_key=settings.assignments_key,
        sessions_key=settings.sessions_key,
    )
    store = StudyStore(default_target_hours=settings.DEFAULT_TARGET_HOURS)
    store.load(gateway)
    attach_persistence(store, gateway)

    dashboard = StudyDashboardService(
        store,
        weekly_window_days=settings.WEEKLY_WINDOW_DAYS,
        recent_sessions_limit=settings.RECENT_SESSIONS_LIMIT,
        upcoming_deadlines_limit=settings.UPCOMING_DEADLINES_LIMIT,
    )
    logger.info("studyflow_started", environment=settings.ENVIRONMENT)
    return StudyflowApp(settings=settings, store=store, dashboard=dashboard, gateway=gateway)
