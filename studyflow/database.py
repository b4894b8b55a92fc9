"""Engine and session factory for the durable study storage."""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from studyflow.config import Settings


class Base(DeclarativeBase):
    """Declarative base for the storage tables."""


_engine: Engine | None = None


def build_engine(database_url: str) -> Engine:
    """
    Create an engine for the given URL.

    SQLite shares one connection across threads so an in-memory database
    survives between sessions; other backends get a pre-pinged pool.
    """
    if database_url.startswith("sqlite"):
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(database_url, pool_pre_ping=True, pool_recycle=3600)


def initialize_database(settings: Settings) -> sessionmaker[Session]:
    """Create the engine, make sure the storage table exists and return the session factory."""
    global _engine  # noqa: PLW0603
    from studyflow import models  # noqa: F401  (registers StorageRecord on Base.metadata)

    dispose_engine()
    _engine = build_engine(settings.DATABASE_URL)
    Base.metadata.create_all(bind=_engine)
    return sessionmaker(autocommit=False, autoflush=False, bind=_engine)


def dispose_engine() -> None:
    """Close pooled connections and forget the engine."""
    global _engine  # noqa: PLW0603
    if _engine is None:
        return
    _engine.dispose()
    _engine = None
