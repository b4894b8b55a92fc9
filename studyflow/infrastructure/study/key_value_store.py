"""Durable key-value storage backed by a single SQLAlchemy table."""

import structlog
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from studyflow.exceptions import PersistenceError
from studyflow.models import StorageRecord

logger = structlog.get_logger(__name__)


class SqlAlchemyKeyValueStore:
    """Stores serialized text values under string keys.

    Each call opens and closes its own session, so reads and writes are
    independent; no transaction spans more than one key.
    """

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self.session_factory = session_factory

    def get(self, key: str) -> str | None:
        """
        Read the value stored under a key.

        Returns:
            The stored text, or None if the key is absent

        Raises:
            PersistenceError: If the database cannot be read
        """
        try:
            with self.session_factory() as db:
                stmt = select(StorageRecord.value).where(StorageRecord.key == key)
                return db.execute(stmt).scalar_one_or_none()
        except SQLAlchemyError as e:
            raise PersistenceError(key, str(e)) from e

    def set(self, key: str, value: str) -> None:
        """
        Store a value under a key, replacing any previous value.

        Raises:
            PersistenceError: If the database cannot be written
        """
        try:
            with self.session_factory() as db:
                record = db.get(StorageRecord, key)
                if record is None:
                    db.add(StorageRecord(key=key, value=value))
                else:
                    record.value = value
                db.commit()
        except SQLAlchemyError as e:
            raise PersistenceError(key, str(e)) from e
        logger.debug("storage_record_written", key=key, size=len(value))
