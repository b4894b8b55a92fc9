"""Mirrors store changes to durable storage."""

from collections.abc import Callable

import structlog

from studyflow.application.study.protocols import StudyPersistenceGatewayProtocol
from studyflow.application.study.store import StudyStore
from studyflow.domain.study.events import Collection, StudyEvent
from studyflow.exceptions import PersistenceError

logger = structlog.get_logger(__name__)


class PersistenceSyncSubscriber:
    """Change handler that saves every collection touched by an event.

    Saves are synchronous and fire-and-forget: a failed save is logged
    and never reaches the code that triggered the mutation.
    """

    def __init__(self, store: StudyStore, gateway: StudyPersistenceGatewayProtocol) -> None:
        self.store = store
        self.gateway = gateway

    def __call__(self, event: StudyEvent) -> None:
        snapshot = self.store.snapshot()
        savers: dict[Collection, Callable[[], None]] = {
            Collection.SUBJECTS: lambda: self.gateway.save_subjects(snapshot.subjects),
            Collection.ASSIGNMENTS: lambda: self.gateway.save_assignments(snapshot.assignments),
            Collection.SESSIONS: lambda: self.gateway.save_sessions(snapshot.sessions),
        }
        # Fixed order keeps writes deterministic
        for collection in Collection:
            if collection not in event.collections:
                continue
            try:
                savers[collection]()
            except PersistenceError as e:
                logger.error(
                    "persistence_save_failed",
                    collection=collection.value,
                    event_type=event.event_type,
                    error=str(e),
                )


def attach_persistence(
    store: StudyStore, gateway: StudyPersistenceGatewayProtocol
) -> Callable[[], None]:
    """Subscribe a PersistenceSyncSubscriber to the store; returns the unsubscribe callable."""
    return store.subscribe(PersistenceSyncSubscriber(store, gateway))
