from .key_value_store import SqlAlchemyKeyValueStore
from .persistence_gateway import StudyPersistenceGateway

__all__ = ["SqlAlchemyKeyValueStore", "StudyPersistenceGateway"]
