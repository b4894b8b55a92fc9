from .persistence_gateway import StudyPersistenceGatewayProtocol

__all__ = ["StudyPersistenceGatewayProtocol"]
