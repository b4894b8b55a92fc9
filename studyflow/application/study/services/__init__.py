from .dashboard_service import StudyDashboard, StudyDashboardService
from .persistence_sync import PersistenceSyncSubscriber, attach_persistence

__all__ = [
    "PersistenceSyncSubscriber",
    "StudyDashboard",
    "StudyDashboardService",
    "attach_persistence",
]
