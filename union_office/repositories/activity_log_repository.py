from union_office.config import settings
from union_office.models.activity_log import ActivityLog
from union_office.repositories.collection_repository import CollectionRepository
from union_office.repositories.storage import StorageAdapter, StorageKeys


class ActivityLogRepository(CollectionRepository[ActivityLog]):
    """
    Repository for the activity log.

    The collection is kept newest-first and capped at `limit` entries
    across all offices combined; the oldest entries are dropped, whichever
    office they belong to.
    """

    key = StorageKeys.LOGS
    model = ActivityLog

    def __init__(self, storage: StorageAdapter, limit: int | None = None):
        super().__init__(storage)
        self.limit = limit if limit is not None else settings.ACTIVITY_LOG_LIMIT

    def append(self, entry: ActivityLog) -> ActivityLog:
        """Add an entry at the front and trim the log to the cap"""
        # Existing rows are kept raw; only the new entry is serialized.
        snapshot = self.storage.snapshot(self.key)
        logs = [entry.model_dump(mode="json")] + snapshot.records
        self.storage.write(self.key, logs[: self.limit], expected_revision=snapshot.revision)
        return entry
