from union_office.models.notification import Notification
from union_office.repositories.collection_repository import CollectionRepository
from union_office.repositories.storage import StorageKeys


class NotificationRepository(CollectionRepository[Notification]):
    """Repository for Notification records (newest first)"""

    key = StorageKeys.NOTIFICATIONS
    model = Notification

    def insert_if_absent(self, notification: Notification) -> bool:
        """
        Insert a notification unless one with the same id already exists.

        The id check is store-wide. New entries go to the front of the
        collection. Returns True when the notification was inserted.
        """
        notifications, revision = self._load()
        if any(n.id == notification.id for n in notifications):
            return False
        notifications.insert(0, notification)
        self._store(notifications, revision)
        return True

    def mark_as_read(self, notification_id: str, sede_id: str) -> bool:
        """
        Flag one notification of the office as read.

        Returns False if no notification with that id belongs to the office.
        """
        notifications, revision = self._load()
        for notification in notifications:
            if notification.id == notification_id and notification.sede_id == sede_id:
                notification.is_read = True
                self._store(notifications, revision)
                return True
        return False

    def mark_all_as_read(self, sede_id: str) -> int:
        """Flag every unread notification of the office as read, returning how many changed"""
        notifications, revision = self._load()
        changed = 0
        for notification in notifications:
            if notification.sede_id == sede_id and not notification.is_read:
                notification.is_read = True
                changed += 1
        if changed:
            self._store(notifications, revision)
        return changed
