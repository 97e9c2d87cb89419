import logging

from union_office.core.exceptions import NotFoundException
from union_office.models.notification import Notification
from union_office.models.tenant_context import TenantContext
from union_office.repositories.notification_repository import NotificationRepository
from union_office.repositories.storage import StorageAdapter

logger = logging.getLogger(__name__)


class NotificationService:
    """Service for office notifications"""

    def __init__(self, storage: StorageAdapter):
        self.repo = NotificationRepository(storage)

    def list_notifications(self, context: TenantContext, unread_only: bool = False) -> list[Notification]:
        """Notifications of the office, newest first"""
        notifications = self.repo.get_by_tenant(context.sede_id)
        if unread_only:
            notifications = [n for n in notifications if not n.is_read]
        return notifications

    def save_notification(self, notification: Notification) -> bool:
        """
        Idempotent insert: a notification whose id is already stored is ignored.

        The caller is responsible for setting sede_id.

        Returns:
            True if the notification was inserted
        """
        inserted = self.repo.insert_if_absent(notification)
        if inserted:
            logger.info("Notification %s added for office %s", notification.id, notification.sede_id)
        return inserted

    def post(self, notification: Notification, context: TenantContext) -> bool:
        """Insert a notification into the acting user's office"""
        notification.sede_id = context.sede_id
        return self.save_notification(notification)

    def mark_as_read(self, notification_id: str, context: TenantContext) -> None:
        """
        Mark a notification of the acting user's office as read.

        Raises:
            NotFoundException: If no such notification exists in this office
        """
        if not self.repo.mark_as_read(notification_id, context.sede_id):
            raise NotFoundException("Notification not found")

    def mark_all_as_read(self, context: TenantContext) -> int:
        return self.repo.mark_all_as_read(context.sede_id)
