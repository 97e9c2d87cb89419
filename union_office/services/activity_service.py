import logging

from union_office.core.exceptions import ForbiddenException
from union_office.models.activity_log import ActivityLog
from union_office.models.tenant_context import TenantContext
from union_office.models.user import User
from union_office.repositories.activity_log_repository import ActivityLogRepository
from union_office.repositories.storage import StorageAdapter

logger = logging.getLogger(__name__)


class ActivityService:
    """Service for the office activity log"""

    def __init__(self, storage: StorageAdapter, limit: int | None = None):
        self.repo = ActivityLogRepository(storage, limit=limit)

    def log(self, user: User, action: str, details: str, sede_id: str | None = None) -> ActivityLog:
        """
        Append one audit row for an action performed by user.

        Args:
            user: Acting user
            action: Short action label ("New Member", "Login", ...)
            details: Free-text description
            sede_id: Office the action belongs to (defaults to the user's)

        Returns:
            The stored ActivityLog entry
        """
        entry = ActivityLog(
            user_id=user.id,
            user_name=user.operator_name,
            action=action,
            details=details,
            sede_id=sede_id or user.sede_id,
        )
        logger.debug("Activity %s by %s in office %s", action, user.id, entry.sede_id)
        return self.repo.append(entry)

    def list_logs(self, context: TenantContext) -> list[ActivityLog]:
        """
        Activity log of the office, newest first (OWNER or ADMIN).

        Raises:
            ForbiddenException: If user is operator or viewer
        """
        if not context.is_admin_or_higher():
            raise ForbiddenException("Only owners and admins can read the activity log")
        return self.repo.get_by_tenant(context.sede_id)
