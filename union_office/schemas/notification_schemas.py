from pydantic import BaseModel

from union_office.models.activity_log import ActivityLog
from union_office.models.notification import Notification


class NotificationListResponse(BaseModel):
    notifications: list[Notification]
    total: int
    unread: int


class DeadlineScanResponse(BaseModel):
    """Reminders created by one deadline scan"""

    created: list[Notification]
    created_count: int
    emails_sent: int = 0


class MarkAllReadResponse(BaseModel):
    updated: int


class ActivityLogListResponse(BaseModel):
    logs: list[ActivityLog]
    total: int
