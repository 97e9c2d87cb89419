from datetime import datetime
from enum import Enum as PyEnum

from pydantic import Field

from union_office.models.record import TenantRecord


class NotificationSeverity(str, PyEnum):
    INFO = "info"
    WARNING = "warning"
    DANGER = "danger"


class Notification(TenantRecord):
    """User-facing alert, either derived (deadline reminders) or posted directly"""

    title: str
    message: str
    severity: NotificationSeverity = NotificationSeverity.INFO
    date: datetime = Field(default_factory=datetime.now)
    is_read: bool = False
    target_view: str = "dashboard"
