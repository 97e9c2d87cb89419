from datetime import datetime

from pydantic import Field

from union_office.models.record import TenantRecord


class ActivityLog(TenantRecord):
    """Immutable audit row written as a side effect of every mutation"""

    user_id: str
    user_name: str
    action: str
    details: str
    timestamp: datetime = Field(default_factory=datetime.now)
