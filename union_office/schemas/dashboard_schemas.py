from pydantic import BaseModel

from union_office.models.case import Case
from union_office.models.notification import Notification


class DashboardResponse(BaseModel):
    """Office overview returned on every dashboard refresh"""

    members_total: int
    active_members: int
    cases_total: int
    open_cases: int
    urgent_cases: int
    events_total: int
    documents_total: int
    upcoming_deadlines: list[Case]
    notifications: list[Notification]
    unread_notifications: int
    new_reminders: int
