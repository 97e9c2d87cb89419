from datetime import date
from enum import Enum as PyEnum

from union_office.models.record import TenantRecord


class CalendarEventType(str, PyEnum):
    SCHEDULED = "scheduled"
    CONFIRMED = "confirmed"
    URGENT = "urgent"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    POSTPONED = "postponed"


class CalendarEventCategory(str, PyEnum):
    MEETING = "meeting"
    CASE = "case"
    DEADLINE = "deadline"
    OTHER = "other"


class CalendarEvent(TenantRecord):
    """
    Scheduled item on the office calendar.

    Case deadlines are not stored here; they are derived from case due
    dates when needed.
    """

    title: str
    date: date
    type: CalendarEventType = CalendarEventType.SCHEDULED
    category: CalendarEventCategory = CalendarEventCategory.OTHER
    critical: bool = False
    description: str = ""
    related_id: str | None = None
