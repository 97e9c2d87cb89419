import datetime

from pydantic import BaseModel, Field

from union_office.models.calendar_event import CalendarEvent, CalendarEventCategory, CalendarEventType


class EventCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    date: datetime.date
    type: CalendarEventType = CalendarEventType.SCHEDULED
    category: CalendarEventCategory = CalendarEventCategory.OTHER
    critical: bool = False
    description: str = ""
    related_id: str | None = None


class EventUpdate(BaseModel):
    title: str | None = Field(None, min_length=1, max_length=255)
    date: datetime.date | None = None
    type: CalendarEventType | None = None
    category: CalendarEventCategory | None = None
    critical: bool | None = None
    description: str | None = None
    related_id: str | None = None


class EventListResponse(BaseModel):
    events: list[CalendarEvent]
    total: int
