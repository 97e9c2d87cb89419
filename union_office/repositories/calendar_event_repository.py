from datetime import date

from union_office.models.calendar_event import CalendarEvent
from union_office.repositories.collection_repository import CollectionRepository
from union_office.repositories.storage import StorageKeys


class CalendarEventRepository(CollectionRepository[CalendarEvent]):
    """Repository for CalendarEvent records"""

    key = StorageKeys.EVENTS
    model = CalendarEvent

    def get_in_range(
        self, sede_id: str, start_date: date | None = None, end_date: date | None = None
    ) -> list[CalendarEvent]:
        """Events of the office between start_date and end_date (both inclusive)"""
        events = self.get_by_tenant(sede_id)
        if start_date is not None:
            events = [e for e in events if e.date >= start_date]
        if end_date is not None:
            events = [e for e in events if e.date <= end_date]
        return sorted(events, key=lambda e: e.date)
