from datetime import date

from union_office.models.calendar_event import CalendarEvent
from union_office.models.tenant_context import TenantContext
from union_office.repositories.calendar_event_repository import CalendarEventRepository
from union_office.schemas.event_schemas import EventCreate, EventUpdate
from union_office.services.record_service import SaveResult, TenantRecordService


class EventService(TenantRecordService[CalendarEvent]):
    """Service for calendar events"""

    repository_class = CalendarEventRepository
    not_found_message = "Event not found"
    create_label = "New Event"
    update_label = "Event Updated"
    delete_label = "Event Deleted"

    def describe(self, record: CalendarEvent) -> str:
        return record.title

    def create_details(self, record: CalendarEvent) -> str:
        return f"Scheduled: {record.title}"

    def update_details(self, record: CalendarEvent) -> str:
        return f"Updated: {record.title}"

    def delete_details(self, record_id: str) -> str:
        return f"Removed appointment ID: {record_id}"

    def list_events(
        self, context: TenantContext, start_date: date | None = None, end_date: date | None = None
    ) -> list[CalendarEvent]:
        return self.repo.get_in_range(context.sede_id, start_date, end_date)

    def create_event(self, data: EventCreate, context: TenantContext) -> SaveResult[CalendarEvent]:
        return self.save(CalendarEvent(**data.model_dump()), context)

    def update_event(self, event_id: str, data: EventUpdate, context: TenantContext) -> SaveResult[CalendarEvent]:
        """
        Update event fields that were provided.

        Raises:
            NotFoundException: If event not found in this office
            ValidationException: If a required field is set to null
        """
        event = self.get(event_id, context)
        return self.save(self.apply_changes(event, data.model_dump(exclude_unset=True)), context)
