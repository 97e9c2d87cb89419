from datetime import date

from fastapi import APIRouter, Depends, status

from union_office.dependencies import get_storage, get_tenant_context
from union_office.models.calendar_event import CalendarEvent
from union_office.models.tenant_context import TenantContext
from union_office.repositories.storage import StorageAdapter
from union_office.schemas.event_schemas import EventCreate, EventListResponse, EventUpdate
from union_office.services.event_service import EventService

router = APIRouter()


@router.post("", response_model=CalendarEvent, status_code=status.HTTP_201_CREATED)
async def create_event(
    data: EventCreate,
    context: TenantContext = Depends(get_tenant_context),
    storage: StorageAdapter = Depends(get_storage),
):
    """Schedule a calendar event"""
    service = EventService(storage)
    return service.create_event(data, context).record


@router.get("", response_model=EventListResponse)
async def list_events(
    start_date: date | None = None,
    end_date: date | None = None,
    context: TenantContext = Depends(get_tenant_context),
    storage: StorageAdapter = Depends(get_storage),
):
    """Get calendar events of the current office, sorted by date"""
    service = EventService(storage)
    events = service.list_events(context, start_date=start_date, end_date=end_date)
    return EventListResponse(events=events, total=len(events))


@router.get("/{event_id}", response_model=CalendarEvent)
async def get_event(
    event_id: str,
    context: TenantContext = Depends(get_tenant_context),
    storage: StorageAdapter = Depends(get_storage),
):
    service = EventService(storage)
    return service.get(event_id, context)


@router.patch("/{event_id}", response_model=CalendarEvent)
async def update_event(
    event_id: str,
    data: EventUpdate,
    context: TenantContext = Depends(get_tenant_context),
    storage: StorageAdapter = Depends(get_storage),
):
    """Update an event (e.g. move it or change its type)"""
    service = EventService(storage)
    return service.update_event(event_id, data, context).record


@router.delete("/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_event(
    event_id: str,
    context: TenantContext = Depends(get_tenant_context),
    storage: StorageAdapter = Depends(get_storage),
):
    service = EventService(storage)
    service.delete(event_id, context)
    return None
