from datetime import date, timedelta

from fastapi import APIRouter, Depends

from union_office.config import settings
from union_office.dependencies import get_storage, get_tenant_context
from union_office.models.case import CaseStatus
from union_office.models.member import MemberStatus
from union_office.models.tenant_context import TenantContext
from union_office.repositories.storage import StorageAdapter
from union_office.schemas.dashboard_schemas import DashboardResponse
from union_office.services.case_service import CaseService
from union_office.services.deadline_service import DeadlineScanner
from union_office.services.document_service import DocumentService
from union_office.services.event_service import EventService
from union_office.services.member_service import MemberService
from union_office.services.notification_service import NotificationService

router = APIRouter()

CLOSED_STATUSES = (CaseStatus.COMPLETED, CaseStatus.ARCHIVED)


@router.get("", response_model=DashboardResponse)
async def get_dashboard(
    context: TenantContext = Depends(get_tenant_context),
    storage: StorageAdapter = Depends(get_storage),
):
    """
    Office overview.

    Every call refreshes the office data and runs the deadline scan, so
    reminders for cases due soon appear here at most once per case per day.
    """
    new_reminders = DeadlineScanner(storage).scan(context.sede_id)

    members = MemberService(storage).list_records(context)
    cases = CaseService(storage).list_records(context)
    notifications = NotificationService(storage).list_notifications(context)

    horizon = date.today() + timedelta(days=settings.DEADLINE_WINDOW_DAYS)
    upcoming = sorted(
        (
            c
            for c in cases
            if c.due_date is not None
            and date.today() <= c.due_date <= horizon
            and c.status not in CLOSED_STATUSES
        ),
        key=lambda c: c.due_date,
    )

    return DashboardResponse(
        members_total=len(members),
        active_members=sum(1 for m in members if m.status == MemberStatus.ACTIVE),
        cases_total=len(cases),
        open_cases=sum(1 for c in cases if c.status not in CLOSED_STATUSES),
        urgent_cases=sum(1 for c in cases if c.status == CaseStatus.URGENT),
        events_total=len(EventService(storage).list_records(context)),
        documents_total=len(DocumentService(storage).list_records(context)),
        upcoming_deadlines=upcoming,
        notifications=notifications,
        unread_notifications=sum(1 for n in notifications if not n.is_read),
        new_reminders=len(new_reminders),
    )
