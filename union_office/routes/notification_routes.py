from fastapi import APIRouter, Depends, status

from union_office.dependencies import get_mail_service, get_storage, get_tenant_context
from union_office.models.tenant_context import TenantContext
from union_office.repositories.storage import StorageAdapter
from union_office.schemas.notification_schemas import (
    DeadlineScanResponse,
    MarkAllReadResponse,
    NotificationListResponse,
)
from union_office.services.deadline_service import DeadlineScanner
from union_office.services.mail_service import MailService
from union_office.services.notification_service import NotificationService

router = APIRouter()


@router.get("", response_model=NotificationListResponse)
async def list_notifications(
    unread_only: bool = False,
    context: TenantContext = Depends(get_tenant_context),
    storage: StorageAdapter = Depends(get_storage),
):
    """Get notifications of the current office, newest first"""
    service = NotificationService(storage)
    notifications = service.list_notifications(context, unread_only=unread_only)
    unread = sum(1 for n in notifications if not n.is_read)
    return NotificationListResponse(notifications=notifications, total=len(notifications), unread=unread)


@router.post("/{notification_id}/read", status_code=status.HTTP_204_NO_CONTENT)
async def mark_notification_read(
    notification_id: str,
    context: TenantContext = Depends(get_tenant_context),
    storage: StorageAdapter = Depends(get_storage),
):
    """Mark one notification of the current office as read"""
    service = NotificationService(storage)
    service.mark_as_read(notification_id, context)
    return None


@router.post("/read-all", response_model=MarkAllReadResponse)
async def mark_all_notifications_read(
    context: TenantContext = Depends(get_tenant_context),
    storage: StorageAdapter = Depends(get_storage),
):
    service = NotificationService(storage)
    return MarkAllReadResponse(updated=service.mark_all_as_read(context))


@router.post("/scan", response_model=DeadlineScanResponse)
async def scan_deadlines(
    email_alerts: bool = False,
    context: TenantContext = Depends(get_tenant_context),
    storage: StorageAdapter = Depends(get_storage),
    mail: MailService = Depends(get_mail_service),
):
    """
    Run the deadline scan for the current office.

    Query Parameters:
    - **email_alerts**: Also email the caller about new "danger" reminders
    """
    scanner = DeadlineScanner(storage)
    created = scanner.scan(context.sede_id)
    sent = scanner.email_alerts(created, context.user, mail) if email_alerts else 0
    return DeadlineScanResponse(created=created, created_count=len(created), emails_sent=sent)
