from fastapi import APIRouter, Depends

from union_office.dependencies import get_storage, get_tenant_context
from union_office.models.tenant_context import TenantContext
from union_office.repositories.storage import StorageAdapter
from union_office.schemas.notification_schemas import ActivityLogListResponse
from union_office.services.activity_service import ActivityService

router = APIRouter()


@router.get("", response_model=ActivityLogListResponse)
async def list_activity_logs(
    context: TenantContext = Depends(get_tenant_context),
    storage: StorageAdapter = Depends(get_storage),
):
    """
    Get the activity log of the current office, newest first.

    - **Requires OWNER or ADMIN role**
    """
    service = ActivityService(storage)
    logs = service.list_logs(context)
    return ActivityLogListResponse(logs=logs, total=len(logs))
