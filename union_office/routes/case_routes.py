from fastapi import APIRouter, Depends, status

from union_office.dependencies import get_storage, get_tenant_context
from union_office.models.case import Case, CaseStatus
from union_office.models.tenant_context import TenantContext
from union_office.repositories.storage import StorageAdapter
from union_office.schemas.case_schemas import (
    CaseCreate,
    CaseListResponse,
    CaseNoteCreate,
    CaseStatusUpdate,
    CaseUpdate,
)
from union_office.services.case_service import CaseService

router = APIRouter()


@router.post("", response_model=Case, status_code=status.HTTP_201_CREATED)
async def create_case(
    data: CaseCreate,
    context: TenantContext = Depends(get_tenant_context),
    storage: StorageAdapter = Depends(get_storage),
):
    """Open a new case in the current office"""
    service = CaseService(storage)
    return service.create_case(data, context).record


@router.get("", response_model=CaseListResponse)
async def list_cases(
    status: CaseStatus | None = None,
    member_id: str | None = None,
    context: TenantContext = Depends(get_tenant_context),
    storage: StorageAdapter = Depends(get_storage),
):
    """
    Get cases of the current office.

    Query Parameters:
    - **status**: Filter by case status
    - **member_id**: Filter by linked member
    """
    service = CaseService(storage)
    cases = service.list_cases(context, status=status, member_id=member_id)
    return CaseListResponse(cases=cases, total=len(cases))


@router.get("/{case_id}", response_model=Case)
async def get_case(
    case_id: str,
    context: TenantContext = Depends(get_tenant_context),
    storage: StorageAdapter = Depends(get_storage),
):
    """Get case details including timeline and attachment"""
    service = CaseService(storage)
    return service.get(case_id, context)


@router.patch("/{case_id}", response_model=Case)
async def update_case(
    case_id: str,
    data: CaseUpdate,
    context: TenantContext = Depends(get_tenant_context),
    storage: StorageAdapter = Depends(get_storage),
):
    """Update case details"""
    service = CaseService(storage)
    return service.update_case(case_id, data, context).record


@router.put("/{case_id}/status", response_model=Case)
async def change_case_status(
    case_id: str,
    data: CaseStatusUpdate,
    context: TenantContext = Depends(get_tenant_context),
    storage: StorageAdapter = Depends(get_storage),
):
    """Move a case to another status (recorded in the timeline)"""
    service = CaseService(storage)
    return service.change_status(case_id, data.status, context)


@router.post("/{case_id}/timeline", response_model=Case, status_code=status.HTTP_201_CREATED)
async def add_case_note(
    case_id: str,
    data: CaseNoteCreate,
    context: TenantContext = Depends(get_tenant_context),
    storage: StorageAdapter = Depends(get_storage),
):
    """Append a note to the case timeline"""
    service = CaseService(storage)
    return service.add_note(case_id, data.content, context)


@router.delete("/{case_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_case(
    case_id: str,
    context: TenantContext = Depends(get_tenant_context),
    storage: StorageAdapter = Depends(get_storage),
):
    """Delete a case entirely"""
    service = CaseService(storage)
    service.delete(case_id, context)
    return None
