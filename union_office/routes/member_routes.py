from fastapi import APIRouter, Depends, status

from union_office.dependencies import get_storage, get_tenant_context
from union_office.models.member import Member
from union_office.models.tenant_context import TenantContext
from union_office.repositories.storage import StorageAdapter
from union_office.schemas.member_schemas import MemberCreate, MemberListResponse, MemberUpdate
from union_office.services.member_service import MemberService

router = APIRouter()


@router.post("", response_model=Member, status_code=status.HTTP_201_CREATED)
async def create_member(
    data: MemberCreate,
    context: TenantContext = Depends(get_tenant_context),
    storage: StorageAdapter = Depends(get_storage),
):
    """Enroll a new member in the current office"""
    service = MemberService(storage)
    return service.create_member(data, context).record


@router.get("", response_model=MemberListResponse)
async def list_members(
    search: str | None = None,
    context: TenantContext = Depends(get_tenant_context),
    storage: StorageAdapter = Depends(get_storage),
):
    """Get all members of the current office, optionally filtered by name or tax code"""
    service = MemberService(storage)
    members = service.search(search, context) if search else service.list_records(context)
    return MemberListResponse(members=members, total=len(members))


@router.get("/{member_id}", response_model=Member)
async def get_member(
    member_id: str,
    context: TenantContext = Depends(get_tenant_context),
    storage: StorageAdapter = Depends(get_storage),
):
    """Get specific member details"""
    service = MemberService(storage)
    return service.get(member_id, context)


@router.patch("/{member_id}", response_model=Member)
async def update_member(
    member_id: str,
    data: MemberUpdate,
    context: TenantContext = Depends(get_tenant_context),
    storage: StorageAdapter = Depends(get_storage),
):
    """Update member details"""
    service = MemberService(storage)
    return service.update_member(member_id, data, context).record


@router.delete("/{member_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_member(
    member_id: str,
    context: TenantContext = Depends(get_tenant_context),
    storage: StorageAdapter = Depends(get_storage),
):
    """Delete a member (ids of other offices are ignored)"""
    service = MemberService(storage)
    service.delete(member_id, context)
    return None
