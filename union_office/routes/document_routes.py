from fastapi import APIRouter, Depends, status

from union_office.dependencies import get_storage, get_tenant_context
from union_office.models.document import Document
from union_office.models.tenant_context import TenantContext
from union_office.repositories.storage import StorageAdapter
from union_office.schemas.document_schemas import DocumentCreate, DocumentListResponse
from union_office.services.document_service import DocumentService

router = APIRouter()


@router.post("", response_model=Document, status_code=status.HTTP_201_CREATED)
async def create_document(
    data: DocumentCreate,
    context: TenantContext = Depends(get_tenant_context),
    storage: StorageAdapter = Depends(get_storage),
):
    """Store a document in the office archive"""
    service = DocumentService(storage)
    return service.create_document(data, context).record


@router.get("", response_model=DocumentListResponse)
async def list_documents(
    member_id: str | None = None,
    case_id: str | None = None,
    context: TenantContext = Depends(get_tenant_context),
    storage: StorageAdapter = Depends(get_storage),
):
    """Get documents of the current office, optionally by linked member or case"""
    service = DocumentService(storage)
    documents = service.list_documents(context, member_id=member_id, case_id=case_id)
    return DocumentListResponse(documents=documents, total=len(documents))


@router.get("/{document_id}", response_model=Document)
async def get_document(
    document_id: str,
    context: TenantContext = Depends(get_tenant_context),
    storage: StorageAdapter = Depends(get_storage),
):
    service = DocumentService(storage)
    return service.get(document_id, context)


@router.delete("/{document_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_document(
    document_id: str,
    context: TenantContext = Depends(get_tenant_context),
    storage: StorageAdapter = Depends(get_storage),
):
    service = DocumentService(storage)
    service.delete(document_id, context)
    return None
