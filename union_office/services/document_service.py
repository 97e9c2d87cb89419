from union_office.models.document import Document
from union_office.models.tenant_context import TenantContext
from union_office.repositories.document_repository import DocumentRepository
from union_office.schemas.document_schemas import DocumentCreate
from union_office.services.record_service import SaveResult, TenantRecordService


class DocumentService(TenantRecordService[Document]):
    """Service for the document archive"""

    repository_class = DocumentRepository
    not_found_message = "Document not found"
    create_label = "Document Stored"
    update_label = "Document Updated"
    delete_label = "Document Deleted"

    def describe(self, record: Document) -> str:
        return record.name

    def create_details(self, record: Document) -> str:
        return f"Saved file: {record.name}"

    def delete_details(self, record_id: str) -> str:
        return f"Removed file ID: {record_id}"

    def list_documents(
        self, context: TenantContext, member_id: str | None = None, case_id: str | None = None
    ) -> list[Document]:
        return self.repo.get_with_filters(context.sede_id, member_id=member_id, case_id=case_id)

    def create_document(self, data: DocumentCreate, context: TenantContext) -> SaveResult[Document]:
        """Store a file; member/case references are kept as given"""
        return self.save(Document(**data.model_dump()), context)
