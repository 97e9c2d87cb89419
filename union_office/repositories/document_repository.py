from union_office.models.document import Document
from union_office.repositories.collection_repository import CollectionRepository
from union_office.repositories.storage import StorageKeys


class DocumentRepository(CollectionRepository[Document]):
    """Repository for Document records"""

    key = StorageKeys.DOCUMENTS
    model = Document

    def get_with_filters(
        self, sede_id: str, member_id: str | None = None, case_id: str | None = None
    ) -> list[Document]:
        """Documents of the office, optionally narrowed to a member and/or case reference"""
        documents = self.get_by_tenant(sede_id)
        if member_id is not None:
            documents = [d for d in documents if d.member_id == member_id]
        if case_id is not None:
            documents = [d for d in documents if d.case_id == case_id]
        return documents
