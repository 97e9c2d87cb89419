from pydantic import BaseModel, Field

from union_office.models.document import Document


class DocumentCreate(BaseModel):
    """Schema for storing a document (content base64-encoded)"""

    name: str = Field(..., min_length=1, max_length=255)
    type: str
    size: str
    data: str
    member_id: str | None = None
    case_id: str | None = None


class DocumentListResponse(BaseModel):
    documents: list[Document]
    total: int
