from datetime import date

from pydantic import BaseModel, Field

from union_office.models.case import Case, CasePriority, CaseStatus


class CaseFileUpload(BaseModel):
    """File attached to a case, content base64-encoded"""

    name: str = Field(..., min_length=1)
    type: str
    size: str
    data: str


class CaseCreate(BaseModel):
    """Schema for opening a case"""

    title: str = Field(..., min_length=1, max_length=255)
    description: str = ""
    member_id: str = Field(..., min_length=1)
    assigned_to: str | None = None
    due_date: date
    priority: CasePriority = CasePriority.MEDIUM
    status: CaseStatus = CaseStatus.NEW
    attachment: CaseFileUpload | None = None


class CaseUpdate(BaseModel):
    """Schema for updating a case; omitted fields are left unchanged"""

    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    member_id: str | None = Field(None, min_length=1)
    assigned_to: str | None = None
    due_date: date | None = None
    priority: CasePriority | None = None
    status: CaseStatus | None = None
    attachment: CaseFileUpload | None = None
    remove_attachment: bool = False


class CaseStatusUpdate(BaseModel):
    status: CaseStatus


class CaseNoteCreate(BaseModel):
    content: str = Field(..., min_length=1)


class CaseListResponse(BaseModel):
    cases: list[Case]
    total: int
