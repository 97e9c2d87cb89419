from datetime import datetime

from pydantic import Field

from union_office.models.record import TenantRecord


class Document(TenantRecord):
    """
    Stored file blob.

    member_id and case_id are weak references: they are not validated and
    may point at records that no longer exist.
    """

    name: str
    type: str
    size: str
    data: str  # Base64 file content
    date_added: datetime = Field(default_factory=datetime.now)
    member_id: str | None = None
    case_id: str | None = None
