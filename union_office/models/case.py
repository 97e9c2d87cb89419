from datetime import date, datetime
from enum import Enum as PyEnum

from pydantic import BaseModel, Field, field_validator

from union_office.models.record import TenantRecord, new_record_id


class CaseStatus(str, PyEnum):
    """
    Case lifecycle states.

    Transitions are free-form: any state can move to any other and every
    move is recorded in the case timeline. ARCHIVED is only a label; the
    store does not treat archived cases differently from the others.
    """

    NEW = "new"
    IN_PROGRESS = "in-progress"
    AWAITING_DOCUMENTS = "awaiting-documents"
    UNDER_REVIEW = "under-review"
    COMPLETED = "completed"
    ARCHIVED = "archived"
    URGENT = "urgent"


class CasePriority(str, PyEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class CaseFile(BaseModel):
    """File attached to a case (base64 content)"""

    id: str = Field(default_factory=new_record_id)
    name: str
    type: str
    size: str
    data: str
    uploaded_by: str
    uploaded_at: datetime = Field(default_factory=datetime.now)


class CaseTimelineEvent(BaseModel):
    id: str = Field(default_factory=new_record_id)
    date: datetime = Field(default_factory=datetime.now)
    user: str
    content: str


class Case(TenantRecord):
    """
    Legal/administrative matter linked to one member.

    member_id is a plain reference; the member is not required to exist.
    The timeline is append-only.
    """

    title: str
    description: str = ""
    member_id: str
    assigned_to: str | None = None
    opened_on: date = Field(default_factory=date.today)
    due_date: date | None = None
    status: CaseStatus = CaseStatus.NEW
    priority: CasePriority = CasePriority.MEDIUM
    attachment: CaseFile | None = None
    timeline: list[CaseTimelineEvent] = Field(default_factory=list)
    last_modified: datetime | None = None

    @field_validator("due_date", mode="before")
    @classmethod
    def drop_unparsable_due_date(cls, value):
        # Unparsable stored values read as "no due date"
        if isinstance(value, str):
            try:
                return date.fromisoformat(value[:10])
            except ValueError:
                return None
        return value
