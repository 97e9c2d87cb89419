from datetime import date
from enum import Enum as PyEnum

from pydantic import BaseModel, Field

from union_office.models.record import TenantRecord


class MemberRole(str, PyEnum):
    """Member's position at their workplace"""

    EMPLOYEE = "employee"
    MANAGER = "manager"


class MemberStatus(str, PyEnum):
    ACTIVE = "active"
    SUSPENDED = "suspended"


class MemberHistoryEntry(BaseModel):
    date: str
    action: str


class Member(TenantRecord):
    """Union member profile owned by one office"""

    first_name: str
    last_name: str
    birth_date: date | None = None
    collaboration_start: date | None = None
    tax_code: str
    email: str | None = None
    phone: str | None = None
    role: MemberRole = MemberRole.EMPLOYEE
    enrollment_date: date | None = None
    dues_active: bool = True
    status: MemberStatus = MemberStatus.ACTIVE
    notes: str | None = None
    history: list[MemberHistoryEntry] = Field(default_factory=list)

    @property
    def full_name(self) -> str:
        return f"{self.last_name} {self.first_name}"
