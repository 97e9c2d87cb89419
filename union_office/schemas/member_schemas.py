from datetime import date

from pydantic import BaseModel, Field, field_validator

from union_office.models.member import Member, MemberRole, MemberStatus
from union_office.schemas.auth_schemas import EMAIL_PATTERN

# Italian codice fiscale layout (format only, no checksum)
TAX_CODE_PATTERN = r"^[A-Za-z]{6}[0-9]{2}[A-Za-z][0-9]{2}[A-Za-z][0-9]{3}[A-Za-z]$"


class MemberCreate(BaseModel):
    """Schema for enrolling a new member"""

    first_name: str = Field(..., min_length=1, max_length=255)
    last_name: str = Field(..., min_length=1, max_length=255)
    birth_date: date
    collaboration_start: date
    tax_code: str = Field(..., pattern=TAX_CODE_PATTERN)
    email: str | None = Field(None, pattern=EMAIL_PATTERN)
    phone: str = Field(..., min_length=1, max_length=50)
    role: MemberRole = MemberRole.EMPLOYEE
    notes: str | None = None

    @field_validator("tax_code")
    @classmethod
    def uppercase_tax_code(cls, value: str) -> str:
        return value.upper()


class MemberUpdate(BaseModel):
    """Schema for updating a member; omitted fields are left unchanged"""

    first_name: str | None = Field(None, min_length=1, max_length=255)
    last_name: str | None = Field(None, min_length=1, max_length=255)
    birth_date: date | None = None
    collaboration_start: date | None = None
    tax_code: str | None = Field(None, pattern=TAX_CODE_PATTERN)
    email: str | None = Field(None, pattern=EMAIL_PATTERN)
    phone: str | None = Field(None, min_length=1, max_length=50)
    role: MemberRole | None = None
    dues_active: bool | None = None
    status: MemberStatus | None = None
    notes: str | None = None

    @field_validator("tax_code")
    @classmethod
    def uppercase_tax_code(cls, value: str | None) -> str | None:
        return value.upper() if value else value


class MemberListResponse(BaseModel):
    members: list[Member]
    total: int
