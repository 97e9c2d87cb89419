from typing import Any

from pydantic import BaseModel, Field

from union_office.schemas.auth_schemas import EMAIL_PATTERN


class SupportRequest(BaseModel):
    name: str = Field(..., min_length=1)
    email: str = Field(..., pattern=EMAIL_PATTERN)
    subject: str = Field(..., min_length=1, max_length=255)
    message: str = Field(..., min_length=1)


class MailResultResponse(BaseModel):
    success: bool
    data: dict[str, Any] | None = None
    error: str | None = None
