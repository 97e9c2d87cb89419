from pydantic import BaseModel, Field

from union_office.models.role import UserRole

EMAIL_PATTERN = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"


class RegisterRequest(BaseModel):
    """Registration form; the office name decides join vs create"""

    email: str = Field(..., pattern=EMAIL_PATTERN, max_length=255)
    password: str = Field(..., min_length=1)
    office_name: str = Field(..., min_length=1, max_length=255)
    operator_name: str = Field(..., min_length=1, max_length=255)


class LoginRequest(BaseModel):
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class PasswordResetRequest(BaseModel):
    email: str = Field(..., pattern=EMAIL_PATTERN)


class UserResponse(BaseModel):
    """User details without credentials"""

    id: str
    email: str
    office_name: str
    operator_name: str
    role: UserRole
    sede_id: str

    model_config = {"from_attributes": True}


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserResponse
