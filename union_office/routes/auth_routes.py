from fastapi import APIRouter, Depends, status

from union_office.core.exceptions import UnauthorizedException
from union_office.core.security import create_access_token
from union_office.dependencies import get_mail_service, get_storage, get_tenant_context
from union_office.models.tenant_context import TenantContext
from union_office.repositories.storage import StorageAdapter
from union_office.repositories.user_repository import UserRepository
from union_office.schemas.auth_schemas import (
    LoginRequest,
    PasswordResetRequest,
    RegisterRequest,
    TokenResponse,
    UserResponse,
)
from union_office.services.auth_service import AuthService
from union_office.services.deadline_service import DeadlineScanner
from union_office.services.mail_service import MailService

router = APIRouter()


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register(data: RegisterRequest, storage: StorageAdapter = Depends(get_storage)):
    """
    Register a user.

    - First user of an office name (case-insensitive) becomes **owner** of a new office
    - Later users with the same office name join it as **operator**
    """
    service = AuthService(storage)
    return service.register(data)


@router.post("/login", response_model=TokenResponse)
async def login(data: LoginRequest, storage: StorageAdapter = Depends(get_storage)):
    """
    Authenticate and open a session.

    Runs the deadline scan for the user's office before returning the token.
    """
    service = AuthService(storage)
    user = service.authenticate(data.email, data.password)
    if user is None:
        raise UnauthorizedException("Invalid email or password")

    DeadlineScanner(storage).scan(user.sede_id)
    token = create_access_token(user.id, user.sede_id)
    return TokenResponse(access_token=token, user=UserResponse.model_validate(user))


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(
    context: TenantContext = Depends(get_tenant_context),
    storage: StorageAdapter = Depends(get_storage),
):
    """Close the current session"""
    AuthService(storage).logout(context.user)
    return None


@router.get("/me", response_model=UserResponse)
async def me(context: TenantContext = Depends(get_tenant_context)):
    """Get the authenticated user"""
    return context.user


@router.post("/password-reset", status_code=status.HTTP_202_ACCEPTED)
async def request_password_reset(
    data: PasswordResetRequest,
    storage: StorageAdapter = Depends(get_storage),
    mail: MailService = Depends(get_mail_service),
):
    """
    Send the credentials recovery email.

    The response is the same whether or not the email is registered.
    """
    user = UserRepository(storage).get_by_email(data.email)
    if user is not None:
        mail.send_reset_password_email(user.email, user.operator_name)
    return {"message": "If the email is registered, a recovery message has been sent"}
