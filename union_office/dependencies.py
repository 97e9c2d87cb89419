from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from union_office.core.security import decode_jwt
from union_office.core.exceptions import UnauthorizedException
from union_office.database import get_db
from union_office.models.tenant_context import TenantContext
from union_office.repositories.storage import SqlStorage, StorageAdapter
from union_office.services.auth_service import AuthService
from union_office.services.mail_service import MailService

security = HTTPBearer(auto_error=False)


def get_storage(db: Session = Depends(get_db)) -> StorageAdapter:
    """FastAPI dependency returning the collection storage for this request"""
    return SqlStorage(db)


def get_mail_service() -> MailService:
    return MailService()


async def get_tenant_context(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    storage: StorageAdapter = Depends(get_storage),
) -> TenantContext:
    """
    FastAPI dependency to validate JWT and resolve the acting user.

    Flow:
    1. Extract token from Authorization: Bearer <token>
    2. Validate JWT using SECRET_KEY
    3. Read user id ('sub') and office id ('sede_id') claims
    4. Load the stored user and check it still belongs to that office
    5. Return TenantContext for use in endpoints

    Raises:
        HTTPException 401: If token missing, invalid, expired or stale
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        payload = decode_jwt(credentials.credentials)
        return AuthService(storage).get_context(payload["sub"], payload["sede_id"])

    except UnauthorizedException as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        )
