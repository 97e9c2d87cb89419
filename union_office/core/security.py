from datetime import datetime, timedelta, UTC

from jose import JWTError, jwt
from union_office.config import settings
from union_office.core.exceptions import UnauthorizedException

ALGORITHM = "HS256"


def create_access_token(user_id: str, sede_id: str, expires_minutes: int | None = None) -> str:
    """
    Issue a signed JWT for an authenticated user.

    Args:
        user_id: Stored user identifier, placed in the 'sub' claim
        sede_id: Office (tenant) identifier, placed in the 'sede_id' claim
        expires_minutes: Override for ACCESS_TOKEN_EXPIRE_MINUTES

    Returns:
        Encoded JWT token
    """
    minutes = expires_minutes if expires_minutes is not None else settings.ACCESS_TOKEN_EXPIRE_MINUTES
    now = datetime.now(UTC)
    payload = {
        "sub": user_id,
        "sede_id": sede_id,
        "iat": now,
        "exp": now + timedelta(minutes=minutes),
    }
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=ALGORITHM)


def decode_jwt(token: str) -> dict:
    """
    Decode and validate JWT token using SECRET_KEY.

    Args:
        token: JWT access token from Authorization header

    Returns:
        Decoded token payload with 'sub' (user_id), 'sede_id', 'exp', etc.

    Raises:
        UnauthorizedException: If token invalid, expired, or malformed
    """
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[ALGORITHM])

        # Validate expiration (jose checks this automatically)
        exp = payload.get("exp")
        if exp is None:
            raise UnauthorizedException("Token missing expiration")

        user_id: str = payload.get("sub")
        if user_id is None:
            raise UnauthorizedException("Token missing user identifier")

        if payload.get("sede_id") is None:
            raise UnauthorizedException("Token missing office identifier")

        return payload

    except JWTError as e:
        raise UnauthorizedException(f"Invalid token: {str(e)}")


def extract_user_id(token: str) -> str:
    """Extract user id from JWT token"""
    payload = decode_jwt(token)
    return payload["sub"]
