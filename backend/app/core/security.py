"""Security utilities: password hashing and JWT token operations.

Handles JWT creation with subject, session and expiration claims and validates
tokens with consistent error handling.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt
from passlib.context import CryptContext

from backend.app.core.settings import get_settings

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def access_token_expiry(expires_minutes: Optional[int] = None) -> datetime:
    settings = get_settings()
    minutes = expires_minutes if expires_minutes is not None else settings.ACCESS_TOKEN_EXPIRE_MINUTES
    return datetime.now(timezone.utc) + timedelta(minutes=minutes)


def create_access_token(
    user_id: int,
    expires_minutes: Optional[int] = None,
    session_id: Optional[int] = None,
    expires_at: Optional[datetime] = None,
) -> str:
    settings = get_settings()
    expire = expires_at or access_token_expiry(expires_minutes)
    # Embed expiration claim so tokens self-expire when validated
    payload: Dict[str, Any] = {"sub": str(user_id), "exp": expire}
    if session_id is not None:
        payload["sid"] = session_id
    return jwt.encode(payload, settings.SECRET_KEY, algorithm="HS256")


def decode_access_token(token: str) -> Dict[str, Any]:
    settings = get_settings()
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=["HS256"])
    except jwt.ExpiredSignatureError as exc:
        raise ValueError("Expired token") from exc
    except jwt.InvalidTokenError as exc:
        raise ValueError("Invalid token") from exc
