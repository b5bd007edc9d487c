"""Session and role dependencies shared by every protected router."""

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from backend.app.core.errors import AuthenticationRequired, PermissionDenied
from backend.app.core.security import decode_access_token
from backend.app.core.time import utc_now
from backend.app.db.session import get_db
from backend.app.models.user import User
from backend.app.models.user_session import UserSession


def get_session_user(db: Session, authorization: str | None) -> User | None:
    """Resolve the bearer token in ``authorization`` to an active user, or None."""
    if not authorization or not authorization.startswith("Bearer "):
        return None
    token = authorization.split(" ", 1)[1]
    try:
        payload = decode_access_token(token)
    except ValueError:
        return None

    try:
        user_id = int(payload.get("sub"))
    except (TypeError, ValueError):
        return None

    session_id = payload.get("sid")
    if session_id is not None:
        session = (
            db.query(UserSession)
            .filter(
                UserSession.id == session_id,
                UserSession.user_id == user_id,
                UserSession.expires_at > utc_now(),
            )
            .first()
        )
        if session is None:
            return None

    user = db.query(User).filter(User.id == user_id).first()
    if not user or user.banned:
        return None
    return user


def get_current_user(db: Session = Depends(get_db), authorization: str | None = Header(default=None)) -> User:
    # Expect Authorization: Bearer <token>
    user = get_session_user(db, authorization)
    if user is None:
        raise AuthenticationRequired("Not authenticated")
    return user


def require_roles(*roles: str):
    """Build a dependency that admits only users holding one of ``roles``."""
    allowed = set(roles)

    def dependency(current_user: User = Depends(get_current_user)) -> User:
        if current_user.role not in allowed:
            raise PermissionDenied("You do not have access to this resource")
        return current_user

    return dependency


def get_current_admin(current_user: User = Depends(get_current_user)) -> User:
    if not current_user.is_admin:
        raise PermissionDenied("Admin access required")
    return current_user
