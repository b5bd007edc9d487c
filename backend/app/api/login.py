"""Login, logout and current-user endpoints."""

import logging

from fastapi import APIRouter, Depends, Header
from sqlalchemy.orm import Session

from backend.app.core.errors import InvalidInput
from backend.app.core.security import access_token_expiry, create_access_token, decode_access_token, verify_password
from backend.app.db.session import get_db
from backend.app.dependencies.auth import get_current_user
from backend.app.models.user import User
from backend.app.models.user_session import UserSession
from backend.app.schemas.common import ApiResponse
from backend.app.schemas.user import LoginRequest, TokenRead, UserRead

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login", response_model=ApiResponse[TokenRead])
def login(credentials: LoginRequest, db: Session = Depends(get_db)):
    user = db.query(User).filter(User.email == credentials.email.lower()).first()
    if not user or not user.hashed_password:
        raise InvalidInput("Invalid credentials")
    if not verify_password(credentials.password, user.hashed_password):
        raise InvalidInput("Invalid credentials")
    if user.banned:
        raise InvalidInput("This account has been banned")

    expires_at = access_token_expiry()
    session = UserSession(user_id=user.id, expires_at=expires_at)
    db.add(session)
    db.commit()
    db.refresh(session)

    token = create_access_token(user_id=user.id, session_id=session.id, expires_at=expires_at)
    logger.info("User %s logged in", user.id)
    return {"data": {"access_token": token, "token_type": "bearer", "expires_at": expires_at}}


@router.post("/logout", response_model=ApiResponse[dict])
def logout(
    authorization: str | None = Header(default=None),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    # get_current_user has already validated the token
    payload = decode_access_token(authorization.split(" ", 1)[1])
    session_id = payload.get("sid")
    if session_id is not None:
        db.query(UserSession).filter(UserSession.id == session_id, UserSession.user_id == current_user.id).delete()
        db.commit()
    return {"data": {}, "message": "Logged out"}


@router.get("/me", response_model=ApiResponse[UserRead])
def read_me(current_user: User = Depends(get_current_user)):
    return {"data": current_user}
