"""Handles self-service registration for prospective students."""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from backend.app.core.errors import InvalidInput
from backend.app.core.security import get_password_hash
from backend.app.db.session import get_db
from backend.app.models.user import ROLE_STUDENT, User
from backend.app.schemas.common import ApiResponse
from backend.app.schemas.user import UserCreate, UserRead

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/register", response_model=ApiResponse[UserRead], status_code=status.HTTP_201_CREATED)
def register_user(user_in: UserCreate, db: Session = Depends(get_db)):
    email = user_in.email.lower()
    existing = db.query(User).filter(User.email == email).first()
    if existing:
        raise InvalidInput("Email already registered")
    hashed_password = get_password_hash(user_in.password)  # Hash password before storing
    user = User(name=user_in.name.strip(), email=email, hashed_password=hashed_password, role=ROLE_STUDENT)
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Registered user %s", user.id)
    return {"data": user, "message": "Registration successful"}
