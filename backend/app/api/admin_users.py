"""Admin user management endpoints."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from backend.app.core.errors import InvalidInput, NotFound
from backend.app.core.security import get_password_hash
from backend.app.crud.base import ilike_any
from backend.app.db.session import get_db
from backend.app.dependencies.auth import get_current_admin
from backend.app.models.user import USER_ROLES, User
from backend.app.schemas.common import ApiResponse
from backend.app.schemas.user import AdminUserCreate, AdminUserRead, AdminUserUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin/users", tags=["admin"])


def _get_user(db: Session, user_id: int) -> User:
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise NotFound("User not found")
    return user


@router.get("", response_model=ApiResponse[list[AdminUserRead]])
async def list_users(
    role: Optional[str] = None,
    search: Optional[str] = None,
    db: Session = Depends(get_db),
    current_admin: User = Depends(get_current_admin),
):
    query = db.query(User)
    if role:
        if role not in USER_ROLES:
            raise InvalidInput(f"Unknown role '{role}'")
        query = query.filter(User.role == role)
    term = (search or "").strip()
    if term:
        query = query.filter(ilike_any((User.name, User.email), term))
    return {"data": query.order_by(User.id.asc()).all()}


@router.post("", response_model=ApiResponse[AdminUserRead], status_code=status.HTTP_201_CREATED)
async def create_user(
    user_in: AdminUserCreate,
    db: Session = Depends(get_db),
    current_admin: User = Depends(get_current_admin),
):
    email = user_in.email.lower()
    if db.query(User).filter(User.email == email).first():
        raise InvalidInput("Email already registered")
    user = User(
        name=user_in.name.strip(),
        email=email,
        hashed_password=get_password_hash(user_in.password),
        role=user_in.role,
        phone=user_in.phone,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Admin %s created user %s with role %s", current_admin.id, user.id, user.role)
    return {"data": user, "message": "User created successfully"}


@router.get("/{user_id}", response_model=ApiResponse[AdminUserRead])
async def get_user(user_id: int, db: Session = Depends(get_db), current_admin: User = Depends(get_current_admin)):
    return {"data": _get_user(db, user_id)}


@router.patch("/{user_id}", response_model=ApiResponse[AdminUserRead])
async def update_user(
    user_id: int,
    update: AdminUserUpdate,
    db: Session = Depends(get_db),
    current_admin: User = Depends(get_current_admin),
):
    user = _get_user(db, user_id)
    if user_id == current_admin.id and update.banned is True:
        raise InvalidInput("Cannot ban your own account")
    if user_id == current_admin.id and update.role is not None and update.role != current_admin.role:
        raise InvalidInput("Cannot change your own role")

    for field, value in update.model_dump(exclude_unset=True).items():
        if field in ("name", "role", "banned") and value is None:
            continue
        setattr(user, field, value)
    db.commit()
    db.refresh(user)
    logger.info("Admin %s updated user %s", current_admin.id, user.id)
    return {"data": user}
