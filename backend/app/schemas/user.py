"""User schemas used for registration, staff management and responses."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import EmailStr, Field

from backend.app.schemas.common import CamelModel

UserRole = Literal["ADMIN", "STUDENT", "INSTRUCTOR", "COUNSELOR", "HR", "CONTENT_WRITER", "AGENT"]


class UserCreate(CamelModel):
    name: str = Field(min_length=1)
    email: EmailStr
    password: str = Field(min_length=6)


class UserRead(CamelModel):
    id: int
    name: str
    email: EmailStr
    role: UserRole


class UserSummary(CamelModel):
    """Compact user shape embedded in enquiry and dashboard payloads."""

    id: int
    name: str
    email: EmailStr
    image: Optional[str] = None
    role: UserRole


class AdminUserRead(CamelModel):
    id: int
    name: str
    email: EmailStr
    role: UserRole
    banned: bool
    phone: Optional[str] = None
    created_at: Optional[datetime] = None


class AdminUserCreate(UserCreate):
    role: UserRole
    phone: Optional[str] = None


class AdminUserUpdate(CamelModel):
    name: Optional[str] = None
    role: Optional[UserRole] = None
    banned: Optional[bool] = None
    phone: Optional[str] = None


class LoginRequest(CamelModel):
    email: EmailStr
    password: str


class TokenRead(CamelModel):
    access_token: str
    token_type: str = "bearer"
    expires_at: datetime
