from sqlalchemy import Boolean, Column, DateTime, Integer, String
from sqlalchemy.orm import relationship

from backend.app.core.time import utc_now
from backend.app.db.base_class import Base

ROLE_ADMIN = "ADMIN"
ROLE_STUDENT = "STUDENT"
ROLE_INSTRUCTOR = "INSTRUCTOR"
ROLE_COUNSELOR = "COUNSELOR"
ROLE_HR = "HR"
ROLE_CONTENT_WRITER = "CONTENT_WRITER"
ROLE_AGENT = "AGENT"

USER_ROLES = (
    ROLE_ADMIN,
    ROLE_STUDENT,
    ROLE_INSTRUCTOR,
    ROLE_COUNSELOR,
    ROLE_HR,
    ROLE_CONTENT_WRITER,
    ROLE_AGENT,
)
STAFF_ROLES = tuple(role for role in USER_ROLES if role != ROLE_STUDENT)


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False, default="")
    email = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=True)
    role = Column(String(32), nullable=False, default=ROLE_STUDENT, index=True)
    banned = Column(Boolean, nullable=False, default=False)
    phone = Column(String(50), nullable=True)
    image = Column(String(512), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, index=True)

    sessions = relationship("UserSession", back_populates="user", cascade="all, delete-orphan")

    @property
    def is_admin(self) -> bool:
        return self.role == ROLE_ADMIN
