"""Public faculty (mentor) profiles."""

from sqlalchemy import Boolean, Column, DateTime, Float, Integer, String, Text

from backend.app.core.time import utc_now
from backend.app.db.base_class import Base


class Faculty(Base):
    __tablename__ = "faculties"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    designation = Column(String(255), nullable=True)
    domain = Column(String(255), nullable=True)
    avatar = Column(String(512), nullable=True)
    bio = Column(Text, nullable=True)
    experience = Column(String(100), nullable=True)
    students_mentored = Column(String(100), nullable=True)
    ratings = Column(Float, nullable=True)
    is_public = Column(Boolean, nullable=False, default=True)
    is_featured = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
