from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text

from backend.app.core.time import utc_now
from backend.app.db.base_class import Base


class Placement(Base):
    __tablename__ = "placements"

    id = Column(Integer, primary_key=True, index=True)
    student_name = Column(String(255), nullable=False)
    course_name = Column(String(255), nullable=True)
    avatar = Column(String(512), nullable=True)
    company_name = Column(String(255), nullable=False)
    package_offered = Column(String(100), nullable=True)
    position = Column(String(255), nullable=True)
    dialogue = Column(Text, nullable=True)
    is_public = Column(Boolean, nullable=False, default=True)
    is_featured = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
