"""Faculty (trainer) job application model."""

from sqlalchemy import Column, Date, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from backend.app.core.time import utc_now
from backend.app.db.base_class import Base

FACULTY_ENQUIRY_STATUSES = ("NEW", "CONTACTED", "HIRED", "CLOSED", "ARCHIVED")


class FacultyEnquiry(Base):
    __tablename__ = "faculty_enquiries"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, index=True)
    phone = Column(String(50), nullable=False)
    resume = Column(String(512), nullable=True)
    available_date = Column(Date, nullable=True)
    message = Column(Text, nullable=True)
    assigned_to_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True)
    assigned_at = Column(DateTime(timezone=True), nullable=True)
    status = Column(String(20), nullable=False, default="NEW", index=True)
    note = Column(Text, nullable=True)
    remark = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, index=True)

    assigned_to = relationship("User", foreign_keys=[assigned_to_id])
