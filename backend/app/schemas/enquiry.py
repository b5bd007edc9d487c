"""Enquiry schemas for public submissions and staff updates.

Submissions are validated here; staff updates carry free-form status strings
because the allowed values depend on the enquiry kind and are checked by the
workflow service.
"""

import re
from datetime import date, datetime
from typing import Literal, Optional

from pydantic import AliasChoices, EmailStr, Field, field_validator

from backend.app.schemas.common import CamelModel
from backend.app.schemas.user import UserSummary

PHONE_PATTERN = re.compile(r"^\+?[0-9]{10,15}$")

EnquiryStatus = Literal["NEW", "CONTACTED", "ENROLLED", "DEAD", "ARCHIVED"]
EnterpriseEnquiryStatus = Literal["NEW", "CONTACTED", "COMPLETED", "CLOSED", "ARCHIVED"]
FacultyEnquiryStatus = Literal["NEW", "CONTACTED", "HIRED", "CLOSED", "ARCHIVED"]


def _required_text(value: str) -> str:
    value = (value or "").strip()
    if not value:
        raise ValueError("This field is required")
    return value


def _optional_text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


class _SubmissionBase(CamelModel):
    email: EmailStr
    phone: str
    message: Optional[str] = None

    @field_validator("email", mode="before")
    @classmethod
    def normalise_email(cls, value):
        return value.strip().lower() if isinstance(value, str) else value

    @field_validator("phone")
    @classmethod
    def validate_phone(cls, value: str) -> str:
        value = value.strip()
        if not PHONE_PATTERN.match(value.replace(" ", "")):
            raise ValueError("Please provide a valid phone number")
        return value

    @field_validator("message")
    @classmethod
    def clean_message(cls, value: Optional[str]) -> Optional[str]:
        return _optional_text(value)


class EnquiryCreate(_SubmissionBase):
    name: str
    course_id: Optional[int] = None

    @field_validator("name")
    @classmethod
    def clean_name(cls, value: str) -> str:
        return _required_text(value)


class EnterpriseEnquiryCreate(_SubmissionBase):
    company_name: str
    duration: Optional[str] = None

    @field_validator("company_name")
    @classmethod
    def clean_company(cls, value: str) -> str:
        return _required_text(value)


class FacultyEnquiryCreate(_SubmissionBase):
    name: str
    resume: Optional[str] = None
    available_date: Optional[date] = None

    @field_validator("name")
    @classmethod
    def clean_name(cls, value: str) -> str:
        return _required_text(value)


class StatusUpdate(CamelModel):
    status: str


class AssigneeUpdate(CamelModel):
    assigned_to_id: Optional[int] = Field(
        default=None,
        validation_alias=AliasChoices("assignedToId", "agentId", "assigned_to_id"),
    )

    @field_validator("assigned_to_id", mode="before")
    @classmethod
    def blank_means_unassigned(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class NotesUpdate(CamelModel):
    note: Optional[str] = None
    remark: Optional[str] = None


class EnquiryUpdate(AssigneeUpdate):
    """Combined staff update. Only fields present in the request are applied."""

    status: Optional[str] = None
    note: Optional[str] = None
    remark: Optional[str] = None


class CourseSummary(CamelModel):
    id: int
    title: str
    slug: str


class EnquiryRead(CamelModel):
    id: int
    name: str
    email: str
    phone: str
    message: Optional[str] = None
    course_id: Optional[int] = None
    course: Optional[CourseSummary] = None
    agent_id: Optional[int] = None
    agent: Optional[UserSummary] = None
    assigned_at: Optional[datetime] = None
    status: EnquiryStatus
    note: Optional[str] = None
    remark: Optional[str] = None
    created_at: datetime


class EnterpriseEnquiryRead(CamelModel):
    id: int
    company_name: str
    email: str
    phone: str
    duration: Optional[str] = None
    message: Optional[str] = None
    assigned_to_id: Optional[int] = None
    assigned_to: Optional[UserSummary] = None
    assigned_at: Optional[datetime] = None
    status: EnterpriseEnquiryStatus
    note: Optional[str] = None
    remark: Optional[str] = None
    created_at: datetime


class FacultyEnquiryRead(CamelModel):
    id: int
    name: str
    email: str
    phone: str
    resume: Optional[str] = None
    available_date: Optional[date] = None
    message: Optional[str] = None
    assigned_to_id: Optional[int] = None
    assigned_to: Optional[UserSummary] = None
    assigned_at: Optional[datetime] = None
    status: FacultyEnquiryStatus
    note: Optional[str] = None
    remark: Optional[str] = None
    created_at: datetime


class SubmissionReceipt(CamelModel):
    """What the public submitter gets back; staff-only fields are left out."""

    id: int
    status: str
    created_at: datetime
