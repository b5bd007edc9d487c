"""Lead-capture forms submitted from the public site."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from backend.app.db.session import get_db
from backend.app.schemas.common import ApiResponse
from backend.app.schemas.enquiry import (
    EnquiryCreate,
    EnterpriseEnquiryCreate,
    FacultyEnquiryCreate,
    SubmissionReceipt,
)
from backend.app.services import enquiry_workflow as workflow

router = APIRouter(prefix="/api", tags=["public"])

THANK_YOU = "Enquiry submitted successfully. Our team will contact you soon."


@router.post("/enquiry", response_model=ApiResponse[SubmissionReceipt], status_code=status.HTTP_201_CREATED)
async def submit_enquiry(enquiry_in: EnquiryCreate, db: Session = Depends(get_db)):
    enquiry = workflow.create_enquiry(db, workflow.STUDENT_ENQUIRY, enquiry_in.model_dump())
    return {"data": enquiry, "message": THANK_YOU}


@router.post(
    "/enterprise-enquiry",
    response_model=ApiResponse[SubmissionReceipt],
    status_code=status.HTTP_201_CREATED,
)
async def submit_enterprise_enquiry(enquiry_in: EnterpriseEnquiryCreate, db: Session = Depends(get_db)):
    enquiry = workflow.create_enquiry(db, workflow.ENTERPRISE_ENQUIRY, enquiry_in.model_dump())
    return {"data": enquiry, "message": THANK_YOU}


@router.post("/faculty-enquiry", response_model=ApiResponse[SubmissionReceipt], status_code=status.HTTP_201_CREATED)
async def submit_faculty_enquiry(enquiry_in: FacultyEnquiryCreate, db: Session = Depends(get_db)):
    enquiry = workflow.create_enquiry(db, workflow.FACULTY_ENQUIRY, enquiry_in.model_dump())
    return {"data": enquiry, "message": "Application received. Our HR team will reach out to you."}
