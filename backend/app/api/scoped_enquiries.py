"""Enquiry views limited to the records assigned to the calling staff member."""

from backend.app.api.enquiry_routes import build_enquiry_router
from backend.app.models.user import ROLE_AGENT, ROLE_COUNSELOR, ROLE_HR
from backend.app.schemas.enquiry import EnquiryRead, EnterpriseEnquiryRead, FacultyEnquiryRead
from backend.app.services.enquiry_workflow import ENTERPRISE_ENQUIRY, FACULTY_ENQUIRY, STUDENT_ENQUIRY

agent_enquiries_router = build_enquiry_router(
    STUDENT_ENQUIRY,
    prefix="/api/agent/enquiries",
    tags=["agent"],
    read_schema=EnquiryRead,
    read_roles=(ROLE_AGENT,),
    scoped=True,
)

counselor_enterprise_enquiries_router = build_enquiry_router(
    ENTERPRISE_ENQUIRY,
    prefix="/api/counselor/enterprise-enquiries",
    tags=["counselor"],
    read_schema=EnterpriseEnquiryRead,
    read_roles=(ROLE_COUNSELOR,),
    scoped=True,
)

hr_enterprise_enquiries_router = build_enquiry_router(
    ENTERPRISE_ENQUIRY,
    prefix="/api/hr/enterprise-enquiries",
    tags=["hr"],
    read_schema=EnterpriseEnquiryRead,
    read_roles=(ROLE_HR,),
    scoped=True,
)

hr_faculty_enquiries_router = build_enquiry_router(
    FACULTY_ENQUIRY,
    prefix="/api/hr/faculty-enquiries",
    tags=["hr"],
    read_schema=FacultyEnquiryRead,
    read_roles=(ROLE_HR,),
    scoped=True,
)

routers = [
    agent_enquiries_router,
    counselor_enterprise_enquiries_router,
    hr_enterprise_enquiries_router,
    hr_faculty_enquiries_router,
]
