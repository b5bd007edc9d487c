"""Back-office enquiry endpoints with full access for admins."""

from backend.app.api.enquiry_routes import build_enquiry_router
from backend.app.models.user import ROLE_ADMIN, ROLE_COUNSELOR
from backend.app.schemas.enquiry import EnquiryRead, EnterpriseEnquiryRead, FacultyEnquiryRead
from backend.app.services.enquiry_workflow import ENTERPRISE_ENQUIRY, FACULTY_ENQUIRY, STUDENT_ENQUIRY

# Counselors work the student lead queue alongside admins but cannot delete.
enquiries_router = build_enquiry_router(
    STUDENT_ENQUIRY,
    prefix="/api/admin/enquiries",
    tags=["admin", "enquiries"],
    read_schema=EnquiryRead,
    read_roles=(ROLE_ADMIN, ROLE_COUNSELOR),
    assign_roles=(ROLE_ADMIN, ROLE_COUNSELOR),
    delete_roles=(ROLE_ADMIN,),
)

enterprise_enquiries_router = build_enquiry_router(
    ENTERPRISE_ENQUIRY,
    prefix="/api/admin/enterprise-enquiries",
    tags=["admin", "enterprise-enquiries"],
    read_schema=EnterpriseEnquiryRead,
    read_roles=(ROLE_ADMIN,),
    assign_roles=(ROLE_ADMIN,),
    delete_roles=(ROLE_ADMIN,),
)

faculty_enquiries_router = build_enquiry_router(
    FACULTY_ENQUIRY,
    prefix="/api/admin/faculty-enquiries",
    tags=["admin", "faculty-enquiries"],
    read_schema=FacultyEnquiryRead,
    read_roles=(ROLE_ADMIN,),
    assign_roles=(ROLE_ADMIN,),
    delete_roles=(ROLE_ADMIN,),
)

routers = [enquiries_router, enterprise_enquiries_router, faculty_enquiries_router]
