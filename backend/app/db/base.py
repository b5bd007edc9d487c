from backend.app.db.base_class import Base

# Import models to register metadata for Base.metadata.create_all in tests
from backend.app.models.user import User  # noqa: F401
from backend.app.models.user_session import UserSession  # noqa: F401
from backend.app.models.course import Course, CourseCategory  # noqa: F401
from backend.app.models.enquiry import Enquiry  # noqa: F401
from backend.app.models.enterprise_enquiry import EnterpriseEnquiry  # noqa: F401
from backend.app.models.faculty_enquiry import FacultyEnquiry  # noqa: F401
from backend.app.models.blog import Blog, BlogCategory  # noqa: F401
from backend.app.models.faculty import Faculty  # noqa: F401
from backend.app.models.faq import Faq, FaqCategory  # noqa: F401
from backend.app.models.placement import Placement  # noqa: F401
from backend.app.models.testimonial import Testimonial  # noqa: F401
