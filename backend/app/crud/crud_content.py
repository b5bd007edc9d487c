"""CRUD instances for the marketing content tables."""

from backend.app.crud.base import CRUDBase
from backend.app.models.blog import Blog, BlogCategory
from backend.app.models.course import Course, CourseCategory
from backend.app.models.faculty import Faculty
from backend.app.models.faq import Faq, FaqCategory
from backend.app.models.placement import Placement
from backend.app.models.testimonial import Testimonial

course_category_crud = CRUDBase(CourseCategory)
course_crud = CRUDBase(Course)
blog_category_crud = CRUDBase(BlogCategory)
blog_crud = CRUDBase(Blog)
faq_category_crud = CRUDBase(FaqCategory)
faq_crud = CRUDBase(Faq)
placement_crud = CRUDBase(Placement)
testimonial_crud = CRUDBase(Testimonial)
faculty_crud = CRUDBase(Faculty)
