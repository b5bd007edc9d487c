"""Schemas for the admin analytics snapshot."""

from datetime import datetime
from typing import List, Optional

from backend.app.schemas.common import CamelModel


class KpiSummary(CamelModel):
    total_students: int
    student_growth: str
    pending_enquiries: int
    total_revenue: float
    total_placements: int
    total_enquiries: int
    enrolled_enquiries: int


class FunnelStage(CamelModel):
    stage: str
    value: int


class UnassignedLead(CamelModel):
    id: int
    name: str
    email: str
    phone: str
    course: str
    created_at: datetime


class AgentSummary(CamelModel):
    id: Optional[int] = None
    name: str
    email: str
    image: Optional[str] = None


class AgentPerformance(CamelModel):
    agent: AgentSummary
    enrollments: int


class LeadSource(CamelModel):
    student: int
    enterprise: int
    faculty: int


class CrmSummary(CamelModel):
    enquiry_funnel: List[FunnelStage]
    unassigned_leads: List[UnassignedLead]
    top_agents: List[AgentPerformance]
    lead_source: LeadSource


class PopularCourse(CamelModel):
    course: str
    enquiries: int


class CategoryRevenue(CamelModel):
    category: str
    revenue: float


class DifficultyCount(CamelModel):
    difficulty: str
    count: int


class CoursePerformance(CamelModel):
    popular_courses: List[PopularCourse]
    revenue_by_category: List[CategoryRevenue]
    course_difficulty: List[DifficultyCount]


class FacultyHighlight(CamelModel):
    id: int
    name: str
    designation: Optional[str] = None
    domain: Optional[str] = None
    ratings: Optional[float] = None
    students_mentored: Optional[str] = None
    avatar: Optional[str] = None


class HrSummary(CamelModel):
    hiring_pipeline: List[FunnelStage]
    top_faculty: List[FacultyHighlight]


class DailyCount(CamelModel):
    date: str
    count: int


class DailyRegistrations(CamelModel):
    date: str
    registrations: int


class ContentSummary(CamelModel):
    blog_activity: List[DailyCount]
    pending_reviews: int
    total_blogs: int
    total_testimonials: int


class RoleCount(CamelModel):
    role: str
    count: int


class SystemSummary(CamelModel):
    active_sessions: int
    user_registration_trend: List[DailyRegistrations]
    users_by_role: List[RoleCount]


class DashboardSnapshot(CamelModel):
    as_of: datetime
    kpi: KpiSummary
    crm: CrmSummary
    course_performance: CoursePerformance
    hr: HrSummary
    content: ContentSummary
    system: SystemSummary
