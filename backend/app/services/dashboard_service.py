"""Admin analytics snapshot built from the lead, catalogue and content tables.

Each metric is its own query so any one of them can change without touching
the others. Time windows are relative to ``as_of``:

* current window ``[as_of - 30d, as_of)``
* prior window ``[as_of - 60d, as_of - 30d)``
* daily series: the 30 calendar days ending on ``as_of.date()``
"""

import logging
from collections import Counter
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from backend.app.core.time import as_utc, start_of_day, trailing_days, utc_now
from backend.app.models.blog import Blog
from backend.app.models.course import COURSE_DIFFICULTIES, Course, CourseCategory
from backend.app.models.enquiry import Enquiry
from backend.app.models.enterprise_enquiry import EnterpriseEnquiry
from backend.app.models.faculty import Faculty
from backend.app.models.faculty_enquiry import FacultyEnquiry
from backend.app.models.placement import Placement
from backend.app.models.testimonial import Testimonial
from backend.app.models.user import ROLE_STUDENT, User
from backend.app.models.user_session import UserSession

logger = logging.getLogger(__name__)

WINDOW = timedelta(days=30)
TREND_DAYS = 30
TOP_AGENTS_LIMIT = 5
POPULAR_COURSES_LIMIT = 6
UNASSIGNED_LEADS_LIMIT = 5
TOP_FACULTY_LIMIT = 5

ENQUIRY_FUNNEL = (
    ("New", "NEW"),
    ("Contacted", "CONTACTED"),
    ("Enrolled", "ENROLLED"),
    ("Dead", "DEAD"),
    ("Archived", "ARCHIVED"),
)
HIRING_PIPELINE = (
    ("New", "NEW"),
    ("Contacted", "CONTACTED"),
    ("Hired", "HIRED"),
    ("Closed", "CLOSED"),
    ("Archived", "ARCHIVED"),
)


def _course_revenue(course: Optional[Course]) -> Decimal:
    if course is None or course.fees is None:
        return Decimal("0")
    return Decimal(course.fees) - Decimal(course.discount or 0)


def format_growth(current: int, prior: int) -> str:
    """Percent change of ``current`` over ``prior`` as e.g. ``"12.5%"``.

    A zero baseline has no meaningful percentage and is reported as ``"0%"``.
    """
    if prior == 0:
        return "0%"
    return f"{(current - prior) / prior * 100:.1f}%"


def _students_created_between(db: Session, start: datetime, end: datetime) -> int:
    return (
        db.query(User)
        .filter(
            User.role == ROLE_STUDENT,
            User.banned.is_(False),
            User.created_at >= start,
            User.created_at < end,
        )
        .count()
    )


def _status_funnel(db: Session, model, stages) -> list[dict]:
    return [
        {"stage": label, "value": db.query(model).filter(model.status == status).count()}
        for label, status in stages
    ]


def _daily_counts(db: Session, column, as_of: datetime) -> dict:
    """Count rows per calendar day over the trailing window, zero-filled."""
    days = trailing_days(as_of.date(), TREND_DAYS)
    created = (
        db.query(column)
        .filter(column >= start_of_day(days[0]), column < as_of)
        .all()
    )
    per_day = Counter(as_utc(value).date() for (value,) in created)
    return {day: per_day.get(day, 0) for day in days}


def get_kpis(db: Session, as_of: datetime) -> dict:
    current = _students_created_between(db, as_of - WINDOW, as_of)
    prior = _students_created_between(db, as_of - 2 * WINDOW, as_of - WINDOW)

    enrolled = db.query(Enquiry).filter(Enquiry.status == "ENROLLED").all()
    total_revenue = sum((_course_revenue(enquiry.course) for enquiry in enrolled), Decimal("0"))

    return {
        "total_students": db.query(User).filter(User.role == ROLE_STUDENT, User.banned.is_(False)).count(),
        "student_growth": format_growth(current, prior),
        "pending_enquiries": db.query(Enquiry).filter(Enquiry.status == "NEW").count(),
        "total_revenue": float(total_revenue),
        "total_placements": db.query(Placement).count(),
        "total_enquiries": db.query(Enquiry).count(),
        "enrolled_enquiries": len(enrolled),
    }


def get_top_agents(db: Session) -> list[dict]:
    enrollments = func.count(Enquiry.id)
    ranked = (
        db.query(Enquiry.agent_id, enrollments)
        .filter(Enquiry.status == "ENROLLED", Enquiry.agent_id.isnot(None))
        .group_by(Enquiry.agent_id)
        .order_by(enrollments.desc(), Enquiry.agent_id.asc())
        .limit(TOP_AGENTS_LIMIT)
        .all()
    )
    agent_ids = [agent_id for agent_id, _ in ranked]
    agents = {user.id: user for user in db.query(User).filter(User.id.in_(agent_ids)).all()} if agent_ids else {}

    results = []
    for agent_id, count in ranked:
        agent = agents.get(agent_id)
        summary = (
            {"id": agent.id, "name": agent.name, "email": agent.email, "image": agent.image}
            if agent
            else {"id": agent_id, "name": "Unknown", "email": ""}
        )
        results.append({"agent": summary, "enrollments": count})
    return results


def get_crm_summary(db: Session) -> dict:
    leads = (
        db.query(Enquiry)
        .filter(Enquiry.status == "NEW", Enquiry.agent_id.is_(None))
        .order_by(Enquiry.created_at.desc(), Enquiry.id.desc())
        .limit(UNASSIGNED_LEADS_LIMIT)
        .all()
    )
    return {
        "enquiry_funnel": _status_funnel(db, Enquiry, ENQUIRY_FUNNEL),
        "unassigned_leads": [
            {
                "id": lead.id,
                "name": lead.name,
                "email": lead.email,
                "phone": lead.phone,
                "course": lead.course.title if lead.course else "N/A",
                "created_at": lead.created_at,
            }
            for lead in leads
        ],
        "top_agents": get_top_agents(db),
        "lead_source": {
            "student": db.query(Enquiry).count(),
            "enterprise": db.query(EnterpriseEnquiry).count(),
            "faculty": db.query(FacultyEnquiry).count(),
        },
    }


def get_course_performance(db: Session) -> dict:
    enquiry_count = func.count(Enquiry.id)
    popular = (
        db.query(Course.title, enquiry_count)
        .join(Enquiry, Enquiry.course_id == Course.id)
        .group_by(Course.id, Course.title)
        .order_by(enquiry_count.desc(), Course.id.asc())
        .limit(POPULAR_COURSES_LIMIT)
        .all()
    )

    revenue_by_category: dict[str, Decimal] = {}
    enrolled_with_category = (
        db.query(Enquiry, CourseCategory.title)
        .join(Course, Enquiry.course_id == Course.id)
        .join(CourseCategory, Course.category_id == CourseCategory.id)
        .filter(Enquiry.status == "ENROLLED")
        .all()
    )
    for enquiry, category in enrolled_with_category:
        revenue_by_category[category] = revenue_by_category.get(category, Decimal("0")) + _course_revenue(
            enquiry.course
        )

    difficulty_counts = dict(db.query(Course.difficulty, func.count(Course.id)).group_by(Course.difficulty).all())

    return {
        "popular_courses": [{"course": title, "enquiries": count} for title, count in popular],
        "revenue_by_category": [
            {"category": category, "revenue": float(revenue)}
            for category, revenue in sorted(revenue_by_category.items())
        ],
        "course_difficulty": [
            {"difficulty": difficulty, "count": difficulty_counts.get(difficulty, 0)}
            for difficulty in COURSE_DIFFICULTIES
        ],
    }


def get_hr_summary(db: Session) -> dict:
    top_faculty = (
        db.query(Faculty)
        .order_by(Faculty.ratings.is_(None), Faculty.ratings.desc(), Faculty.id.asc())
        .limit(TOP_FACULTY_LIMIT)
        .all()
    )
    return {
        "hiring_pipeline": _status_funnel(db, FacultyEnquiry, HIRING_PIPELINE),
        "top_faculty": top_faculty,
    }


def get_content_summary(db: Session, as_of: datetime) -> dict:
    activity = _daily_counts(db, Blog.created_at, as_of)
    return {
        "blog_activity": [{"date": day.isoformat(), "count": count} for day, count in activity.items()],
        "pending_reviews": db.query(Testimonial).filter(Testimonial.is_public.is_(False)).count(),
        "total_blogs": db.query(Blog).count(),
        "total_testimonials": db.query(Testimonial).count(),
    }


def get_system_summary(db: Session, as_of: datetime) -> dict:
    trend = _daily_counts(db, User.created_at, as_of)
    by_role = db.query(User.role, func.count(User.id)).group_by(User.role).order_by(User.role.asc()).all()
    return {
        "active_sessions": db.query(UserSession).filter(UserSession.expires_at > as_of).count(),
        "user_registration_trend": [
            {"date": day.isoformat(), "registrations": count} for day, count in trend.items()
        ],
        "users_by_role": [{"role": role, "count": count} for role, count in by_role],
    }


def get_dashboard_snapshot(db: Session, as_of: Optional[datetime] = None) -> dict:
    """Compute the full admin snapshot. Any data-layer error propagates unchanged."""
    as_of = as_utc(as_of) if as_of is not None else utc_now()
    snapshot = {
        "as_of": as_of,
        "kpi": get_kpis(db, as_of),
        "crm": get_crm_summary(db),
        "course_performance": get_course_performance(db),
        "hr": get_hr_summary(db),
        "content": get_content_summary(db, as_of),
        "system": get_system_summary(db, as_of),
    }
    logger.info("Dashboard snapshot computed as of %s", as_of.isoformat())
    return snapshot
