"""Site-wide search over published blogs and courses.

Terms are matched case-insensitively and literally (LIKE wildcards in the
query are escaped) against titles and descriptions. Blogs filed under a
hidden category are left out even when the blog itself is public.
"""

import logging
from typing import Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from backend.app.core.errors import InvalidInput
from backend.app.core.settings import get_settings
from backend.app.crud.base import ilike_any
from backend.app.models.blog import Blog, BlogCategory
from backend.app.models.course import Course

logger = logging.getLogger(__name__)

SEARCH_TYPES = ("all", "blogs", "courses")
MIN_QUERY_LENGTH = 2
DEFAULT_LIMIT = 10


def _search_blogs(db: Session, term: str, limit: int) -> list[Blog]:
    return (
        db.query(Blog)
        .filter(
            Blog.is_public.is_(True),
            or_(Blog.category_id.is_(None), Blog.category.has(BlogCategory.is_public.is_(True))),
            ilike_any((Blog.title, Blog.description), term),
        )
        .order_by(Blog.is_featured.desc(), Blog.created_at.desc(), Blog.id.desc())
        .limit(limit)
        .all()
    )


def _search_courses(db: Session, term: str, limit: int) -> list[Course]:
    return (
        db.query(Course)
        .filter(Course.is_public.is_(True), ilike_any((Course.title, Course.description), term))
        .order_by(Course.is_featured.desc(), Course.created_at.desc(), Course.id.desc())
        .limit(limit)
        .all()
    )


def search_content(db: Session, query: Optional[str], *, search_type: str = "all", limit: Optional[int] = None) -> dict:
    """Return ``{"blogs": [...], "courses": [...]}``; each list holds at most ``limit`` rows."""
    if search_type not in SEARCH_TYPES:
        raise InvalidInput(f"type must be one of: {', '.join(SEARCH_TYPES)}")
    limit = DEFAULT_LIMIT if limit is None else limit
    if limit < 1:
        raise InvalidInput("Limit must be a positive integer")
    limit = min(limit, get_settings().max_page_size)

    results: dict[str, list] = {"blogs": [], "courses": []}
    term = (query or "").strip()
    if len(term) < MIN_QUERY_LENGTH:
        return results
    if search_type in ("all", "blogs"):
        results["blogs"] = _search_blogs(db, term, limit)
    if search_type in ("all", "courses"):
        results["courses"] = _search_courses(db, term, limit)
    logger.debug("Search %r matched %d blogs and %d courses", term, len(results["blogs"]), len(results["courses"]))
    return results
