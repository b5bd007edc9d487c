"""Business rules checked before content rows are written."""

from decimal import Decimal
from typing import Optional

from sqlalchemy.orm import Session

from backend.app.core.errors import InvalidInput
from backend.app.models.blog import BlogCategory
from backend.app.models.course import CourseCategory
from backend.app.models.faq import FaqCategory


def ensure_unique_slug(db: Session, model, slug: Optional[str], *, exclude_id: Optional[int] = None) -> None:
    if slug is None:
        return
    query = db.query(model.id).filter(model.slug == slug)
    if exclude_id is not None:
        query = query.filter(model.id != exclude_id)
    if query.first() is not None:
        raise InvalidInput(f"Slug '{slug}' is already in use")


def validate_course(db: Session, data: dict, existing=None) -> None:
    """Check fees, discount and category against the row as it would be saved."""

    def merged(field):
        if field in data:
            return data[field]
        return getattr(existing, field, None) if existing is not None else None

    fees = merged("fees")
    discount = merged("discount")
    if fees is not None and Decimal(fees) < 0:
        raise InvalidInput("Fees cannot be negative")
    if discount is not None:
        if Decimal(discount) < 0:
            raise InvalidInput("Discount cannot be negative")
        if fees is None or Decimal(discount) > Decimal(fees):
            raise InvalidInput("Discount cannot exceed fees")

    category_id = data.get("category_id")
    if category_id is not None and db.query(CourseCategory.id).filter(CourseCategory.id == category_id).first() is None:
        raise InvalidInput("Course category does not exist")


def category_validator(category_model, label: str):
    """Build a ``validate`` hook that rejects unknown ``category_id`` values."""

    def validate(db: Session, data: dict, existing=None) -> None:
        category_id = data.get("category_id")
        if category_id is None:
            return
        if db.query(category_model.id).filter(category_model.id == category_id).first() is None:
            raise InvalidInput(f"{label} does not exist")

    return validate


validate_blog = category_validator(BlogCategory, "Blog category")
validate_faq = category_validator(FaqCategory, "FAQ category")
