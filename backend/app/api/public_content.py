"""Read-only content endpoints used by the public marketing pages."""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy import func
from sqlalchemy.orm import Session

from backend.app.core.errors import InvalidInput, NotFound
from backend.app.core.settings import get_settings
from backend.app.crud.crud_content import (
    blog_crud,
    course_category_crud,
    course_crud,
    faculty_crud,
    faq_crud,
    placement_crud,
    testimonial_crud,
)
from backend.app.db.session import get_db
from backend.app.models.blog import Blog, BlogCategory
from backend.app.models.course import Course, CourseCategory
from backend.app.models.faq import Faq, FaqCategory
from backend.app.models.testimonial import Testimonial
from backend.app.schemas import content as schemas
from backend.app.schemas.common import ApiResponse

router = APIRouter(prefix="/api", tags=["public"])


def _published(crud, db: Session, *extra_filters) -> list:
    model = crud.model
    return crud.get_multi(
        db,
        filters=(model.is_public.is_(True), *extra_filters),
        order_by=(model.is_featured.desc(), model.created_at.desc(), model.id.desc()),
    )


def _public_categories(db: Session, category_model, item_model) -> list[dict]:
    counts = dict(
        db.query(item_model.category_id, func.count(item_model.id))
        .filter(item_model.is_public.is_(True), item_model.category_id.isnot(None))
        .group_by(item_model.category_id)
        .all()
    )
    categories = (
        db.query(category_model)
        .filter(category_model.is_public.is_(True))
        .order_by(category_model.title.asc())
        .all()
    )
    return [
        {
            "id": category.id,
            "title": category.title,
            "slug": category.slug,
            "description": category.description,
            "item_count": counts.get(category.id, 0),
        }
        for category in categories
    ]


@router.get("/course-categories", response_model=ApiResponse[list[schemas.CourseCategoryRead]])
async def list_course_categories(db: Session = Depends(get_db)):
    categories = course_category_crud.get_multi(
        db, filters=(CourseCategory.is_active.is_(True),), order_by=(CourseCategory.title.asc(),)
    )
    return {"data": categories}


@router.get("/courses", response_model=ApiResponse[list[schemas.CourseRead]])
async def list_courses(
    category: Optional[str] = None,
    featured: Optional[bool] = None,
    db: Session = Depends(get_db),
):
    filters = []
    if category:
        filters.append(Course.category.has(CourseCategory.slug == category))
    if featured is not None:
        filters.append(Course.is_featured.is_(featured))
    return {"data": _published(course_crud, db, *filters)}


@router.get("/courses/{slug}", response_model=ApiResponse[schemas.CourseRead])
async def get_course(slug: str, db: Session = Depends(get_db)):
    course = course_crud.get_by(db, slug=slug, is_public=True)
    if course is None:
        raise NotFound("Course not found")
    return {"data": course}


@router.get("/blog-categories", response_model=ApiResponse[list[schemas.PublicCategoryRead]])
async def list_blog_categories(db: Session = Depends(get_db)):
    return {"data": _public_categories(db, BlogCategory, Blog)}


@router.get("/blogs", response_model=ApiResponse[list[schemas.BlogRead]])
async def list_blogs(category: Optional[str] = None, db: Session = Depends(get_db)):
    filters = [Blog.category.has(BlogCategory.slug == category)] if category else []
    return {"data": _published(blog_crud, db, *filters)}


@router.get("/blogs/{slug}", response_model=ApiResponse[schemas.BlogRead])
async def get_blog(slug: str, db: Session = Depends(get_db)):
    blog = blog_crud.get_by(db, slug=slug, is_public=True)
    if blog is None:
        raise NotFound("Blog not found")
    return {"data": blog}


@router.get("/faq-categories", response_model=ApiResponse[list[schemas.PublicCategoryRead]])
async def list_faq_categories(db: Session = Depends(get_db)):
    return {"data": _public_categories(db, FaqCategory, Faq)}


@router.get("/faqs", response_model=ApiResponse[list[schemas.FaqRead]])
async def list_faqs(category: Optional[str] = None, db: Session = Depends(get_db)):
    filters = [Faq.category.has(FaqCategory.slug == category)] if category else []
    return {"data": _published(faq_crud, db, *filters)}


@router.get("/placements", response_model=ApiResponse[list[schemas.PlacementRead]])
async def list_placements(db: Session = Depends(get_db)):
    return {"data": _published(placement_crud, db)}


@router.get("/testimonials", response_model=ApiResponse[list[schemas.TestimonialRead]])
async def list_testimonials(db: Session = Depends(get_db)):
    return {"data": _published(testimonial_crud, db)}


@router.get("/faculties", response_model=ApiResponse[list[schemas.FacultyRead]])
async def list_faculties(db: Session = Depends(get_db)):
    return {"data": _published(faculty_crud, db)}


@router.get("/reviews", response_model=schemas.ReviewListResponse)
async def list_reviews(
    page: int = 1,
    limit: int = 10,
    featured: Optional[bool] = None,
    min_rating: Optional[int] = Query(default=None, alias="minRating"),
    db: Session = Depends(get_db),
):
    """Published testimonials, featured and best rated first, with rating stats."""
    settings = get_settings()
    if page < 1 or limit < 1:
        raise InvalidInput("Page and limit must be positive integers")
    if limit > settings.max_page_size:
        raise InvalidInput(f"Limit cannot exceed {settings.max_page_size}")

    filters = [Testimonial.is_public.is_(True)]
    if featured:
        filters.append(Testimonial.is_featured.is_(True))
    if min_rating is not None:
        filters.append(Testimonial.rating >= min_rating)

    total_count = testimonial_crud.count(db, filters=filters)
    reviews = testimonial_crud.get_multi(
        db,
        filters=filters,
        skip=(page - 1) * limit,
        limit=limit,
        order_by=(
            Testimonial.is_featured.desc(),
            Testimonial.rating.desc(),
            Testimonial.created_at.desc(),
            Testimonial.id.desc(),
        ),
    )
    # Stats cover every published review regardless of the filters above
    average, total_reviews = (
        db.query(func.avg(Testimonial.rating), func.count(Testimonial.id))
        .filter(Testimonial.is_public.is_(True))
        .one()
    )
    total_pages = (total_count + limit - 1) // limit
    return {
        "data": reviews,
        "stats": {
            "average_rating": f"{average:.1f}" if average is not None else "0",
            "total_reviews": total_reviews,
        },
        "pagination": {
            "page": page,
            "limit": limit,
            "total_count": total_count,
            "total_pages": total_pages,
            "has_next_page": page < total_pages,
            "has_prev_page": page > 1,
        },
    }
