"""CRUD endpoints for courses, blogs and the other public site content.

All resources share one router shape built by ``build_content_router``:
list, create, read, full update, visibility toggle and delete. Writes are
limited to the resource's write roles and deletes to admins. Resources with
an author column are owner-scoped for everyone except admins, which is also
how the student, instructor and counselor "my blogs" routers are built.
"""

import logging
from typing import Callable, Optional, Sequence

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from backend.app.core.errors import NotFound, PermissionDenied
from backend.app.crud.base import CRUDBase
from backend.app.crud.crud_content import (
    blog_category_crud,
    blog_crud,
    course_category_crud,
    course_crud,
    faculty_crud,
    faq_category_crud,
    faq_crud,
    placement_crud,
    testimonial_crud,
)
from backend.app.db.session import get_db
from backend.app.dependencies.auth import require_roles
from backend.app.models.user import (
    ROLE_ADMIN,
    ROLE_CONTENT_WRITER,
    ROLE_COUNSELOR,
    ROLE_INSTRUCTOR,
    ROLE_STUDENT,
    User,
)
from backend.app.schemas import content as schemas
from backend.app.schemas.common import ApiResponse
from backend.app.services.content_rules import ensure_unique_slug, validate_blog, validate_course, validate_faq

logger = logging.getLogger(__name__)


def _writable(model, changes: dict) -> dict:
    # Explicit nulls are ignored for NOT NULL columns
    columns = model.__table__.columns
    return {field: value for field, value in changes.items() if value is not None or columns[field].nullable}


def build_content_router(
    crud: CRUDBase,
    *,
    prefix: str,
    tags: list[str],
    label: str,
    read_schema: type,
    create_schema: type,
    update_schema: type,
    write_roles: Sequence[str] = (ROLE_ADMIN,),
    delete_roles: Sequence[str] = (ROLE_ADMIN,),
    validate: Optional[Callable] = None,
    author_field: Optional[str] = None,
    toggles: bool = True,
) -> APIRouter:
    router = APIRouter(prefix=prefix, tags=tags)
    writer = require_roles(*write_roles)
    model = crud.model
    has_slug = hasattr(model, "slug")

    def owner_scope(current_user: User) -> Optional[int]:
        # Admins manage every row; other writers only rows they authored
        if author_field and not current_user.is_admin:
            return current_user.id
        return None

    def load(db: Session, item_id: int, current_user: User):
        obj = crud.get(db, item_id)
        if obj is None:
            raise NotFound(f"{label} not found")
        owner_id = owner_scope(current_user)
        if owner_id is not None and getattr(obj, author_field) != owner_id:
            raise PermissionDenied(f"You can only manage your own {label.lower()} entries")
        return obj

    def save_changes(db: Session, obj, changes: dict, current_user: User):
        changes = _writable(model, changes)
        if has_slug:
            ensure_unique_slug(db, model, changes.get("slug"), exclude_id=obj.id)
        if validate:
            validate(db, changes, obj)
        updated = crud.update(db, db_obj=obj, obj_in=changes)
        logger.info("User %s updated %s %s", current_user.id, label.lower(), obj.id)
        return updated

    @router.get("", response_model=ApiResponse[list[read_schema]])
    async def list_items(db: Session = Depends(get_db), current_user: User = Depends(writer)):
        owner_id = owner_scope(current_user)
        filters = (getattr(model, author_field) == owner_id,) if owner_id is not None else ()
        return {"data": crud.get_multi(db, filters=filters, order_by=(model.created_at.desc(), model.id.desc()))}

    @router.post("", response_model=ApiResponse[read_schema], status_code=status.HTTP_201_CREATED)
    async def create_item(
        payload: create_schema,
        db: Session = Depends(get_db),
        current_user: User = Depends(writer),
    ):
        data = payload.model_dump()
        if has_slug:
            ensure_unique_slug(db, model, data.get("slug"))
        if validate:
            validate(db, data)
        extra = {author_field: current_user.id} if author_field else {}
        obj = crud.create(db, obj_in=data, **extra)
        logger.info("User %s created %s %s", current_user.id, label.lower(), obj.id)
        return {"data": obj, "message": f"{label} created successfully"}

    @router.get("/{item_id}", response_model=ApiResponse[read_schema])
    async def get_item(item_id: int, db: Session = Depends(get_db), current_user: User = Depends(writer)):
        return {"data": load(db, item_id, current_user)}

    @router.put("/{item_id}", response_model=ApiResponse[read_schema])
    async def update_item(
        item_id: int,
        payload: update_schema,
        db: Session = Depends(get_db),
        current_user: User = Depends(writer),
    ):
        obj = load(db, item_id, current_user)
        updated = save_changes(db, obj, payload.model_dump(exclude_unset=True), current_user)
        return {"data": updated, "message": f"{label} updated successfully"}

    if toggles:

        @router.patch("/{item_id}", response_model=ApiResponse[read_schema])
        async def toggle_item(
            item_id: int,
            payload: schemas.VisibilityUpdate,
            db: Session = Depends(get_db),
            current_user: User = Depends(writer),
        ):
            obj = load(db, item_id, current_user)
            return {"data": save_changes(db, obj, payload.model_dump(exclude_unset=True), current_user)}

    @router.delete("/{item_id}", response_model=ApiResponse[dict])
    async def delete_item(
        item_id: int,
        db: Session = Depends(get_db),
        current_user: User = Depends(require_roles(*delete_roles)),
    ):
        obj = load(db, item_id, current_user)
        crud.delete(db, db_obj=obj)
        logger.info("User %s deleted %s %s", current_user.id, label.lower(), item_id)
        return {"data": {"id": item_id}, "message": f"{label} deleted successfully"}

    return router


routers = [
    build_content_router(
        course_category_crud,
        prefix="/api/admin/course-categories",
        tags=["admin", "courses"],
        label="Course category",
        read_schema=schemas.CourseCategoryRead,
        create_schema=schemas.CourseCategoryCreate,
        update_schema=schemas.CourseCategoryUpdate,
        toggles=False,
    ),
    build_content_router(
        course_crud,
        prefix="/api/admin/courses",
        tags=["admin", "courses"],
        label="Course",
        read_schema=schemas.CourseRead,
        create_schema=schemas.CourseCreate,
        update_schema=schemas.CourseUpdate,
        validate=validate_course,
    ),
    build_content_router(
        blog_category_crud,
        prefix="/api/admin/blog-categories",
        tags=["admin", "blogs"],
        label="Blog category",
        read_schema=schemas.ContentCategoryRead,
        create_schema=schemas.ContentCategoryCreate,
        update_schema=schemas.ContentCategoryUpdate,
        toggles=False,
    ),
    build_content_router(
        blog_crud,
        prefix="/api/admin/blogs",
        tags=["admin", "blogs"],
        label="Blog",
        read_schema=schemas.BlogRead,
        create_schema=schemas.BlogCreate,
        update_schema=schemas.BlogUpdate,
        write_roles=(ROLE_ADMIN, ROLE_CONTENT_WRITER, ROLE_INSTRUCTOR),
        author_field="author_id",
        validate=validate_blog,
    ),
    build_content_router(
        faq_category_crud,
        prefix="/api/admin/faq-categories",
        tags=["admin", "faqs"],
        label="FAQ category",
        read_schema=schemas.ContentCategoryRead,
        create_schema=schemas.ContentCategoryCreate,
        update_schema=schemas.ContentCategoryUpdate,
        toggles=False,
    ),
    build_content_router(
        faq_crud,
        prefix="/api/admin/faqs",
        tags=["admin", "faqs"],
        label="FAQ",
        read_schema=schemas.FaqRead,
        create_schema=schemas.FaqCreate,
        update_schema=schemas.FaqUpdate,
        validate=validate_faq,
    ),
    build_content_router(
        placement_crud,
        prefix="/api/admin/placements",
        tags=["admin", "placements"],
        label="Placement",
        read_schema=schemas.PlacementRead,
        create_schema=schemas.PlacementCreate,
        update_schema=schemas.PlacementUpdate,
    ),
    build_content_router(
        testimonial_crud,
        prefix="/api/admin/testimonials",
        tags=["admin", "testimonials"],
        label="Testimonial",
        read_schema=schemas.TestimonialRead,
        create_schema=schemas.TestimonialCreate,
        update_schema=schemas.TestimonialUpdate,
    ),
    build_content_router(
        faculty_crud,
        prefix="/api/admin/faculties",
        tags=["admin", "faculties"],
        label="Faculty",
        read_schema=schemas.FacultyRead,
        create_schema=schemas.FacultyCreate,
        update_schema=schemas.FacultyUpdate,
    ),
]


def build_author_blog_router(prefix: str, role: str) -> APIRouter:
    # Authors draft and edit their own posts; publishing stays with admins
    return build_content_router(
        blog_crud,
        prefix=prefix,
        tags=["blogs"],
        label="Blog",
        read_schema=schemas.BlogRead,
        create_schema=schemas.AuthorBlogCreate,
        update_schema=schemas.AuthorBlogUpdate,
        write_roles=(role,),
        delete_roles=(role,),
        validate=validate_blog,
        author_field="author_id",
        toggles=False,
    )


author_blog_routers = [
    build_author_blog_router("/api/student/blogs", ROLE_STUDENT),
    build_author_blog_router("/api/instructor/blogs", ROLE_INSTRUCTOR),
    build_author_blog_router("/api/counselor/blogs", ROLE_COUNSELOR),
]
