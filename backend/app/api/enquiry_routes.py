"""Router factory for staff-facing enquiry views.

Every admin and role-scoped enquiry endpoint set is produced here from an
``EnquiryKind`` plus the roles allowed to read, assign and delete. Scoped
routers filter every read and write to records assigned to the caller and
never mount assignment or delete routes.
"""

from typing import Optional, Sequence

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from backend.app.core.errors import InvalidInput, PermissionDenied
from backend.app.core.settings import get_settings
from backend.app.db.session import get_db
from backend.app.dependencies.auth import require_roles
from backend.app.models.user import User
from backend.app.schemas.common import ApiResponse, PaginatedResponse, paginated
from backend.app.schemas.enquiry import AssigneeUpdate, EnquiryUpdate, NotesUpdate, StatusUpdate
from backend.app.services import enquiry_workflow as workflow
from backend.app.services.enquiry_workflow import EnquiryKind


def build_enquiry_router(
    kind: EnquiryKind,
    *,
    prefix: str,
    tags: list[str],
    read_schema: type,
    read_roles: Sequence[str],
    assign_roles: Sequence[str] = (),
    delete_roles: Sequence[str] = (),
    scoped: bool = False,
) -> APIRouter:
    router = APIRouter(prefix=prefix, tags=tags)
    reader = require_roles(*read_roles)

    def scope_for(user: User) -> Optional[int]:
        return user.id if scoped else None

    @router.get("", response_model=PaginatedResponse[read_schema])
    async def list_enquiries(
        status_filter: Optional[str] = Query(default=None, alias="status"),
        sub_status: Optional[str] = Query(default=None, alias="subStatus"),
        search: Optional[str] = None,
        page: int = 1,
        page_size: int = Query(default=get_settings().default_page_size, alias="pageSize"),
        db: Session = Depends(get_db),
        current_user: User = Depends(reader),
    ):
        rows, total = workflow.list_enquiries(
            db,
            kind,
            status=status_filter,
            sub_status=sub_status,
            search=search,
            page=page,
            page_size=page_size,
            scope_user_id=scope_for(current_user),
        )
        return paginated(rows, total, page, page_size)

    @router.get("/counts", response_model=ApiResponse[dict[str, int]])
    async def get_counts(
        search: Optional[str] = None,
        db: Session = Depends(get_db),
        current_user: User = Depends(reader),
    ):
        counts = workflow.get_counts(db, kind, search=search, scope_user_id=scope_for(current_user))
        return {"data": counts}

    @router.get("/{enquiry_id}", response_model=ApiResponse[read_schema])
    async def get_enquiry(enquiry_id: int, db: Session = Depends(get_db), current_user: User = Depends(reader)):
        return {"data": workflow.get_enquiry(db, kind, enquiry_id, scope_user_id=scope_for(current_user))}

    @router.put("/{enquiry_id}", response_model=ApiResponse[read_schema])
    async def update_enquiry(
        enquiry_id: int,
        payload: EnquiryUpdate,
        db: Session = Depends(get_db),
        current_user: User = Depends(reader),
    ):
        changes = payload.model_dump(include=payload.model_fields_set)
        if "assigned_to_id" in changes and (scoped or current_user.role not in assign_roles):
            raise PermissionDenied("You are not authorized to change the assignee")
        if not changes:
            raise InvalidInput("No valid fields to update")
        enquiry = workflow.get_enquiry(db, kind, enquiry_id, scope_user_id=scope_for(current_user))
        updated = workflow.apply_update(db, kind, enquiry, changes)
        return {"data": updated, "message": f"{kind.label} updated successfully"}

    @router.patch("/{enquiry_id}/status", response_model=ApiResponse[read_schema])
    async def update_status(
        enquiry_id: int,
        payload: StatusUpdate,
        db: Session = Depends(get_db),
        current_user: User = Depends(reader),
    ):
        enquiry = workflow.get_enquiry(db, kind, enquiry_id, scope_user_id=scope_for(current_user))
        return {"data": workflow.update_status(db, kind, enquiry, payload.status)}

    @router.patch("/{enquiry_id}/notes", response_model=ApiResponse[read_schema])
    async def update_notes(
        enquiry_id: int,
        payload: NotesUpdate,
        db: Session = Depends(get_db),
        current_user: User = Depends(reader),
    ):
        enquiry = workflow.get_enquiry(db, kind, enquiry_id, scope_user_id=scope_for(current_user))
        updated = workflow.update_notes(
            db, kind, enquiry, note=payload.note, remark=payload.remark, fields=payload.model_fields_set
        )
        return {"data": updated}

    if not scoped and assign_roles:

        @router.patch("/{enquiry_id}/assignee", response_model=ApiResponse[read_schema])
        async def assign_enquiry(
            enquiry_id: int,
            payload: AssigneeUpdate,
            db: Session = Depends(get_db),
            current_user: User = Depends(require_roles(*assign_roles)),
        ):
            enquiry = workflow.get_enquiry(db, kind, enquiry_id)
            return {"data": workflow.assign(db, kind, enquiry, payload.assigned_to_id)}

    if not scoped and delete_roles:

        @router.delete("/{enquiry_id}", response_model=ApiResponse[dict])
        async def delete_enquiry(
            enquiry_id: int,
            db: Session = Depends(get_db),
            current_user: User = Depends(require_roles(*delete_roles)),
        ):
            enquiry = workflow.get_enquiry(db, kind, enquiry_id)
            workflow.delete_enquiry(db, kind, enquiry)
            return {"data": {"id": enquiry_id}, "message": f"{kind.label} deleted successfully"}

    return router
