"""Lifecycle and assignment rules shared by every kind of enquiry.

Student, enterprise and faculty enquiries follow the same state machine:
``NEW -> CONTACTED -> won/lost -> ARCHIVED``, with ARCHIVED reachable from
anywhere and no transition table enforced. Assignment is orthogonal to status.
Each kind is described by an ``EnquiryKind`` and every operation here takes
one, so the rules live in a single place.

The "assigned"/"unassigned" split of NEW enquiries is never stored; it is the
predicate ``assignee IS [NOT] NULL`` evaluated at query time.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional, Sequence

from sqlalchemy.orm import Query, Session

from backend.app.core.errors import InvalidInput, NotFound, PermissionDenied
from backend.app.core.settings import get_settings
from backend.app.core.time import utc_now
from backend.app.crud.base import ilike_any
from backend.app.models.course import Course
from backend.app.models.enquiry import ENQUIRY_STATUSES, Enquiry
from backend.app.models.enterprise_enquiry import ENTERPRISE_ENQUIRY_STATUSES, EnterpriseEnquiry
from backend.app.models.faculty_enquiry import FACULTY_ENQUIRY_STATUSES, FacultyEnquiry
from backend.app.models.user import ROLE_AGENT, ROLE_HR, STAFF_ROLES, User

logger = logging.getLogger(__name__)

STATUS_NEW = "NEW"
SUB_STATUS_ASSIGNED = "assigned"
SUB_STATUS_UNASSIGNED = "unassigned"


@dataclass(frozen=True)
class EnquiryKind:
    label: str
    model: type
    statuses: Sequence[str]
    assignee_field: str
    assignee_roles: Sequence[str]
    search_fields: Sequence[str]

    @property
    def assignee_column(self):
        return getattr(self.model, self.assignee_field)

    def get_assignee_id(self, enquiry) -> Optional[int]:
        return getattr(enquiry, self.assignee_field)


STUDENT_ENQUIRY = EnquiryKind(
    label="Enquiry",
    model=Enquiry,
    statuses=ENQUIRY_STATUSES,
    assignee_field="agent_id",
    assignee_roles=(ROLE_AGENT,),
    search_fields=("name", "email", "phone"),
)

ENTERPRISE_ENQUIRY = EnquiryKind(
    label="Enterprise enquiry",
    model=EnterpriseEnquiry,
    statuses=ENTERPRISE_ENQUIRY_STATUSES,
    assignee_field="assigned_to_id",
    assignee_roles=STAFF_ROLES,
    search_fields=("company_name", "email", "phone"),
)

FACULTY_ENQUIRY = EnquiryKind(
    label="Faculty enquiry",
    model=FacultyEnquiry,
    statuses=FACULTY_ENQUIRY_STATUSES,
    assignee_field="assigned_to_id",
    assignee_roles=(ROLE_HR,),
    search_fields=("name", "email", "phone"),
)


def _validate_status(kind: EnquiryKind, status: str) -> str:
    if status not in kind.statuses:
        raise InvalidInput(f"Invalid status '{status}'. Expected one of: {', '.join(kind.statuses)}")
    return status


def _scoped_query(db: Session, kind: EnquiryKind, scope_user_id: Optional[int]) -> Query:
    query = db.query(kind.model)
    if scope_user_id is not None:
        query = query.filter(kind.assignee_column == scope_user_id)
    return query


def _apply_search(kind: EnquiryKind, query: Query, search: Optional[str]) -> Query:
    term = (search or "").strip()
    if not term:
        return query
    return query.filter(ilike_any([getattr(kind.model, field) for field in kind.search_fields], term))


def _apply_sub_status(kind: EnquiryKind, query: Query, sub_status: str) -> Query:
    if sub_status == SUB_STATUS_UNASSIGNED:
        return query.filter(kind.assignee_column.is_(None))
    if sub_status == SUB_STATUS_ASSIGNED:
        return query.filter(kind.assignee_column.isnot(None))
    raise InvalidInput("subStatus must be 'assigned' or 'unassigned'")


def create_enquiry(db: Session, kind: EnquiryKind, data: dict) -> Any:
    """Store a public submission as a NEW, unassigned enquiry."""
    course_id = data.get("course_id")
    if course_id is not None and db.query(Course.id).filter(Course.id == course_id).first() is None:
        raise InvalidInput("Selected course does not exist")

    enquiry = kind.model(**data)
    enquiry.status = STATUS_NEW
    db.add(enquiry)
    db.commit()
    db.refresh(enquiry)
    logger.info("%s %s submitted", kind.label, enquiry.id)
    return enquiry


def list_enquiries(
    db: Session,
    kind: EnquiryKind,
    *,
    status: Optional[str] = None,
    sub_status: Optional[str] = None,
    search: Optional[str] = None,
    page: int = 1,
    page_size: Optional[int] = None,
    scope_user_id: Optional[int] = None,
) -> tuple[list, int]:
    settings = get_settings()
    page_size = page_size if page_size is not None else settings.default_page_size
    if page < 1 or page_size < 1:
        raise InvalidInput("Page and page size must be positive integers")
    if page_size > settings.max_page_size:
        raise InvalidInput(f"Page size cannot exceed {settings.max_page_size}")

    query = _scoped_query(db, kind, scope_user_id)
    if status:
        query = query.filter(kind.model.status == _validate_status(kind, status))
    if sub_status:
        if status != STATUS_NEW:
            raise InvalidInput("subStatus can only be used together with status NEW")
        query = _apply_sub_status(kind, query, sub_status)
    query = _apply_search(kind, query, search)

    total = query.count()
    rows = (
        query.order_by(kind.model.created_at.desc(), kind.model.id.desc())
        .offset((page - 1) * page_size)
        .limit(page_size)
        .all()
    )
    return rows, total


def get_counts(
    db: Session,
    kind: EnquiryKind,
    *,
    search: Optional[str] = None,
    scope_user_id: Optional[int] = None,
) -> dict[str, int]:
    """Tab badge counts, using the same predicates as ``list_enquiries``."""

    def count(*criteria) -> int:
        query = _apply_search(kind, _scoped_query(db, kind, scope_user_id), search)
        return query.filter(*criteria).count()

    status_col = kind.model.status
    counts: dict[str, int] = {
        "NEW_UNASSIGNED": count(status_col == STATUS_NEW, kind.assignee_column.is_(None)),
        "NEW_ASSIGNED": count(status_col == STATUS_NEW, kind.assignee_column.isnot(None)),
    }
    counts[STATUS_NEW] = counts["NEW_UNASSIGNED"] + counts["NEW_ASSIGNED"]
    for status in kind.statuses:
        if status != STATUS_NEW:
            counts[status] = count(status_col == status)
    counts["TOTAL"] = sum(counts[status] for status in kind.statuses)
    return counts


def get_enquiry(db: Session, kind: EnquiryKind, enquiry_id: int, *, scope_user_id: Optional[int] = None) -> Any:
    enquiry = db.query(kind.model).filter(kind.model.id == enquiry_id).first()
    if enquiry is None:
        raise NotFound(f"{kind.label} not found")
    if scope_user_id is not None and kind.get_assignee_id(enquiry) != scope_user_id:
        raise PermissionDenied(f"This {kind.label.lower()} is not assigned to you")
    return enquiry


def _resolve_assignee(db: Session, kind: EnquiryKind, assignee_id: Optional[int]) -> Optional[User]:
    if assignee_id is None:
        return None
    user = db.query(User).filter(User.id == assignee_id).first()
    if user is None:
        raise InvalidInput("Assignee does not exist")
    if user.banned:
        raise InvalidInput("Assignee is banned")
    if user.role not in kind.assignee_roles:
        raise InvalidInput(
            f"{kind.label} can only be assigned to users with role: {', '.join(kind.assignee_roles)}"
        )
    return user


def _set_assignee(kind: EnquiryKind, enquiry, assignee: Optional[User]) -> None:
    setattr(enquiry, kind.assignee_field, assignee.id if assignee else None)
    enquiry.assigned_at = utc_now() if assignee else None


def update_status(db: Session, kind: EnquiryKind, enquiry, new_status: str) -> Any:
    _validate_status(kind, new_status)
    old_status = enquiry.status
    enquiry.status = new_status
    db.commit()
    db.refresh(enquiry)
    logger.info("%s %s status changed from %s to %s", kind.label, enquiry.id, old_status, new_status)
    return enquiry


def assign(db: Session, kind: EnquiryKind, enquiry, assignee_id: Optional[int]) -> Any:
    assignee = _resolve_assignee(db, kind, assignee_id)
    _set_assignee(kind, enquiry, assignee)
    db.commit()
    db.refresh(enquiry)
    if assignee:
        logger.info("%s %s assigned to user %s", kind.label, enquiry.id, assignee.id)
    else:
        logger.info("%s %s unassigned", kind.label, enquiry.id)
    return enquiry


def update_notes(
    db: Session,
    kind: EnquiryKind,
    enquiry,
    *,
    note: Optional[str] = None,
    remark: Optional[str] = None,
    fields: Optional[set[str]] = None,
) -> Any:
    """Set ``note`` and/or ``remark``. ``fields`` limits which ones are written."""
    fields = fields if fields is not None else {"note", "remark"}
    if "note" in fields:
        enquiry.note = note
    if "remark" in fields:
        enquiry.remark = remark
    db.commit()
    db.refresh(enquiry)
    logger.info("%s %s notes updated", kind.label, enquiry.id)
    return enquiry


def apply_update(db: Session, kind: EnquiryKind, enquiry, changes: dict) -> Any:
    """Apply a combined update after validating every part of it.

    ``changes`` holds only the keys present in the request (``status``,
    ``assigned_to_id``, ``note``, ``remark``). Nothing is written if any part
    is invalid.
    """
    if "status" in changes and changes["status"] is not None:
        _validate_status(kind, changes["status"])
    assignee = None
    if "assigned_to_id" in changes:
        assignee = _resolve_assignee(db, kind, changes["assigned_to_id"])

    if changes.get("status") is not None and changes["status"] != enquiry.status:
        logger.info("%s %s status changed from %s to %s", kind.label, enquiry.id, enquiry.status, changes["status"])
        enquiry.status = changes["status"]
    if "assigned_to_id" in changes:
        _set_assignee(kind, enquiry, assignee)
        logger.info("%s %s assignee set to %s", kind.label, enquiry.id, assignee.id if assignee else None)
    if "note" in changes:
        enquiry.note = changes["note"]
    if "remark" in changes:
        enquiry.remark = changes["remark"]
    db.commit()
    db.refresh(enquiry)
    return enquiry


def delete_enquiry(db: Session, kind: EnquiryKind, enquiry) -> None:
    enquiry_id = enquiry.id
    db.delete(enquiry)
    db.commit()
    logger.info("%s %s deleted", kind.label, enquiry_id)
