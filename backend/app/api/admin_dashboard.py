"""Admin analytics dashboard endpoint."""

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from backend.app.db.session import get_db
from backend.app.dependencies.auth import get_current_admin
from backend.app.models.user import User
from backend.app.schemas.common import ApiResponse
from backend.app.schemas.dashboard import DashboardSnapshot
from backend.app.services.dashboard_service import get_dashboard_snapshot

router = APIRouter(prefix="/api/admin/dashboard", tags=["dashboard"])


@router.get("", response_model=ApiResponse[DashboardSnapshot])
async def get_dashboard(
    as_of: Optional[datetime] = Query(default=None, alias="asOf"),
    db: Session = Depends(get_db),
    current_admin: User = Depends(get_current_admin),
):
    """Institute-wide snapshot; ``asOf`` defaults to now and naive values are read as UTC."""
    return {"data": get_dashboard_snapshot(db, as_of)}
