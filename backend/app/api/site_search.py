"""Public search box endpoint."""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from backend.app.db.session import get_db
from backend.app.schemas.content import SearchResponse
from backend.app.services.site_search import MIN_QUERY_LENGTH, search_content

router = APIRouter(prefix="/api", tags=["public"])


@router.get("/search", response_model=SearchResponse)
async def search(
    q: Optional[str] = None,
    search_type: str = Query(default="all", alias="type"),
    limit: Optional[int] = None,
    db: Session = Depends(get_db),
):
    query = (q or "").strip()
    results = search_content(db, query, search_type=search_type, limit=limit)
    response = {
        "data": results,
        "query": query,
        "total_results": len(results["blogs"]) + len(results["courses"]),
    }
    if len(query) < MIN_QUERY_LENGTH:
        response["message"] = f"Search query must be at least {MIN_QUERY_LENGTH} characters"
    return response
