"""Search API endpoints."""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from ..config import get_settings
from ..core.schemas.search import SearchResponse, TrendingItem
from ..core.services import SearchService
from ..database import get_db_session
from ..middleware.auth import get_current_user_id

router = APIRouter(prefix="/search", tags=["search"])

settings = get_settings()


@router.get("/trending", response_model=List[TrendingItem])
async def get_trending(
    limit: Optional[int] = Query(None, ge=1, le=50),
    session: AsyncSession = Depends(get_db_session),
):
    """Popular search queries. Public."""
    search_service = SearchService(session)
    return await search_service.get_trending(limit)


@router.get("", response_model=SearchResponse, response_model_exclude_none=True)
async def search(
    q: str = Query("", description="Search query"),
    type: str = Query("all", description="all, users or posts"),
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=settings.max_page_size),
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Search users and/or public posts by case-insensitive substring."""
    search_service = SearchService(session)
    return await search_service.search(q, type, page, limit)
