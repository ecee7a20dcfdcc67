"""Analytics API endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.schemas.analytics import DashboardResponse, PersonalAnalyticsResponse
from ..core.services import AnalyticsService
from ..database import get_db_session
from ..middleware.auth import get_current_user_id

router = APIRouter(prefix="/analytics", tags=["analytics"])


@router.get("/dashboard", response_model=DashboardResponse)
async def get_dashboard(
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Site-wide statistics. Admins only."""
    analytics_service = AnalyticsService(session)
    return await analytics_service.get_dashboard(current_user_id)


@router.get("/personal", response_model=PersonalAnalyticsResponse)
async def get_personal(
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    analytics_service = AnalyticsService(session)
    return await analytics_service.get_personal(current_user_id)
