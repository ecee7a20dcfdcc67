"""Analytics service implementation."""

from datetime import date, datetime, timedelta, timezone
from typing import List
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import ForbiddenError, NotFoundError
from ..logging import get_logger
from ..models.user import Capability, User
from ..repositories.analytics_repository import AnalyticsRepository
from ..repositories.user_repository import UserRepository
from ..schemas.analytics import (
    DailyEngagement,
    DailyUsers,
    DailyViews,
    DashboardOverview,
    DashboardResponse,
    EngagementStats,
    PersonalAnalyticsResponse,
    PersonalSummary,
    TopPost,
)
from .interfaces import IAnalyticsService

logger = get_logger("services.analytics")

ACTIVE_WINDOW = timedelta(days=7)
GROWTH_WINDOW_DAYS = 30
PROFILE_VIEW_DAYS = 7
TOP_POSTS = 5


def _average(total: int, count: int) -> float:
    return round(total / count, 2) if count else 0.0


def _day_series(days: int, today: date) -> List[str]:
    """ISO dates for the last ``days`` days, oldest first, ending today."""
    return [(today - timedelta(days=offset)).isoformat() for offset in range(days - 1, -1, -1)]


class AnalyticsService(IAnalyticsService):
    """Analytics service implementation."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.analytics_repo = AnalyticsRepository(session)
        self.user_repo = UserRepository(session)

    async def _get_user(self, user_id: UUID) -> User:
        user = await self.user_repo.get_active_by_id(user_id)
        if not user:
            raise NotFoundError("User not found")
        return user

    async def get_dashboard(self, user_id: UUID) -> DashboardResponse:
        """Site-wide stats, only for principals allowed to see them."""
        user = await self._get_user(user_id)
        if not user.has_capability(Capability.VIEW_GLOBAL_ANALYTICS):
            logger.warning("Dashboard access denied", extra={"user_id": str(user_id)})
            raise ForbiddenError("Admin access required")

        now = datetime.now(timezone.utc)
        overview = DashboardOverview(
            total_users=await self.analytics_repo.count_active_users(),
            total_posts=await self.analytics_repo.count_public_posts(),
            total_connections=await self.analytics_repo.count_accepted_connections(),
            active_users=await self.analytics_repo.count_users_active_since(now - ACTIVE_WINDOW),
        )

        growth = await self.analytics_repo.daily_new_users(now - timedelta(days=GROWTH_WINDOW_DAYS))

        totals = await self.analytics_repo.engagement_totals()
        post_count = await self.analytics_repo.count_all_posts()
        engagement = EngagementStats(
            avg_likes=_average(totals["total_likes"], post_count),
            avg_comments=_average(totals["total_comments"], post_count),
            avg_shares=_average(totals["total_shares"], post_count),
            **totals,
        )

        return DashboardResponse(
            overview=overview,
            user_growth=[DailyUsers(**row) for row in growth],
            engagement=engagement,
        )

    async def get_personal(self, user_id: UUID) -> PersonalAnalyticsResponse:
        """The principal's own posting and profile numbers."""
        user = await self._get_user(user_id)
        now = datetime.now(timezone.utc)

        engagement = await self.analytics_repo.daily_engagement_for_author(user.id)
        top_posts = await self.analytics_repo.top_posts_for_author(user.id, TOP_POSTS)
        totals = await self.analytics_repo.author_totals(user.id)

        # midnight at the start of the oldest day in the series
        first_day = (now - timedelta(days=PROFILE_VIEW_DAYS - 1)).replace(
            hour=0, minute=0, second=0, microsecond=0
        )
        views_by_day = await self.analytics_repo.daily_profile_views(user.id, first_day)
        profile_views = [
            DailyViews(date=day, views=views_by_day.get(day, 0))
            for day in _day_series(PROFILE_VIEW_DAYS, now.date())
        ]

        return PersonalAnalyticsResponse(
            engagement_over_time=[DailyEngagement(**row) for row in engagement],
            top_posts=[TopPost(**row) for row in top_posts],
            profile_views=profile_views,
            summary=PersonalSummary(profile_views=user.profile_views, **totals),
        )
