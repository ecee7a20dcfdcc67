"""
Analytics schemas.
"""

from datetime import datetime
from typing import List

from .common import CamelModel


class DashboardOverview(CamelModel):
    total_users: int
    total_posts: int
    total_connections: int
    active_users: int


class DailyUsers(CamelModel):
    date: str
    users: int


class EngagementStats(CamelModel):
    avg_likes: float = 0.0
    avg_comments: float = 0.0
    avg_shares: float = 0.0
    total_likes: int = 0
    total_comments: int = 0
    total_shares: int = 0


class DashboardResponse(CamelModel):
    """Site-wide numbers for administrators."""

    overview: DashboardOverview
    user_growth: List[DailyUsers]
    engagement: EngagementStats


class DailyEngagement(CamelModel):
    date: str
    total_engagement: int
    post_count: int


class TopPost(CamelModel):
    id: int
    content: str
    created_at: datetime
    likes: int
    comments: int
    shares: int


class DailyViews(CamelModel):
    date: str
    views: int


class PersonalSummary(CamelModel):
    total_posts: int
    total_likes: int
    total_comments: int
    total_shares: int
    profile_views: int


class PersonalAnalyticsResponse(CamelModel):
    """A user's own engagement numbers."""

    engagement_over_time: List[DailyEngagement]
    top_posts: List[TopPost]
    profile_views: List[DailyViews]
    summary: PersonalSummary
