"""Aggregate queries behind the analytics endpoints."""

from datetime import datetime
from typing import Any, Dict, List
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.connection import Connection, ConnectionStatus, ProfileView
from ..models.post import Post, PostComment, PostLike, PostShare
from ..models.user import User


def _count_for_post(model):
    return (
        select(func.count(model.id))
        .where(model.post_id == Post.id)
        .correlate(Post)
        .scalar_subquery()
    )


def _day(value: Any) -> str:
    # PostgreSQL hands back a date, SQLite a string
    return str(value)


class AnalyticsRepository:
    """Read-only aggregate queries over users, posts and connections."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _scalar(self, stmt) -> int:
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    # Global

    async def count_active_users(self) -> int:
        return await self._scalar(select(func.count(User.id)).where(User.is_active.is_(True)))

    async def count_public_posts(self) -> int:
        return await self._scalar(select(func.count(Post.id)).where(Post.is_public.is_(True)))

    async def count_all_posts(self) -> int:
        return await self._scalar(select(func.count(Post.id)))

    async def count_accepted_connections(self) -> int:
        """Accepted entries summed over every user's connection list."""
        return await self._scalar(
            select(func.count(Connection.id)).where(
                Connection.status == ConnectionStatus.ACCEPTED.value
            )
        )

    async def count_users_active_since(self, since: datetime) -> int:
        return await self._scalar(
            select(func.count(User.id)).where(
                User.is_active.is_(True), User.last_active >= since
            )
        )

    async def daily_new_users(self, since: datetime) -> List[Dict[str, Any]]:
        """New active users per calendar day, oldest day first."""
        day = func.date(User.created_at).label("day")
        stmt = (
            select(day, func.count(User.id).label("users"))
            .where(User.created_at >= since, User.is_active.is_(True))
            .group_by(day)
            .order_by(day)
        )
        result = await self.session.execute(stmt)
        return [{"date": _day(row.day), "users": row.users} for row in result]

    async def engagement_totals(self) -> Dict[str, int]:
        """Total likes, comments and shares across all posts."""
        return {
            "total_likes": await self._scalar(select(func.count(PostLike.id))),
            "total_comments": await self._scalar(select(func.count(PostComment.id))),
            "total_shares": await self._scalar(select(func.count(PostShare.id))),
        }

    # Per author

    async def daily_engagement_for_author(self, author_id: UUID) -> List[Dict[str, Any]]:
        """Engagement summed per posting day for one author's posts."""
        per_post = (
            select(
                func.date(Post.created_at).label("day"),
                (
                    _count_for_post(PostLike)
                    + _count_for_post(PostComment)
                    + _count_for_post(PostShare)
                ).label("engagement"),
            )
            .where(Post.author_id == author_id)
            .subquery()
        )
        stmt = (
            select(
                per_post.c.day,
                func.sum(per_post.c.engagement).label("total_engagement"),
                func.count().label("post_count"),
            )
            .group_by(per_post.c.day)
            .order_by(per_post.c.day)
        )
        result = await self.session.execute(stmt)
        return [
            {
                "date": _day(row.day),
                "total_engagement": int(row.total_engagement or 0),
                "post_count": row.post_count,
            }
            for row in result
        ]

    async def top_posts_for_author(self, author_id: UUID, limit: int = 5) -> List[Dict[str, Any]]:
        """Best performing posts: likes first, then comments, then shares."""
        likes = _count_for_post(PostLike).label("likes")
        comments = _count_for_post(PostComment).label("comments")
        shares = _count_for_post(PostShare).label("shares")
        stmt = (
            select(Post.id, Post.content, Post.created_at, likes, comments, shares)
            .where(Post.author_id == author_id)
            .order_by(
                likes.desc(),
                comments.desc(),
                shares.desc(),
                Post.created_at.desc(),
                Post.id.desc(),
            )
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [
            {
                "id": row.id,
                "content": row.content,
                "created_at": row.created_at,
                "likes": row.likes,
                "comments": row.comments,
                "shares": row.shares,
            }
            for row in result
        ]

    async def author_totals(self, author_id: UUID) -> Dict[str, int]:
        """Post count and engagement totals for one author."""
        post_ids = select(Post.id).where(Post.author_id == author_id)
        return {
            "total_posts": await self._scalar(
                select(func.count(Post.id)).where(Post.author_id == author_id)
            ),
            "total_likes": await self._scalar(
                select(func.count(PostLike.id)).where(PostLike.post_id.in_(post_ids))
            ),
            "total_comments": await self._scalar(
                select(func.count(PostComment.id)).where(PostComment.post_id.in_(post_ids))
            ),
            "total_shares": await self._scalar(
                select(func.count(PostShare.id)).where(PostShare.post_id.in_(post_ids))
            ),
        }

    async def daily_profile_views(self, user_id: UUID, since: datetime) -> Dict[str, int]:
        """Recorded profile views per day, keyed by ISO date."""
        day = func.date(ProfileView.created_at).label("day")
        stmt = (
            select(day, func.count(ProfileView.id).label("views"))
            .where(ProfileView.viewed_user_id == user_id, ProfileView.created_at >= since)
            .group_by(day)
        )
        result = await self.session.execute(stmt)
        return {_day(row.day): row.views for row in result}
