"""User repository for database operations."""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import func, literal, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.connection import ProfileView
from ..models.user import User
from .utils import contains_pattern


class UserRepository:
    """Repository for user database operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_user(self, user_data: dict) -> User:
        """Create new user."""
        user = User(**user_data)
        self.session.add(user)
        await self.session.commit()
        await self.session.refresh(user)
        return user

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID."""
        stmt = select(User).where(User.id == user_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_active_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID if the account is active."""
        stmt = select(User).where(User.id == user_id, User.is_active.is_(True))
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email (case-insensitive)."""
        stmt = select(User).where(User.email == email.strip().lower())
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def is_email_taken(self, email: str) -> bool:
        """Check if email exists."""
        return await self.get_by_email(email) is not None

    async def update_user(self, user_id: UUID, update_data: dict) -> Optional[User]:
        """Update user data."""
        user = await self.get_by_id(user_id)
        if not user:
            return None

        for key, value in update_data.items():
            setattr(user, key, value)

        await self.session.commit()
        await self.session.refresh(user)
        return user

    async def touch(self, user_id: UUID) -> None:
        """Set last_active to now."""
        stmt = update(User).where(User.id == user_id).values(last_active=func.now())
        await self.session.execute(stmt)
        await self.session.commit()

    async def record_profile_view(self, user_id: UUID, viewer_id: Optional[UUID]) -> None:
        """Store a view event and bump the counter in one transaction."""
        self.session.add(ProfileView(viewed_user_id=user_id, viewer_id=viewer_id))
        await self.session.execute(
            update(User)
            .where(User.id == user_id)
            .values(profile_views=User.profile_views + 1)
        )
        await self.session.commit()

    async def search_active_users(
        self, query: str, page: int = 1, per_page: int = 10
    ) -> List[User]:
        """Case-insensitive substring match on name, job title, company and skills."""
        pattern = contains_pattern(query)
        condition = or_(
            User.name.ilike(pattern, escape="\\"),
            User.job_title.ilike(pattern, escape="\\"),
            User.company.ilike(pattern, escape="\\"),
            self._any_skill_matches(pattern),
        )
        stmt = (
            select(User)
            .where(User.is_active.is_(True), condition)
            .order_by(User.created_at)
            .offset((page - 1) * per_page)
            .limit(per_page)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars())

    def _any_skill_matches(self, pattern: str):
        """EXISTS over the individual entries of ``users.skills``."""
        if self.session.get_bind().dialect.name == "postgresql":
            skills = func.unnest(User.skills).table_valued("value").render_derived(name="skill")
        else:
            # stored as a JSON array in a TEXT column
            skills = func.json_each(User.skills).table_valued("value").alias("skill")
        return (
            select(literal(1))
            .select_from(skills)
            .where(skills.c.value.ilike(pattern, escape="\\"))
            .exists()
        )
