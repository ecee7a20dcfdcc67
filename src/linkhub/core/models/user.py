"""
User model for authentication and public profiles.
"""

from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import Boolean, CheckConstraint, DateTime, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import UUIDModel
from .types import StringListType

if TYPE_CHECKING:
    from .connection import Connection
    from .post import Post


class UserRole(str, Enum):
    """Account roles."""

    MEMBER = "member"
    ADMIN = "admin"


class Capability(str, Enum):
    """Named permissions granted through roles."""

    VIEW_GLOBAL_ANALYTICS = "view_global_analytics"


ROLE_CAPABILITIES: dict[UserRole, frozenset[Capability]] = {
    UserRole.MEMBER: frozenset(),
    UserRole.ADMIN: frozenset({Capability.VIEW_GLOBAL_ANALYTICS}),
}


class User(UUIDModel):
    """User account with email/password auth and profile fields."""

    __tablename__ = "users"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    bio: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    job_title: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    company: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    location: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    skills: Mapped[List[str]] = mapped_column(StringListType, default=list, nullable=False)

    role: Mapped[str] = mapped_column(String(20), default=UserRole.MEMBER.value, nullable=False)
    profile_views: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    last_active: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)

    # Relations
    posts: Mapped[List["Post"]] = relationship(
        "Post",
        back_populates="author",
        lazy="raise",
    )
    connections: Mapped[List["Connection"]] = relationship(
        "Connection",
        foreign_keys="Connection.user_id",
        back_populates="user",
        cascade="all, delete-orphan",
        lazy="raise",
    )

    __table_args__ = (
        CheckConstraint("length(name) <= 100", name="ck_users_name_len"),
        CheckConstraint("role IN ('member', 'admin')", name="ck_users_role"),
        Index("idx_users_active", "is_active"),
        Index("idx_users_last_active", "last_active"),
    )

    def __repr__(self) -> str:
        return f"<User(email='{self.email}')>"

    @property
    def user_role(self) -> UserRole:
        return UserRole(self.role)

    def has_capability(self, capability: Capability) -> bool:
        """Check whether this user's role grants ``capability``."""
        return capability in ROLE_CAPABILITIES.get(self.user_role, frozenset())

    @property
    def is_admin(self) -> bool:
        return self.user_role is UserRole.ADMIN

    def can_login(self) -> bool:
        """Check if user can login."""
        return bool(self.is_active)

    def touch(self) -> None:
        """Record activity now."""
        self.last_active = datetime.now(timezone.utc)

    def was_active_within(self, period: timedelta) -> bool:
        if self.last_active is None:
            return False
        last_active = self.last_active
        # SQLite hands back naive datetimes
        if last_active.tzinfo is None:
            last_active = last_active.replace(tzinfo=timezone.utc)
        return datetime.now(timezone.utc) - last_active <= period
