# Connections between users and profile view tracking
import uuid
from enum import Enum
from typing import TYPE_CHECKING, Optional

from sqlalchemy import Boolean, CheckConstraint, ForeignKey, Index, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import UUIDModel
from .types import GUID

if TYPE_CHECKING:
    from .user import User


class ConnectionStatus(str, Enum):
    """Connection status options."""

    PENDING = "pending"
    ACCEPTED = "accepted"


class Connection(UUIDModel):
    """One entry in a user's connection list.

    Every connection is stored twice, once per side, so a user's list is a
    plain ``WHERE user_id = ?``.
    """

    __tablename__ = "connections"

    user_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    peer_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    status: Mapped[str] = mapped_column(
        String(20), default=ConnectionStatus.PENDING.value, nullable=False
    )
    # True on the side that sent the request
    is_requester: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    user: Mapped["User"] = relationship(
        "User", foreign_keys=[user_id], back_populates="connections"
    )
    peer: Mapped["User"] = relationship("User", foreign_keys=[peer_id], lazy="selectin")

    __table_args__ = (
        UniqueConstraint("user_id", "peer_id", name="uq_connections_user_peer"),
        CheckConstraint("user_id <> peer_id", name="ck_connections_not_self"),
        CheckConstraint("status IN ('pending', 'accepted')", name="ck_connections_status"),
        Index("idx_connections_user_status", "user_id", "status"),
    )

    def __repr__(self) -> str:
        return f"<Connection(user_id={self.user_id}, peer_id={self.peer_id}, status={self.status})>"

    @property
    def is_accepted(self) -> bool:
        return self.status == ConnectionStatus.ACCEPTED.value

    @property
    def is_incoming_request(self) -> bool:
        return self.status == ConnectionStatus.PENDING.value and not self.is_requester


class ProfileView(UUIDModel):
    """A single view of someone's public profile."""

    __tablename__ = "profile_views"

    viewed_user_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    # None for anonymous visitors
    viewer_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        GUID(), ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    )

    __table_args__ = (
        Index("idx_profile_views_viewed_created", "viewed_user_id", "created_at"),
    )
