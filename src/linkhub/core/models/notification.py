# Notifications delivered to users
import uuid
from enum import Enum
from typing import TYPE_CHECKING, Optional

from sqlalchemy import Boolean, CheckConstraint, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import UUIDModel
from .types import GUID

if TYPE_CHECKING:
    from .post import Post
    from .user import User


class NotificationType(str, Enum):
    """Notification kinds."""

    LIKE = "like"
    COMMENT = "comment"
    CONNECTION_REQUEST = "connection_request"
    CONNECTION_ACCEPTED = "connection_accepted"
    FOLLOW = "follow"
    POST_MENTION = "post_mention"


class Notification(UUIDModel):
    """Something that happened which the recipient should know about.

    Lifecycle: unread -> read, and either state -> deleted. Nothing flips a
    notification back to unread.
    """

    __tablename__ = "notifications"

    recipient_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    sender_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    type: Mapped[str] = mapped_column(String(30), nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    related_post_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("posts.id", ondelete="SET NULL"), nullable=True
    )
    is_read: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    sender: Mapped["User"] = relationship("User", foreign_keys=[sender_id], lazy="selectin")
    recipient: Mapped["User"] = relationship("User", foreign_keys=[recipient_id], lazy="raise")
    related_post: Mapped[Optional["Post"]] = relationship("Post", lazy="selectin")

    __table_args__ = (
        CheckConstraint(
            "type IN ('like', 'comment', 'connection_request', 'connection_accepted', "
            "'follow', 'post_mention')",
            name="ck_notifications_type",
        ),
        Index("idx_notifications_recipient_created", "recipient_id", "created_at"),
        Index("idx_notifications_recipient_read", "recipient_id", "is_read"),
    )

    def __repr__(self) -> str:
        return f"<Notification(type={self.type}, recipient_id={self.recipient_id}, read={self.is_read})>"
