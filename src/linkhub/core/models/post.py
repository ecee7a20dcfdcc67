# Posts and their engagement records
import uuid
from typing import TYPE_CHECKING, List

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    ForeignKey,
    Index,
    Integer,
    Text,
    UniqueConstraint,
    event,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.orm import attributes as orm_attributes

from .base import BaseModel, UUIDModel
from .types import GUID

if TYPE_CHECKING:
    from .user import User


class Post(BaseModel):
    """Short text update written by a user."""

    __tablename__ = "posts"

    # Integer key: monotonic, so it doubles as the insertion-order tie-break
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    author_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)
    is_public: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    author: Mapped["User"] = relationship("User", back_populates="posts", lazy="selectin")

    likes: Mapped[List["PostLike"]] = relationship(
        "PostLike",
        back_populates="post",
        cascade="all, delete-orphan",
        lazy="selectin",
    )
    comments: Mapped[List["PostComment"]] = relationship(
        "PostComment",
        back_populates="post",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="PostComment.created_at",
    )
    shares: Mapped[List["PostShare"]] = relationship(
        "PostShare",
        back_populates="post",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    __table_args__ = (
        CheckConstraint("length(trim(content)) > 0", name="ck_posts_content_not_blank"),
        Index("idx_posts_author_created", "author_id", "created_at"),
        Index("idx_posts_public_created", "is_public", "created_at"),
    )

    def __repr__(self) -> str:
        truncated = self.content if len(self.content) <= 30 else (self.content[:30] + "...")
        return f"<Post(content='{truncated}', author_id={self.author_id})>"

    @property
    def like_count(self) -> int:
        return len(self.likes)

    @property
    def comment_count(self) -> int:
        return len(self.comments)

    @property
    def share_count(self) -> int:
        return len(self.shares)

    @property
    def engagement(self) -> int:
        """Likes, comments and shares combined."""
        return self.like_count + self.comment_count + self.share_count

    def is_liked_by(self, user_id: uuid.UUID) -> bool:
        return any(like.user_id == user_id for like in self.likes)


# Ensure relationship collections are initialized to avoid implicit lazy loads
@event.listens_for(Post, "init", propagate=True)
def _init_post_collections(target, args, kwargs):
    for name in ("likes", "comments", "shares"):
        if name not in kwargs:
            orm_attributes.set_committed_value(target, name, [])


class PostLike(UUIDModel):
    """A user liking a post; at most one per pair."""

    __tablename__ = "post_likes"

    post_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )

    post: Mapped["Post"] = relationship("Post", back_populates="likes")

    __table_args__ = (
        UniqueConstraint("post_id", "user_id", name="uq_post_likes_post_user"),
        Index("idx_post_likes_post_id", "post_id"),
    )


class PostComment(UUIDModel):
    """Comment on a post."""

    __tablename__ = "post_comments"

    post_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False
    )
    author_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    text: Mapped[str] = mapped_column(Text, nullable=False)

    post: Mapped["Post"] = relationship("Post", back_populates="comments")
    author: Mapped["User"] = relationship("User", lazy="selectin")

    __table_args__ = (Index("idx_post_comments_post_id", "post_id"),)


class PostShare(UUIDModel):
    """A user sharing a post; at most one per pair."""

    __tablename__ = "post_shares"

    post_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )

    post: Mapped["Post"] = relationship("Post", back_populates="shares")

    __table_args__ = (
        UniqueConstraint("post_id", "user_id", name="uq_post_shares_post_user"),
        Index("idx_post_shares_post_id", "post_id"),
    )
