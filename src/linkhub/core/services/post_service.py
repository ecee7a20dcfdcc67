"""Post service implementation."""

from typing import List
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from ...config import get_settings
from ..exceptions import NotFoundError, ValidationError
from ..logging import get_logger
from ..models.notification import NotificationType
from ..models.post import Post, PostComment
from ..repositories.post_repository import PostRepository
from ..repositories.user_repository import UserRepository
from ..schemas.posts import CommentResponse, LikeResponse, PostResponse, ShareResponse
from ..schemas.users import UserSummary
from .interfaces import IPostService
from .notification_service import NotificationService

logger = get_logger("services.posts")


def comment_to_response(comment: PostComment) -> CommentResponse:
    return CommentResponse(
        id=comment.id,
        author=UserSummary.model_validate(comment.author),
        text=comment.text,
        created_at=comment.created_at,
    )


def post_to_response(post: Post) -> PostResponse:
    """Serialize a post with its author's public fields only."""
    return PostResponse(
        id=post.id,
        content=post.content,
        is_public=post.is_public,
        author=UserSummary.model_validate(post.author),
        likes=[like.user_id for like in post.likes],
        comments=[comment_to_response(c) for c in post.comments],
        shares=[share.user_id for share in post.shares],
        like_count=post.like_count,
        comment_count=post.comment_count,
        share_count=post.share_count,
        created_at=post.created_at,
    )


class PostService(IPostService):
    """Post service implementation."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.post_repo = PostRepository(session)
        self.user_repo = UserRepository(session)
        self.notifications = NotificationService(session)
        self.settings = get_settings()

    async def _get_post(self, post_id: int) -> Post:
        post = await self.post_repo.get_by_id(post_id)
        if not post:
            raise NotFoundError("Post not found")
        return post

    async def list_posts(self) -> List[PostResponse]:
        """All posts, newest first."""
        posts = await self.post_repo.list_all()
        return [post_to_response(p) for p in posts]

    async def list_user_posts(self, author_id: UUID) -> List[PostResponse]:
        posts = await self.post_repo.list_by_author(author_id)
        return [post_to_response(p) for p in posts]

    async def create_post(self, user_id: UUID, content: str, is_public: bool = True) -> PostResponse:
        """Create a post. Content is stored trimmed and must not be blank."""
        content = (content or "").strip()
        if not content:
            raise ValidationError("Post content is required")
        if len(content) > self.settings.post_max_length:
            raise ValidationError(
                f"Post content must be at most {self.settings.post_max_length} characters"
            )

        post = await self.post_repo.create(
            {"author_id": user_id, "content": content, "is_public": is_public}
        )
        logger.info("Post created", extra={"post_id": post.id, "user_id": str(user_id)})
        return post_to_response(post)

    async def toggle_like(self, user_id: UUID, post_id: int) -> LikeResponse:
        """Like a post, or remove the like if it is already there."""
        post = await self._get_post(post_id)
        # a rolled back insert expires the loaded post
        author_id = post.author_id
        liked = await self.post_repo.toggle_like(post_id, user_id)

        if liked:
            liker = await self.user_repo.get_by_id(user_id)
            await self.notifications.notify(
                recipient_id=author_id,
                sender_id=user_id,
                type=NotificationType.LIKE,
                message=f"{liker.name} liked your post",
                related_post_id=post_id,
            )

        post = await self._get_post(post_id)
        return LikeResponse(liked=liked, like_count=post.like_count)

    async def add_comment(self, user_id: UUID, post_id: int, text: str) -> CommentResponse:
        text = (text or "").strip()
        if not text:
            raise ValidationError("Comment text is required")
        if len(text) > self.settings.comment_max_length:
            raise ValidationError(
                f"Comment must be at most {self.settings.comment_max_length} characters"
            )

        post = await self._get_post(post_id)
        comment = await self.post_repo.add_comment(post.id, user_id, text)

        await self.notifications.notify(
            recipient_id=post.author_id,
            sender_id=user_id,
            type=NotificationType.COMMENT,
            message=f"{comment.author.name} commented on your post",
            related_post_id=post.id,
        )
        return comment_to_response(comment)

    async def share_post(self, user_id: UUID, post_id: int) -> ShareResponse:
        """Share a post. Sharing twice is a no-op."""
        await self._get_post(post_id)
        shared = await self.post_repo.add_share(post_id, user_id)
        post = await self._get_post(post_id)
        return ShareResponse(shared=shared, share_count=post.share_count)
