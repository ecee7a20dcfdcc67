"""Post repository for database operations."""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import and_, delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.post import Post, PostComment, PostLike, PostShare
from .utils import contains_pattern


class PostRepository:
    """Repository for post database operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    @staticmethod
    def _newest_first(stmt):
        # id is monotonic, so it breaks created_at ties by insertion order
        return stmt.order_by(Post.created_at.desc(), Post.id.desc())

    async def create(self, post_data: dict) -> Post:
        """Create new post."""
        post = Post(**post_data)
        self.session.add(post)
        await self.session.commit()
        return await self.get_by_id(post.id)

    async def get_by_id(self, post_id: int) -> Optional[Post]:
        """Get post by ID with author and engagement loaded."""
        stmt = select(Post).where(Post.id == post_id).execution_options(populate_existing=True)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_all(self, limit: Optional[int] = None) -> List[Post]:
        """All posts, newest first."""
        stmt = self._newest_first(select(Post))
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.session.execute(stmt)
        return list(result.scalars())

    async def list_by_author(self, author_id: UUID) -> List[Post]:
        """Posts written by one user, newest first."""
        stmt = self._newest_first(select(Post).where(Post.author_id == author_id))
        result = await self.session.execute(stmt)
        return list(result.scalars())

    async def search_public_posts(
        self, query: str, page: int = 1, per_page: int = 10
    ) -> List[Post]:
        """Case-insensitive substring match over public post content."""
        stmt = self._newest_first(
            select(Post).where(
                Post.is_public.is_(True),
                Post.content.ilike(contains_pattern(query), escape="\\"),
            )
        )
        stmt = stmt.offset((page - 1) * per_page).limit(per_page)
        result = await self.session.execute(stmt)
        return list(result.scalars())

    async def get_like(self, post_id: int, user_id: UUID) -> Optional[PostLike]:
        stmt = select(PostLike).where(
            and_(PostLike.post_id == post_id, PostLike.user_id == user_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def toggle_like(self, post_id: int, user_id: UUID) -> bool:
        """Like or unlike a post. Returns True if the post is now liked.

        A like inserted concurrently by another request wins the unique
        constraint; the post then counts as liked.
        """
        existing = await self.get_like(post_id, user_id)
        if existing:
            await self.session.execute(delete(PostLike).where(PostLike.id == existing.id))
            await self.session.commit()
            return False

        self.session.add(PostLike(post_id=post_id, user_id=user_id))
        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
        return True

    async def add_comment(self, post_id: int, author_id: UUID, text: str) -> PostComment:
        """Append a comment to a post."""
        comment = PostComment(post_id=post_id, author_id=author_id, text=text)
        self.session.add(comment)
        await self.session.commit()

        stmt = (
            select(PostComment)
            .where(PostComment.id == comment.id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def has_shared(self, post_id: int, user_id: UUID) -> bool:
        stmt = select(PostShare.id).where(
            and_(PostShare.post_id == post_id, PostShare.user_id == user_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def add_share(self, post_id: int, user_id: UUID) -> bool:
        """Record a share. Returns False if the user already shared the post."""
        if await self.has_shared(post_id, user_id):
            return False
        self.session.add(PostShare(post_id=post_id, user_id=user_id))
        try:
            await self.session.commit()
        except IntegrityError:
            # shared by a concurrent request
            await self.session.rollback()
            return False
        return True
