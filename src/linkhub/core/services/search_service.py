"""Search service implementation."""

from typing import List, Optional, Union

from sqlalchemy.ext.asyncio import AsyncSession

from ...config import get_settings
from ..exceptions import ValidationError
from ..logging import get_logger
from ..redis_client import get_redis_client
from ..repositories.post_repository import PostRepository
from ..repositories.user_repository import UserRepository
from ..schemas.search import SearchResponse, SearchType, TrendingItem
from ..schemas.users import UserSearchResult
from .interfaces import ISearchService
from .post_service import post_to_response

logger = get_logger("services.search")

# Served until enough real searches have been recorded
DEFAULT_TRENDING = [
    ("React Developer", 245),
    ("Node.js", 189),
    ("UI/UX Designer", 156),
    ("Full Stack", 134),
    ("JavaScript", 128),
    ("Product Manager", 95),
    ("Data Science", 87),
    ("DevOps", 76),
]


def parse_search_type(value: Union[str, SearchType, None]) -> SearchType:
    if value is None or value == "":
        return SearchType.ALL
    try:
        return SearchType(value)
    except ValueError:
        raise ValidationError(
            "Invalid search type", error=f"type must be one of: {', '.join(t.value for t in SearchType)}"
        )


class SearchService(ISearchService):
    """Search service implementation."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.user_repo = UserRepository(session)
        self.post_repo = PostRepository(session)
        self.redis_client = get_redis_client()
        self.settings = get_settings()

    async def search(
        self,
        query: str,
        search_type: Union[SearchType, str] = SearchType.ALL,
        page: int = 1,
        limit: int = 10,
    ) -> SearchResponse:
        """Case-insensitive substring search over users and/or posts.

        Each category is paginated on its own with the same window.
        """
        query = (query or "").strip()
        if not query:
            raise ValidationError("Search query is required")
        search_type = parse_search_type(search_type)
        if page < 1 or limit < 1:
            raise ValidationError("Invalid pagination parameters")
        limit = min(limit, self.settings.max_page_size)

        response = SearchResponse(query=query, type=search_type, page=page, limit=limit)

        if search_type in (SearchType.ALL, SearchType.USERS):
            users = await self.user_repo.search_active_users(query, page, limit)
            response.users = [UserSearchResult.model_validate(u) for u in users]

        if search_type in (SearchType.ALL, SearchType.POSTS):
            posts = await self.post_repo.search_public_posts(query, page, limit)
            response.posts = [post_to_response(p) for p in posts]

        await self.redis_client.record_search_query(query)
        logger.debug(
            "Search executed",
            extra={"search_type": search_type.value, "page": page, "limit": limit},
        )
        return response

    async def get_trending(self, limit: Optional[int] = None) -> List[TrendingItem]:
        """Most searched queries, highest count first."""
        limit = limit or self.settings.trending_limit
        limit = max(1, min(limit, self.settings.max_page_size))

        live = await self.redis_client.get_trending(limit)
        rows = live if live else DEFAULT_TRENDING[:limit]
        return [TrendingItem(query=query, count=count) for query, count in rows]
