"""
Search schemas.
"""

from enum import Enum
from typing import List, Optional

from .common import CamelModel
from .posts import PostResponse
from .users import UserSearchResult


class SearchType(str, Enum):
    ALL = "all"
    USERS = "users"
    POSTS = "posts"


class SearchResponse(CamelModel):
    """Matches per category; a category not searched is left out."""

    query: str
    type: SearchType
    page: int
    limit: int
    users: Optional[List[UserSearchResult]] = None
    posts: Optional[List[PostResponse]] = None


class TrendingItem(CamelModel):
    query: str
    count: int
