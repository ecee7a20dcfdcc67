"""
Post and engagement schemas.
"""

import uuid
from datetime import datetime
from typing import List

from pydantic import ConfigDict, Field

from .common import CamelModel
from .users import UserSummary


class PostCreate(CamelModel):
    """Post creation request.

    Content is trimmed and length-checked against ``post_max_length`` by the
    service, so surrounding whitespace never counts towards the limit.
    """

    content: str = Field(description="Post text")
    is_public: bool = Field(default=True)

    model_config = ConfigDict(
        json_schema_extra={"example": {"content": "Excited to start my new role!"}}
    )


class CommentCreate(CamelModel):
    text: str


class CommentResponse(CamelModel):
    id: uuid.UUID
    author: UserSummary
    text: str
    created_at: datetime


class PostResponse(CamelModel):
    """A post with its author's public identity and engagement."""

    id: int
    content: str
    is_public: bool
    author: UserSummary
    likes: List[uuid.UUID] = Field(default_factory=list)
    comments: List[CommentResponse] = Field(default_factory=list)
    shares: List[uuid.UUID] = Field(default_factory=list)
    like_count: int = 0
    comment_count: int = 0
    share_count: int = 0
    created_at: datetime


class LikeResponse(CamelModel):
    liked: bool
    like_count: int


class ShareResponse(CamelModel):
    shared: bool
    share_count: int
