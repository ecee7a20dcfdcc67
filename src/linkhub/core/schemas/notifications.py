"""
Notification schemas.
"""

import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import Field

from .common import CamelModel, PaginationInfo
from .users import UserSummary


class RelatedPost(CamelModel):
    id: int
    content: str


class NotificationResponse(CamelModel):
    """A notification with its sender and related post embedded."""

    id: uuid.UUID
    type: str
    message: str
    sender: UserSummary
    related_post: Optional[RelatedPost] = None
    is_read: bool
    created_at: datetime


class NotificationListResponse(CamelModel):
    """One page of notifications.

    ``unread_count`` covers all of the recipient's notifications, not just
    this page.
    """

    items: List[NotificationResponse] = Field(default_factory=list)
    unread_count: int
    pagination: PaginationInfo


class MarkAllReadResponse(CamelModel):
    message: str
    updated_count: int
