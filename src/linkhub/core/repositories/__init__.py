"""Repository layer for data access."""

from .analytics_repository import AnalyticsRepository
from .connection_repository import ConnectionRepository
from .notification_repository import NotificationRepository
from .post_repository import PostRepository
from .user_repository import UserRepository

__all__ = [
    "UserRepository",
    "ConnectionRepository",
    "PostRepository",
    "NotificationRepository",
    "AnalyticsRepository",
]
