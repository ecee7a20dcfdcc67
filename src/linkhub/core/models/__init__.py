"""
Database models for the LinkHub application.

SQLAlchemy ORM models, designed for async sessions:
    - User: account, profile fields and role
    - Connection: one side of a connection between two users
    - ProfileView: a recorded visit to a public profile
    - Post, PostLike, PostComment, PostShare: posts and their engagement
    - Notification: per-recipient notifications
"""

from .base import BaseModel, UUIDModel
from .connection import Connection, ConnectionStatus, ProfileView
from .notification import Notification, NotificationType
from .post import Post, PostComment, PostLike, PostShare
from .user import Capability, User, UserRole

__all__ = [
    "BaseModel",
    "UUIDModel",
    "User",
    "UserRole",
    "Capability",
    "Connection",
    "ConnectionStatus",
    "ProfileView",
    "Post",
    "PostLike",
    "PostComment",
    "PostShare",
    "Notification",
    "NotificationType",
]
