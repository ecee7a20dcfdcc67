"""
Pydantic schemas for validating and documenting API requests and responses.

This package exposes the Pydantic models used across the application to
define input/output contracts for authentication, profiles, posts,
notifications, search, analytics and common responses.
"""

from .analytics import DashboardResponse, PersonalAnalyticsResponse
from .auth import AuthResponse, LoginRequest, RegisterRequest, UserResponse
from .common import CamelModel, ErrorResponse, HealthCheckResponse, MessageResponse, PaginationInfo
from .notifications import MarkAllReadResponse, NotificationListResponse, NotificationResponse
from .posts import CommentCreate, CommentResponse, LikeResponse, PostCreate, PostResponse, ShareResponse
from .search import SearchResponse, SearchType, TrendingItem
from .users import (
    ConnectionResponse,
    ProfileResponse,
    ProfileUpdateRequest,
    UserSearchResult,
    UserSummary,
)

__all__ = [
    # Auth schemas
    "RegisterRequest",
    "LoginRequest",
    "AuthResponse",
    "UserResponse",
    # Profile schemas
    "UserSummary",
    "ProfileResponse",
    "ProfileUpdateRequest",
    "ConnectionResponse",
    "UserSearchResult",
    # Post schemas
    "PostCreate",
    "PostResponse",
    "CommentCreate",
    "CommentResponse",
    "LikeResponse",
    "ShareResponse",
    # Notification schemas
    "NotificationResponse",
    "NotificationListResponse",
    "MarkAllReadResponse",
    # Search schemas
    "SearchType",
    "SearchResponse",
    "TrendingItem",
    # Analytics schemas
    "DashboardResponse",
    "PersonalAnalyticsResponse",
    # Common schemas
    "CamelModel",
    "PaginationInfo",
    "ErrorResponse",
    "MessageResponse",
    "HealthCheckResponse",
]
