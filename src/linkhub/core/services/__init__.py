"""
Service layer interfaces and implementations.

Interfaces live in ``interfaces``; each concrete service takes an
``AsyncSession`` and builds the repositories it needs.
"""

from .interfaces import (
    IAnalyticsService,
    IAuthService,
    IHealthService,
    INotificationService,
    IPostService,
    ISearchService,
    IUserService,
)

from .analytics_service import AnalyticsService
from .auth_service import AuthService
from .health_service import HealthService
from .notification_service import NotificationService
from .post_service import PostService
from .search_service import SearchService
from .user_service import UserService

__all__ = [
    # Interfaces
    "IAuthService",
    "IUserService",
    "IPostService",
    "INotificationService",
    "ISearchService",
    "IAnalyticsService",
    "IHealthService",

    # Implementations
    "AuthService",
    "UserService",
    "PostService",
    "NotificationService",
    "SearchService",
    "AnalyticsService",
    "HealthService",
]
