"""
Service interfaces for the LinkHub application.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from ..models.connection import ConnectionStatus
from ..models.notification import NotificationType
from ..schemas.analytics import DashboardResponse, PersonalAnalyticsResponse
from ..schemas.auth import AuthResponse, LoginRequest, RegisterRequest, UserResponse
from ..schemas.common import HealthCheckResponse
from ..schemas.notifications import NotificationListResponse
from ..schemas.posts import LikeResponse, PostResponse, ShareResponse, CommentResponse
from ..schemas.search import SearchResponse, SearchType, TrendingItem
from ..schemas.users import ConnectionResponse, ProfileResponse, ProfileUpdateRequest


class IAuthService(ABC):
    """Auth service for accounts and tokens."""

    @abstractmethod
    async def register_user(self, request: RegisterRequest) -> AuthResponse:
        """Register new user and issue a token."""
        pass

    @abstractmethod
    async def authenticate_user(self, request: LoginRequest) -> AuthResponse:
        """Login user and return a JWT."""
        pass

    @abstractmethod
    async def get_current_user(self, user_id: UUID) -> UserResponse:
        """Get the principal's account."""
        pass

    @abstractmethod
    async def logout_user(self, user_id: UUID, access_token: str) -> bool:
        """Revoke the given token."""
        pass


class IUserService(ABC):
    """Profiles and connections."""

    @abstractmethod
    async def get_profile(self, user_id: UUID, viewer_id: Optional[UUID] = None) -> ProfileResponse:
        pass

    @abstractmethod
    async def update_profile(self, user_id: UUID, request: ProfileUpdateRequest) -> ProfileResponse:
        pass

    @abstractmethod
    async def request_connection(self, user_id: UUID, peer_id: UUID) -> ConnectionResponse:
        pass

    @abstractmethod
    async def accept_connection(self, user_id: UUID, requester_id: UUID) -> ConnectionResponse:
        pass

    @abstractmethod
    async def list_connections(
        self, user_id: UUID, status: Optional[ConnectionStatus] = None
    ) -> List[ConnectionResponse]:
        pass


class IPostService(ABC):
    """Feed reads, post creation and engagement."""

    @abstractmethod
    async def list_posts(self) -> List[PostResponse]:
        """All posts, newest first."""
        pass

    @abstractmethod
    async def list_user_posts(self, author_id: UUID) -> List[PostResponse]:
        """One author's posts, newest first."""
        pass

    @abstractmethod
    async def create_post(self, user_id: UUID, content: str, is_public: bool = True) -> PostResponse:
        pass

    @abstractmethod
    async def toggle_like(self, user_id: UUID, post_id: int) -> LikeResponse:
        pass

    @abstractmethod
    async def add_comment(self, user_id: UUID, post_id: int, text: str) -> CommentResponse:
        pass

    @abstractmethod
    async def share_post(self, user_id: UUID, post_id: int) -> ShareResponse:
        pass


class INotificationService(ABC):
    """A user's notification inbox."""

    @abstractmethod
    async def list_notifications(
        self, user_id: UUID, page: int = 1, limit: int = 20
    ) -> NotificationListResponse:
        pass

    @abstractmethod
    async def mark_read(self, user_id: UUID, notification_id: UUID) -> None:
        pass

    @abstractmethod
    async def mark_all_read(self, user_id: UUID) -> int:
        pass

    @abstractmethod
    async def delete_notification(self, user_id: UUID, notification_id: UUID) -> None:
        pass

    @abstractmethod
    async def notify(
        self,
        recipient_id: UUID,
        sender_id: UUID,
        type: NotificationType,
        message: str,
        related_post_id: Optional[int] = None,
    ) -> None:
        """Create a notification unless sender and recipient are the same user."""
        pass


class ISearchService(ABC):
    """Search service for users and posts."""

    @abstractmethod
    async def search(
        self, query: str, search_type: SearchType = SearchType.ALL, page: int = 1, limit: int = 10
    ) -> SearchResponse:
        pass

    @abstractmethod
    async def get_trending(self, limit: Optional[int] = None) -> List[TrendingItem]:
        pass


class IAnalyticsService(ABC):
    """Aggregated statistics."""

    @abstractmethod
    async def get_dashboard(self, user_id: UUID) -> DashboardResponse:
        """Site-wide stats. Needs the global analytics capability."""
        pass

    @abstractmethod
    async def get_personal(self, user_id: UUID) -> PersonalAnalyticsResponse:
        pass


class IHealthService(ABC):
    """Health checks."""

    @abstractmethod
    async def get_health_status(self) -> HealthCheckResponse:
        pass
