"""Profile and connection service implementation."""

from typing import List, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import NotFoundError, ValidationError
from ..logging import get_logger
from ..models.connection import ConnectionStatus
from ..models.notification import NotificationType
from ..models.user import User
from ..repositories.connection_repository import ConnectionRepository
from ..repositories.user_repository import UserRepository
from ..schemas.users import ConnectionResponse, ProfileResponse, ProfileUpdateRequest
from .interfaces import IUserService
from .notification_service import NotificationService

logger = get_logger("services.users")


class UserService(IUserService):
    """Public profiles, profile edits and the connection workflow."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.user_repo = UserRepository(session)
        self.connection_repo = ConnectionRepository(session)
        self.notifications = NotificationService(session)

    async def _get_active_user(self, user_id: UUID) -> User:
        user = await self.user_repo.get_active_by_id(user_id)
        if not user:
            raise NotFoundError("User not found")
        return user

    async def _to_profile(self, user: User) -> ProfileResponse:
        profile = ProfileResponse.model_validate(user)
        profile.connection_count = await self.connection_repo.count_accepted(user.id)
        return profile

    async def get_profile(self, user_id: UUID, viewer_id: Optional[UUID] = None) -> ProfileResponse:
        """Public profile. Visits by anyone but the owner are recorded."""
        user = await self._get_active_user(user_id)

        if viewer_id != user.id:
            await self.user_repo.record_profile_view(user.id, viewer_id)
            await self.session.refresh(user, attribute_names=["profile_views"])

        return await self._to_profile(user)

    async def update_profile(self, user_id: UUID, request: ProfileUpdateRequest) -> ProfileResponse:
        user = await self._get_active_user(user_id)

        update_data = request.model_dump(exclude_unset=True, exclude_none=True)
        if update_data:
            user = await self.user_repo.update_user(user_id, update_data)
            logger.info(
                "Profile updated", extra={"user_id": str(user_id), "fields": sorted(update_data)}
            )

        return await self._to_profile(user)

    async def request_connection(self, user_id: UUID, peer_id: UUID) -> ConnectionResponse:
        """Send a connection request to ``peer_id``."""
        if user_id == peer_id:
            raise ValidationError("Cannot connect with yourself")

        requester = await self._get_active_user(user_id)
        await self._get_active_user(peer_id)

        if await self.connection_repo.get_entry(user_id, peer_id):
            raise ValidationError("Connection already exists")

        entry = await self.connection_repo.create_request(user_id, peer_id)
        await self.notifications.notify(
            recipient_id=peer_id,
            sender_id=user_id,
            type=NotificationType.CONNECTION_REQUEST,
            message=f"{requester.name} wants to connect with you",
        )
        return ConnectionResponse.model_validate(entry)

    async def accept_connection(self, user_id: UUID, requester_id: UUID) -> ConnectionResponse:
        """Accept a pending request that ``requester_id`` sent to ``user_id``."""
        accepted = await self.connection_repo.accept_request(user_id, requester_id)
        if not accepted:
            raise NotFoundError("Connection request not found")

        user = await self._get_active_user(user_id)
        await self.notifications.notify(
            recipient_id=requester_id,
            sender_id=user_id,
            type=NotificationType.CONNECTION_ACCEPTED,
            message=f"{user.name} accepted your connection request",
        )

        entry = await self.connection_repo.get_entry(user_id, requester_id)
        return ConnectionResponse.model_validate(entry)

    async def list_connections(
        self, user_id: UUID, status: Optional[ConnectionStatus] = None
    ) -> List[ConnectionResponse]:
        entries = await self.connection_repo.list_for_user(user_id, status)
        return [ConnectionResponse.model_validate(e) for e in entries]
