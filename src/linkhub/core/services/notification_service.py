"""Notification service implementation."""

from typing import Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from ...config import get_settings
from ..exceptions import NotFoundError
from ..logging import get_logger
from ..models.notification import Notification, NotificationType
from ..repositories.notification_repository import NotificationRepository
from ..schemas.common import PaginationInfo
from ..schemas.notifications import (
    NotificationListResponse,
    NotificationResponse,
    RelatedPost,
)
from ..schemas.users import UserSummary
from .interfaces import INotificationService

logger = get_logger("services.notifications")


class NotificationService(INotificationService):
    """Notification service implementation.

    Reads and writes go through recipient-scoped queries: a notification id
    that belongs to someone else behaves exactly like one that doesn't exist.
    """

    def __init__(self, session: AsyncSession):
        self.session = session
        self.notification_repo = NotificationRepository(session)
        self.settings = get_settings()

    def _to_response(self, notification: Notification) -> NotificationResponse:
        related = None
        if notification.related_post is not None:
            related = RelatedPost(
                id=notification.related_post.id, content=notification.related_post.content
            )
        return NotificationResponse(
            id=notification.id,
            type=notification.type,
            message=notification.message,
            sender=UserSummary.model_validate(notification.sender),
            related_post=related,
            is_read=notification.is_read,
            created_at=notification.created_at,
        )

    async def list_notifications(
        self, user_id: UUID, page: int = 1, limit: int = 20
    ) -> NotificationListResponse:
        """One page of notifications plus the recipient's total unread count."""
        limit = min(limit, self.settings.max_page_size)
        items = await self.notification_repo.list_for_recipient(user_id, page, limit)
        total = await self.notification_repo.count_total(user_id)
        unread = await self.notification_repo.count_unread(user_id)

        return NotificationListResponse(
            items=[self._to_response(n) for n in items],
            unread_count=unread,
            pagination=PaginationInfo.create(page=page, limit=limit, total=total),
        )

    async def mark_read(self, user_id: UUID, notification_id: UUID) -> None:
        updated = await self.notification_repo.mark_read(notification_id, user_id)
        if not updated:
            raise NotFoundError("Notification not found")

    async def mark_all_read(self, user_id: UUID) -> int:
        updated = await self.notification_repo.mark_all_read(user_id)
        logger.debug("Marked notifications read", extra={"user_id": str(user_id), "count": updated})
        return updated

    async def delete_notification(self, user_id: UUID, notification_id: UUID) -> None:
        deleted = await self.notification_repo.delete(notification_id, user_id)
        if not deleted:
            raise NotFoundError("Notification not found")

    async def notify(
        self,
        recipient_id: UUID,
        sender_id: UUID,
        type: NotificationType,
        message: str,
        related_post_id: Optional[int] = None,
    ) -> None:
        """Create a notification. Users are never notified about their own actions."""
        if recipient_id == sender_id:
            return

        await self.notification_repo.create(
            {
                "recipient_id": recipient_id,
                "sender_id": sender_id,
                "type": type.value,
                "message": message,
                "related_post_id": related_post_id,
            }
        )
        logger.info(
            "Notification created",
            extra={"recipient_id": str(recipient_id), "notification_type": type.value},
        )
