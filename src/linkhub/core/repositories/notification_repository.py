"""Notification repository for database operations."""

from typing import List
from uuid import UUID

from sqlalchemy import and_, delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.notification import Notification


class NotificationRepository:
    """Repository for notification database operations.

    Every read and write is scoped by recipient, so one user can never see or
    touch another user's notifications even with a guessed id.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, notification_data: dict) -> Notification:
        """Create new notification."""
        notification = Notification(**notification_data)
        self.session.add(notification)
        await self.session.commit()
        await self.session.refresh(notification)
        return notification

    async def list_for_recipient(
        self, recipient_id: UUID, page: int = 1, per_page: int = 20
    ) -> List[Notification]:
        """One page of a user's notifications, newest first."""
        stmt = (
            select(Notification)
            .where(Notification.recipient_id == recipient_id)
            .order_by(Notification.created_at.desc(), Notification.id)
            .offset((page - 1) * per_page)
            .limit(per_page)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars())

    async def count_total(self, recipient_id: UUID) -> int:
        stmt = select(func.count(Notification.id)).where(
            Notification.recipient_id == recipient_id
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def count_unread(self, recipient_id: UUID) -> int:
        """Count all unread notifications, independent of any page."""
        stmt = select(func.count(Notification.id)).where(
            and_(
                Notification.recipient_id == recipient_id,
                Notification.is_read.is_(False),
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def mark_read(self, notification_id: UUID, recipient_id: UUID) -> int:
        """Mark one notification read. Returns the number of rows matched."""
        stmt = (
            update(Notification)
            .where(
                Notification.id == notification_id,
                Notification.recipient_id == recipient_id,
            )
            .values(is_read=True)
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount

    async def mark_all_read(self, recipient_id: UUID) -> int:
        """Mark every unread notification read. Returns rows changed."""
        stmt = (
            update(Notification)
            .where(
                Notification.recipient_id == recipient_id,
                Notification.is_read.is_(False),
            )
            .values(is_read=True)
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount

    async def delete(self, notification_id: UUID, recipient_id: UUID) -> int:
        """Delete one notification. Returns rows deleted."""
        stmt = delete(Notification).where(
            Notification.id == notification_id,
            Notification.recipient_id == recipient_id,
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount
