"""Notification API endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from ..config import get_settings
from ..core.schemas.common import MessageResponse
from ..core.schemas.notifications import MarkAllReadResponse, NotificationListResponse
from ..core.services import NotificationService
from ..database import get_db_session
from ..middleware.auth import get_current_user_id

router = APIRouter(prefix="/notifications", tags=["notifications"])

settings = get_settings()


@router.get("", response_model=NotificationListResponse)
async def list_notifications(
    page: int = Query(1, ge=1),
    limit: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """The caller's notifications, newest first, with the total unread count."""
    notification_service = NotificationService(session)
    return await notification_service.list_notifications(current_user_id, page, limit)


# Must come before /{notification_id}/read
@router.put("/mark-all-read", response_model=MarkAllReadResponse)
async def mark_all_read(
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    notification_service = NotificationService(session)
    updated = await notification_service.mark_all_read(current_user_id)
    return MarkAllReadResponse(message="All notifications marked as read", updated_count=updated)


@router.put("/{notification_id}/read", response_model=MessageResponse)
async def mark_read(
    notification_id: UUID,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    notification_service = NotificationService(session)
    await notification_service.mark_read(current_user_id, notification_id)
    return MessageResponse(message="Notification marked as read")


@router.delete("/{notification_id}", response_model=MessageResponse)
async def delete_notification(
    notification_id: UUID,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    notification_service = NotificationService(session)
    await notification_service.delete_notification(current_user_id, notification_id)
    return MessageResponse(message="Notification deleted")
