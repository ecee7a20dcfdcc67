"""User profile and connection API endpoints."""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.models.connection import ConnectionStatus
from ..core.schemas.users import ConnectionResponse, ProfileResponse, ProfileUpdateRequest
from ..core.services import UserService
from ..database import get_db_session
from ..middleware.auth import get_current_user_id, get_optional_user_id

router = APIRouter(prefix="/users", tags=["users"])


# Static paths are registered before /{user_id}


@router.put("/profile", response_model=ProfileResponse)
async def update_profile(
    request: ProfileUpdateRequest,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Update the caller's own profile."""
    user_service = UserService(session)
    return await user_service.update_profile(current_user_id, request)


@router.get("/connections", response_model=List[ConnectionResponse])
async def list_connections(
    status_filter: Optional[ConnectionStatus] = Query(None, alias="status"),
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    user_service = UserService(session)
    return await user_service.list_connections(current_user_id, status_filter)


@router.put("/connections/{user_id}/accept", response_model=ConnectionResponse)
async def accept_connection(
    user_id: UUID,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Accept the pending request sent by ``user_id``."""
    user_service = UserService(session)
    return await user_service.accept_connection(current_user_id, user_id)


@router.get("/{user_id}", response_model=ProfileResponse)
async def get_profile(
    user_id: UUID,
    viewer_id: Optional[UUID] = Depends(get_optional_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Public profile. No login needed."""
    user_service = UserService(session)
    return await user_service.get_profile(user_id, viewer_id)


@router.post(
    "/{user_id}/connect", response_model=ConnectionResponse, status_code=status.HTTP_201_CREATED
)
async def request_connection(
    user_id: UUID,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    user_service = UserService(session)
    return await user_service.request_connection(current_user_id, user_id)
