"""Posts API endpoints."""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.schemas.posts import (
    CommentCreate,
    CommentResponse,
    LikeResponse,
    PostCreate,
    PostResponse,
    ShareResponse,
)
from ..core.services import PostService
from ..database import get_db_session
from ..middleware.auth import get_current_user_id

router = APIRouter(prefix="/posts", tags=["posts"])


@router.get("", response_model=List[PostResponse])
async def list_posts(session: AsyncSession = Depends(get_db_session)):
    """Global feed, newest first."""
    post_service = PostService(session)
    return await post_service.list_posts()


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: PostCreate,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    post_service = PostService(session)
    return await post_service.create_post(current_user_id, request.content, request.is_public)


@router.get("/user/{user_id}", response_model=List[PostResponse])
async def list_user_posts(user_id: UUID, session: AsyncSession = Depends(get_db_session)):
    """One user's posts, newest first."""
    post_service = PostService(session)
    return await post_service.list_user_posts(user_id)


@router.post("/{post_id}/like", response_model=LikeResponse)
async def toggle_like(
    post_id: int,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Like a post, or undo an existing like."""
    post_service = PostService(session)
    return await post_service.toggle_like(current_user_id, post_id)


@router.post(
    "/{post_id}/comments", response_model=CommentResponse, status_code=status.HTTP_201_CREATED
)
async def add_comment(
    post_id: int,
    request: CommentCreate,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    post_service = PostService(session)
    return await post_service.add_comment(current_user_id, post_id, request.text)


@router.post("/{post_id}/share", response_model=ShareResponse)
async def share_post(
    post_id: int,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    post_service = PostService(session)
    return await post_service.share_post(current_user_id, post_id)
