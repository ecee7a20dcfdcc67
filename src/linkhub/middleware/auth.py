"""Authentication dependencies."""

from typing import Optional
from uuid import UUID

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.exceptions import AuthError
from ..core.logging import get_logger
from ..core.repositories.user_repository import UserRepository
from ..database import get_db_session
from ..security import get_user_id_from_token

logger = get_logger("middleware.auth")


class JWTBearer(HTTPBearer):
    """JWT Bearer token authentication.

    Resolves the request's principal. With ``required=False`` the route is
    public: a missing header, another scheme or a token that does not
    validate all yield None.
    """

    def __init__(self, required: bool = True):
        # errors are raised here, as AuthError, so they render as 401
        super().__init__(auto_error=False)
        self.required = required

    async def __call__(self, request: Request) -> Optional[UUID]:
        credentials: Optional[HTTPAuthorizationCredentials] = await super().__call__(request)
        if not credentials:
            if not self.required:
                return None
            if request.headers.get("Authorization"):
                raise AuthError("Invalid authentication scheme")
            raise AuthError("No token, authorization denied")

        user_id = await get_user_id_from_token(credentials.credentials)
        if not user_id:
            if not self.required:
                logger.debug("Ignoring invalid token on public route %s", request.url.path)
                return None
            raise AuthError("Token is not valid")

        request.state.token = credentials.credentials
        return user_id


# Dependency for getting current user ID from JWT
async def get_current_user_id(
    user_id: UUID = Depends(JWTBearer()),
    session: AsyncSession = Depends(get_db_session),
) -> UUID:
    """Get current authenticated user ID. Deactivated accounts are refused."""
    if await UserRepository(session).get_active_by_id(user_id) is None:
        logger.info("Rejected token of missing or inactive user", extra={"user_id": str(user_id)})
        raise AuthError("Token is not valid")
    return user_id


async def get_optional_user_id(
    user_id: Optional[UUID] = Depends(JWTBearer(required=False)),
) -> Optional[UUID]:
    """Current user ID when a valid token was sent, else None."""
    return user_id


def get_current_token(request: Request, _: UUID = Depends(get_current_user_id)) -> str:
    """The raw bearer token of an authenticated request."""
    return request.state.token
