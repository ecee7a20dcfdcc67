"""Authentication service implementation."""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from ...config import get_settings
from ...security import (
    blacklist_token,
    create_access_token,
    hash_password,
    needs_update,
    verify_password,
)
from ..exceptions import AuthError, NotFoundError, ValidationError
from ..logging import get_logger
from ..models.user import User, UserRole
from ..repositories.user_repository import UserRepository
from ..schemas.auth import AuthResponse, LoginRequest, RegisterRequest, UserResponse
from .interfaces import IAuthService

logger = get_logger("services.auth")

INVALID_CREDENTIALS = "Invalid credentials"


class AuthService(IAuthService):
    """Authentication service implementation."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.user_repo = UserRepository(session)
        self.settings = get_settings()

    def _issue_token(self, user: User) -> AuthResponse:
        access_token = create_access_token(data={"sub": str(user.id)})
        return AuthResponse(
            token=access_token,
            token_type="bearer",
            expires_in=self.settings.access_token_expire_minutes * 60,
            user=UserResponse.model_validate(user),
        )

    def _role_for(self, email: str) -> UserRole:
        # bootstrap only; authorization checks the stored role
        admin_emails = {e.strip().lower() for e in self.settings.admin_emails}
        return UserRole.ADMIN if email in admin_emails else UserRole.MEMBER

    async def register_user(self, request: RegisterRequest) -> AuthResponse:
        """Register new user."""
        email = request.email.strip().lower()
        if await self.user_repo.is_email_taken(email):
            raise ValidationError("User already exists")

        user = await self.user_repo.create_user(
            {
                "name": request.name,
                "email": email,
                "password_hash": hash_password(request.password),
                "role": self._role_for(email).value,
                "skills": [],
                "is_active": True,
            }
        )
        logger.info("User registered", extra={"user_id": str(user.id), "role": user.role})
        return self._issue_token(user)

    async def authenticate_user(self, request: LoginRequest) -> AuthResponse:
        """Login user and return a JWT."""
        user = await self.user_repo.get_by_email(request.email)
        # same message for every failure so the response doesn't reveal which accounts exist
        if not user or not user.can_login():
            raise AuthError(INVALID_CREDENTIALS)
        if not verify_password(request.password, user.password_hash):
            raise AuthError(INVALID_CREDENTIALS)

        update_data = {}
        if needs_update(user.password_hash):
            update_data["password_hash"] = hash_password(request.password)
        if update_data:
            user = await self.user_repo.update_user(user.id, update_data)

        await self.user_repo.touch(user.id)
        logger.info("User logged in", extra={"user_id": str(user.id)})
        return self._issue_token(user)

    async def get_current_user(self, user_id: UUID) -> UserResponse:
        """Get user by ID."""
        user = await self.user_repo.get_active_by_id(user_id)
        if not user:
            raise NotFoundError("User not found")
        return UserResponse.model_validate(user)

    async def logout_user(self, user_id: UUID, access_token: str) -> bool:
        """Logout user with Redis token blacklisting."""
        revoked = await blacklist_token(access_token)
        logger.info("User logged out", extra={"user_id": str(user_id), "revoked": revoked})
        return revoked
