"""
Authentication schemas.

These schemas define the API contracts for registration, login and the
current-user payload.
"""

import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .common import CamelModel


class RegisterRequest(BaseModel):
    """User registration request schema."""

    name: str = Field(min_length=1, max_length=100, description="Display name")
    email: str = Field(min_length=3, max_length=255, description="Login email")
    password: str = Field(min_length=6, max_length=128, description="User password")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("Name cannot be empty")
        return v

    @field_validator("email")
    @classmethod
    def validate_email(cls, v):
        """Light format check; addresses are stored lowercase."""
        v = v.strip().lower()
        local, _, domain = v.partition("@")
        if not local or "." not in domain or " " in v:
            raise ValueError("Invalid email address")
        return v

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Ada Lovelace",
                "email": "ada@example.com",
                "password": "analytical-engine",
            }
        }
    )


class LoginRequest(BaseModel):
    """User login request schema."""

    email: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=1, max_length=128)

    model_config = ConfigDict(
        json_schema_extra={"example": {"email": "ada@example.com", "password": "analytical-engine"}}
    )


class UserResponse(CamelModel):
    """The authenticated user's own account."""

    id: uuid.UUID
    name: str
    email: str
    bio: Optional[str] = None
    job_title: Optional[str] = None
    company: Optional[str] = None
    location: Optional[str] = None
    skills: List[str] = Field(default_factory=list)
    role: str
    profile_views: int = 0
    created_at: datetime


class AuthResponse(CamelModel):
    """Token plus the user it was issued for."""

    token: str = Field(description="JWT access token")
    token_type: str = Field(default="bearer")
    expires_in: int = Field(description="Token lifetime in seconds")
    user: UserResponse
