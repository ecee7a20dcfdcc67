"""
Profile and connection schemas.
"""

import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator

from .common import CamelModel


class UserSummary(CamelModel):
    """Public identity embedded in posts, comments and notifications."""

    id: uuid.UUID
    name: str
    job_title: Optional[str] = None


class ProfileResponse(CamelModel):
    """Public profile. Never carries email or credentials."""

    id: uuid.UUID
    name: str
    bio: Optional[str] = None
    job_title: Optional[str] = None
    company: Optional[str] = None
    location: Optional[str] = None
    skills: List[str] = Field(default_factory=list)
    profile_views: int = 0
    connection_count: int = 0
    created_at: datetime


class ProfileUpdateRequest(CamelModel):
    """Fields a user may change on their own profile. Omitted fields are kept."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    bio: Optional[str] = Field(default=None, max_length=2000)
    job_title: Optional[str] = Field(default=None, max_length=100)
    company: Optional[str] = Field(default=None, max_length=100)
    location: Optional[str] = Field(default=None, max_length=100)
    skills: Optional[List[str]] = Field(default=None, max_length=50)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        if v is not None:
            v = v.strip()
            if not v:
                raise ValueError("Name cannot be empty")
        return v

    @field_validator("skills")
    @classmethod
    def validate_skills(cls, v):
        """Trim, drop blanks and duplicates, keep order."""
        if v is None:
            return v
        seen = []
        for skill in v:
            skill = skill.strip()
            if not skill:
                continue
            if len(skill) > 100:
                raise ValueError("Skills must be at most 100 characters")
            if skill not in seen:
                seen.append(skill)
        return seen


class ConnectionResponse(CamelModel):
    """One entry of the caller's connection list."""

    user: UserSummary = Field(validation_alias="peer")
    status: str
    is_requester: bool
    created_at: datetime


class UserSearchResult(CamelModel):
    """Public fields shown for a user in search results."""

    id: uuid.UUID
    name: str
    bio: Optional[str] = None
    job_title: Optional[str] = None
    company: Optional[str] = None
    location: Optional[str] = None
    skills: List[str] = Field(default_factory=list)
