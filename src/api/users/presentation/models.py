"""Pydantic models for user API requests and responses."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel, Field

from users.domain.aggregates import User
from users.domain.value_objects import MAX_EMAIL_LENGTH, UserRole

# bcrypt only hashes the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


def _check_password_bytes(value: str) -> str:
    if len(value.encode()) > MAX_PASSWORD_BYTES:
        raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
    return value


Password = Annotated[str, AfterValidator(_check_password_bytes)]


class CreateUserRequest(BaseModel):
    """Request model for creating a user account."""

    email: str = Field(..., min_length=3, max_length=MAX_EMAIL_LENGTH)
    name: str = Field(..., min_length=1, max_length=255)
    role: UserRole = Field(..., description="Account role")
    password: Password = Field(..., min_length=8)


class UpdateUserRequest(BaseModel):
    """Request model for a partial user update.

    Omitted or null fields are left unchanged.
    """

    name: str | None = Field(None, min_length=1, max_length=255)
    role: UserRole | None = None
    password: Password | None = Field(None, min_length=8, description="New password")


class UpdateUserStatusRequest(BaseModel):
    """Request model for activating or deactivating a user."""

    is_active: bool


class UserResponse(BaseModel):
    """Response model for a user. Never includes the password hash."""

    id: int
    email: str
    username: str
    name: str
    role: UserRole
    is_active: bool
    last_login: datetime | None = None
    date_joined: datetime | None = None

    @classmethod
    def from_domain(cls, user: User) -> UserResponse:
        """Convert domain User aggregate to API response.

        Args:
            user: User domain aggregate

        Returns:
            UserResponse
        """
        return cls(
            id=user.id,
            email=user.email,
            username=user.username,
            name=user.name,
            role=user.role,
            is_active=user.is_active,
            last_login=user.last_login,
            date_joined=user.date_joined,
        )
