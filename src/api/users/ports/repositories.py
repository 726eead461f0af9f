"""Repository protocols (ports) for the users context."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from users.domain.aggregates import User
from users.domain.value_objects import UserRole


@runtime_checkable
class IUserRepository(Protocol):
    """Repository for User aggregate persistence.

    Email lookups use the normalized (lowercase) address.
    """

    async def save(self, user: User) -> None:
        """Insert a new user or update an existing one.

        A new user gets its ``id`` assigned on save.

        Raises:
            DuplicateUserEmailError: If another user already has the email
        """
        ...

    async def get_by_id(self, user_id: int) -> User | None:
        """Retrieve a user by id, or None if not found."""
        ...

    async def get_by_email(self, email: str) -> User | None:
        """Retrieve a user by email, or None if not found."""
        ...

    async def list_all(self) -> list[User]:
        """Return every user, most recently logged in first."""
        ...

    async def count_by_role(self, role: UserRole) -> int:
        """Return how many users hold ``role``."""
        ...

    async def delete(self, user: User) -> bool:
        """Delete a user.

        Returns:
            True if deleted, False if not found
        """
        ...
