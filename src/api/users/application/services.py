"""User application service for the users bounded context.

Manages user accounts. Signing in and token issuance live outside this
service; it only ever stores password hashes.
"""

from __future__ import annotations

import asyncio

from sqlalchemy.ext.asyncio import AsyncSession

from users.application.observability import DefaultUserServiceProbe, UserServiceProbe
from users.application.security import hash_password
from users.domain.aggregates import User
from users.domain.value_objects import UserRole
from users.ports.exceptions import DuplicateUserEmailError, LastSuperAdminError
from users.ports.repositories import IUserRepository


class UserService:
    """Application service for user account management.

    Writes run in a transaction on the injected session. Password hashing
    is CPU bound and runs in a worker thread.
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        session: AsyncSession,
        probe: UserServiceProbe | None = None,
    ):
        """Initialize UserService with dependencies.

        Args:
            user_repository: Repository for user persistence
            session: Database session for transaction management
            probe: Optional domain probe for observability
        """
        self._user_repository = user_repository
        self._session = session
        self._probe = probe or DefaultUserServiceProbe()

    async def create_user(
        self, email: str, name: str, role: UserRole | str, password: str
    ) -> User:
        """Create a new, active user account.

        Raises:
            InvalidEmailError: If the email is malformed
            DuplicateUserEmailError: If the email is already taken
        """
        password_hash = await asyncio.to_thread(hash_password, password)
        user = User.register(email, name, role, password_hash)

        async with self._session.begin():
            try:
                if await self._user_repository.get_by_email(user.email):
                    raise DuplicateUserEmailError(user.email)
                await self._user_repository.save(user)
            except DuplicateUserEmailError:
                self._probe.duplicate_user_email(email=user.email)
                raise

        self._probe.user_created(
            user_id=user.id, email=user.email, role=user.role.value
        )
        return user

    async def list_users(self) -> list[User]:
        """List all users, most recently logged in first."""
        return await self._user_repository.list_all()

    async def get_user(self, email: str) -> User | None:
        """Retrieve a user by email."""
        user = await self._user_repository.get_by_email(email)
        if user is None:
            self._probe.user_not_found(lookup=email)
        return user

    async def set_user_status(self, user_id: int, is_active: bool) -> User | None:
        """Activate or deactivate a user.

        Returns:
            The updated User, or None if not found
        """
        async with self._session.begin():
            user = await self._user_repository.get_by_id(user_id)
            if user is None:
                self._probe.user_not_found(lookup=user_id)
                return None

            user.set_active(is_active)
            await self._user_repository.save(user)

        self._probe.user_status_changed(user_id=user_id, is_active=user.is_active)
        return user

    async def update_user(
        self,
        email: str,
        name: str | None = None,
        role: UserRole | str | None = None,
        password: str | None = None,
    ) -> User | None:
        """Apply a partial update to a user.

        A new password is hashed before it is stored.

        Returns:
            The updated User, or None if not found
        """
        password_hash = None
        if password:
            password_hash = await asyncio.to_thread(hash_password, password)

        async with self._session.begin():
            user = await self._user_repository.get_by_email(email)
            if user is None:
                self._probe.user_not_found(lookup=email)
                return None

            changed = user.update(name=name, role=role, password_hash=password_hash)
            if changed:
                await self._user_repository.save(user)

        if changed:
            self._probe.user_updated(email=user.email, fields=changed)
        return user

    async def delete_user(self, email: str) -> bool:
        """Delete a user account.

        Returns:
            True if deleted, False if not found

        Raises:
            LastSuperAdminError: If the user is the only super admin left
        """
        async with self._session.begin():
            user = await self._user_repository.get_by_email(email)
            if user is None:
                self._probe.user_not_found(lookup=email)
                return False

            if user.is_super_admin:
                remaining = await self._user_repository.count_by_role(
                    UserRole.SUPER_ADMIN
                )
                if remaining <= 1:
                    self._probe.last_super_admin_protected(email=user.email)
                    raise LastSuperAdminError(user.email)

            deleted = await self._user_repository.delete(user)

        if deleted:
            self._probe.user_deleted(email=user.email)
        return deleted
