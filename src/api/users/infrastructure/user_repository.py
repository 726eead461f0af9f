"""PostgreSQL implementation of IUserRepository."""

from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from users.domain.aggregates import User
from users.domain.value_objects import UserRole
from users.infrastructure.models import UserModel
from users.infrastructure.observability import (
    DefaultUserRepositoryProbe,
    UserRepositoryProbe,
)
from users.ports.exceptions import DuplicateUserEmailError
from users.ports.repositories import IUserRepository


class UserRepository(IUserRepository):
    """Repository managing PostgreSQL storage for User aggregates.

    Transactions are owned by the caller; this repository only flushes.
    """

    def __init__(
        self,
        session: AsyncSession,
        probe: UserRepositoryProbe | None = None,
    ) -> None:
        """Initialize repository with database session.

        Args:
            session: AsyncSession from FastAPI dependency injection
            probe: Optional domain probe for observability
        """
        self._session = session
        self._probe = probe or DefaultUserRepositoryProbe()

    async def save(self, user: User) -> None:
        """Persist a user, inserting it or updating the row with its id.

        Raises:
            DuplicateUserEmailError: If another user has the email
        """
        try:
            if user.id is None:
                model = UserModel()
                self._apply(model, user)
                self._session.add(model)
            else:
                model = await self._session.get(UserModel, user.id)
                if model is None:
                    model = UserModel(id=user.id)
                    self._session.add(model)
                self._apply(model, user)

            # Flush to assign the id and surface unique violations here
            await self._session.flush()

        except IntegrityError as e:
            if "uq_users_email" in str(e):
                self._probe.duplicate_user_email(user.email)
                raise DuplicateUserEmailError(user.email) from e
            raise

        user.id = model.id
        self._probe.user_saved(model.id, user.email)

    async def get_by_id(self, user_id: int) -> User | None:
        """Fetch a user by id.

        Returns:
            The User aggregate, or None if not found
        """
        model = await self._session.get(UserModel, user_id)
        if model is None:
            self._probe.user_not_found(user_id)
            return None

        self._probe.user_retrieved(model.id)
        return self._to_domain(model)

    async def get_by_email(self, email: str) -> User | None:
        """Fetch a user by email, ignoring case and surrounding whitespace.

        Returns:
            The User aggregate, or None if not found
        """
        stmt = select(UserModel).where(UserModel.email == _lookup_key(email))
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            self._probe.user_not_found(email)
            return None

        self._probe.user_retrieved(model.id)
        return self._to_domain(model)

    async def list_all(self) -> list[User]:
        """Fetch all users, most recently logged in first.

        Users that never logged in come last.
        """
        stmt = select(UserModel).order_by(
            UserModel.last_login.desc().nulls_last(), UserModel.id
        )
        result = await self._session.execute(stmt)
        users = [self._to_domain(model) for model in result.scalars().all()]

        self._probe.users_listed(len(users))
        return users

    async def count_by_role(self, role: UserRole) -> int:
        stmt = (
            select(func.count())
            .select_from(UserModel)
            .where(UserModel.role == UserRole(role).value)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one() or 0

    async def delete(self, user: User) -> bool:
        """Delete a user row.

        Returns:
            True if deleted, False if not found
        """
        if user.id is None:
            return False

        model = await self._session.get(UserModel, user.id)
        if model is None:
            return False

        await self._session.delete(model)
        await self._session.flush()

        self._probe.user_deleted(user.id)
        return True

    @staticmethod
    def _apply(model: UserModel, user: User) -> None:
        model.email = user.email
        model.username = user.username
        model.name = user.name
        model.role = UserRole(user.role).value
        model.password_hash = user.password_hash
        model.is_active = user.is_active
        model.last_login = user.last_login
        model.date_joined = user.date_joined

    @staticmethod
    def _to_domain(model: UserModel) -> User:
        return User(
            id=model.id,
            email=model.email,
            name=model.name,
            role=UserRole(model.role),
            password_hash=model.password_hash,
            is_active=model.is_active,
            last_login=model.last_login,
            date_joined=model.date_joined,
        )


def _lookup_key(email: str) -> str:
    return (email or "").strip().lower()
