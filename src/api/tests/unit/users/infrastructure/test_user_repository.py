"""Unit tests for UserRepository.

Tests verify repository behavior with a mocked async session.
"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.dialects import postgresql
from sqlalchemy.exc import IntegrityError

from users.domain.aggregates import User
from users.domain.value_objects import UserRole
from users.infrastructure.models import UserModel
from users.infrastructure.user_repository import UserRepository
from users.ports.exceptions import DuplicateUserEmailError
from users.ports.repositories import IUserRepository

JOINED = datetime(2026, 1, 1, tzinfo=timezone.utc)


def _model(user_id=1, email="jane@example.com", role="admin", **overrides):
    values = {
        "id": user_id,
        "email": email,
        "username": email,
        "name": "Jane Doe",
        "role": role,
        "password_hash": "hash",
        "is_active": True,
        "last_login": None,
        "date_joined": JOINED,
        **overrides,
    }
    return UserModel(**values)


def _result(scalar=None, scalars=None, count=None):
    result = MagicMock()
    result.scalar_one_or_none.return_value = scalar
    result.scalar_one.return_value = count
    result.scalars.return_value.all.return_value = scalars or []
    return result


def _compiled(stmt) -> str:
    return str(
        stmt.compile(
            dialect=postgresql.dialect(), compile_kwargs={"literal_binds": True}
        )
    )


@pytest.fixture
def mock_session():
    """Create mock async session."""
    session = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def mock_probe():
    """Create mock repository probe."""
    return MagicMock()


@pytest.fixture
def repository(mock_session, mock_probe):
    """Create repository with mock dependencies."""
    return UserRepository(session=mock_session, probe=mock_probe)


class TestProtocolCompliance:
    """Tests for protocol compliance."""

    def test_implements_protocol(self, repository):
        """Repository should implement IUserRepository protocol."""
        assert isinstance(repository, IUserRepository)


class TestSave:
    """Tests for save method."""

    @pytest.mark.asyncio
    async def test_adds_new_user_and_assigns_id(
        self, repository, mock_session, mock_probe
    ):
        user = User.register("jane@example.com", "Jane Doe", "admin", "hash")

        async def assign_id():
            mock_session.add.call_args[0][0].id = 7

        mock_session.flush.side_effect = assign_id

        await repository.save(user)

        added = mock_session.add.call_args[0][0]
        assert isinstance(added, UserModel)
        assert added.email == "jane@example.com"
        assert added.username == "jane@example.com"
        assert added.role == "admin"
        assert added.password_hash == "hash"
        assert user.id == 7
        mock_session.get.assert_not_called()
        mock_probe.user_saved.assert_called_once_with(7, "jane@example.com")

    @pytest.mark.asyncio
    async def test_updates_existing_row(self, repository, mock_session):
        existing = _model(user_id=3)
        mock_session.get.return_value = existing
        user = User(
            id=3,
            email="jane@example.com",
            name="Jane Smith",
            role=UserRole.MANAGER_ADMIN,
            password_hash="hash",
            is_active=False,
            date_joined=JOINED,
        )

        await repository.save(user)

        mock_session.get.assert_awaited_once_with(UserModel, 3)
        mock_session.add.assert_not_called()
        assert existing.name == "Jane Smith"
        assert existing.role == "manager_admin"
        assert existing.is_active is False

    @pytest.mark.asyncio
    async def test_unique_violation_raises_duplicate(
        self, repository, mock_session, mock_probe
    ):
        mock_session.flush.side_effect = IntegrityError(
            "INSERT",
            {},
            Exception('duplicate key value violates unique constraint "uq_users_email"'),
        )
        user = User.register("jane@example.com", "Jane Doe", "admin", "hash")

        with pytest.raises(DuplicateUserEmailError) as exc_info:
            await repository.save(user)

        assert exc_info.value.email == "jane@example.com"
        mock_probe.duplicate_user_email.assert_called_once_with("jane@example.com")

    @pytest.mark.asyncio
    async def test_other_integrity_errors_propagate(self, repository, mock_session):
        mock_session.flush.side_effect = IntegrityError(
            "INSERT", {}, Exception('violates check constraint "ck_users_role"')
        )
        user = User.register("jane@example.com", "Jane Doe", "admin", "hash")

        with pytest.raises(IntegrityError):
            await repository.save(user)


class TestGet:
    """Tests for get_by_id and get_by_email."""

    @pytest.mark.asyncio
    async def test_get_by_id_returns_user(self, repository, mock_session):
        mock_session.get.return_value = _model(user_id=5)

        user = await repository.get_by_id(5)

        assert user.id == 5
        assert user.role is UserRole.ADMIN
        assert user.date_joined == JOINED

    @pytest.mark.asyncio
    async def test_get_by_id_missing(self, repository, mock_session, mock_probe):
        mock_session.get.return_value = None

        assert await repository.get_by_id(5) is None
        mock_probe.user_not_found.assert_called_once_with(5)

    @pytest.mark.asyncio
    async def test_get_by_email_normalizes_lookup(self, repository, mock_session):
        mock_session.execute.return_value = _result(scalar=_model())

        user = await repository.get_by_email("  Jane@Example.COM ")

        assert user.email == "jane@example.com"
        stmt = mock_session.execute.call_args[0][0]
        assert "users.email = 'jane@example.com'" in _compiled(stmt)

    @pytest.mark.asyncio
    async def test_get_by_email_missing(self, repository, mock_session, mock_probe):
        mock_session.execute.return_value = _result(scalar=None)

        assert await repository.get_by_email("nobody@example.com") is None
        mock_probe.user_not_found.assert_called_once_with("nobody@example.com")


class TestListAndCount:
    """Tests for list_all and count_by_role."""

    @pytest.mark.asyncio
    async def test_list_all_orders_by_last_login(
        self, repository, mock_session, mock_probe
    ):
        mock_session.execute.return_value = _result(
            scalars=[_model(1), _model(2, email="john@example.com")]
        )

        users = await repository.list_all()

        assert [user.id for user in users] == [1, 2]
        compiled = _compiled(mock_session.execute.call_args[0][0])
        assert "ORDER BY users.last_login DESC NULLS LAST, users.id" in compiled
        mock_probe.users_listed.assert_called_once_with(2)

    @pytest.mark.asyncio
    async def test_count_by_role(self, repository, mock_session):
        mock_session.execute.return_value = _result(count=2)

        assert await repository.count_by_role(UserRole.SUPER_ADMIN) == 2
        compiled = _compiled(mock_session.execute.call_args[0][0])
        assert "count(*)" in compiled
        assert "users.role = 'super_admin'" in compiled


class TestDelete:
    """Tests for delete method."""

    @pytest.mark.asyncio
    async def test_deletes_row(self, repository, mock_session, mock_probe):
        model = _model(user_id=4)
        mock_session.get.return_value = model
        user = User(
            id=4,
            email="jane@example.com",
            name="Jane Doe",
            role=UserRole.ADMIN,
            password_hash="hash",
        )

        assert await repository.delete(user) is True
        mock_session.delete.assert_awaited_once_with(model)
        mock_session.flush.assert_awaited_once()
        mock_probe.user_deleted.assert_called_once_with(4)

    @pytest.mark.asyncio
    async def test_unsaved_user_is_not_deleted(self, repository, mock_session):
        user = User.register("jane@example.com", "Jane Doe", "admin", "hash")

        assert await repository.delete(user) is False
        mock_session.get.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_row(self, repository, mock_session):
        mock_session.get.return_value = None
        user = User(
            id=4,
            email="jane@example.com",
            name="Jane Doe",
            role=UserRole.ADMIN,
            password_hash="hash",
        )

        assert await repository.delete(user) is False
        mock_session.delete.assert_not_called()
