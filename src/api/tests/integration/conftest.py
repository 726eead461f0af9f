"""Integration test fixtures for database tests.

These fixtures require a running PostgreSQL instance. Connection settings
come from the LABDOCS_DB_* environment variables.
"""

from __future__ import annotations

import os
import uuid
from collections.abc import AsyncGenerator, Generator

import pytest
import pytest_asyncio
from psycopg2 import sql
from pydantic import SecretStr
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from content.domain.namespace import resolve_namespace
from content.infrastructure.postgres_store import PostgresBackingStore
from infrastructure.database.connection_pool import ConnectionPool
from infrastructure.database.engines import create_registry_engine
from infrastructure.database.exceptions import DatabaseConnectionError
from infrastructure.database.models import Base
from infrastructure.settings import DatabaseSettings
import documents.infrastructure.models  # noqa: F401  (registers DocumentModel)
import labs.infrastructure.models  # noqa: F401  (registers LabModel)
import users.infrastructure.models  # noqa: F401  (registers UserModel)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (requires database)",
    )


@pytest.fixture(scope="session")
def integration_db_settings() -> DatabaseSettings:
    """Database settings for integration tests.

    Override with environment variables:
        LABDOCS_DB_HOST, LABDOCS_DB_PORT, etc.
    """
    return DatabaseSettings(
        host=os.getenv("LABDOCS_DB_HOST", "localhost"),
        port=int(os.getenv("LABDOCS_DB_PORT", "5432")),
        database=os.getenv("LABDOCS_DB_DATABASE", "labdocs"),
        username=os.getenv("LABDOCS_DB_USERNAME", "labdocs"),
        password=SecretStr(os.getenv("LABDOCS_DB_PASSWORD", "labdocs_dev_password")),
        pool_min_connections=1,
        pool_max_connections=10,
    )


@pytest.fixture(scope="session")
def connection_pool(
    integration_db_settings: DatabaseSettings,
) -> Generator[ConnectionPool, None, None]:
    """Provide a connection pool, skipping when no database is reachable."""
    try:
        pool = ConnectionPool(integration_db_settings)
    except DatabaseConnectionError as e:
        pytest.skip(f"PostgreSQL not available: {e}")
    yield pool
    pool.close_all()


@pytest.fixture
def backing_store(connection_pool: ConnectionPool) -> PostgresBackingStore:
    """Provide a backing store over the integration pool."""
    return PostgresBackingStore(connection_pool)


@pytest.fixture
def lab_prefix(backing_store: PostgresBackingStore) -> Generator[str, None, None]:
    """Provide a unique lab prefix and drop its namespace afterwards."""
    prefix = f"IT{uuid.uuid4().hex[:10]}"
    yield prefix
    backing_store.execute(
        sql.SQL("DROP SCHEMA IF EXISTS {} CASCADE").format(
            sql.Identifier(resolve_namespace(prefix))
        )
    )


@pytest_asyncio.fixture
async def async_session(
    integration_db_settings: DatabaseSettings,
    connection_pool: ConnectionPool,
) -> AsyncGenerator[AsyncSession, None]:
    """Provide a registry session with the public tables in place."""
    engine = create_registry_engine(integration_db_settings)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    sessionmaker = async_sessionmaker(engine, expire_on_commit=False)
    async with sessionmaker() as session:
        yield session

    await engine.dispose()


@pytest_asyncio.fixture
async def clean_labs(async_session: AsyncSession) -> AsyncGenerator[None, None]:
    """Remove integration-test labs before and after each test."""

    async def cleanup() -> None:
        await async_session.execute(
            text("DELETE FROM labs WHERE document_id_prefix ILIKE 'it%'")
        )
        await async_session.commit()

    await cleanup()
    yield
    await cleanup()


@pytest_asyncio.fixture
async def clean_users(async_session: AsyncSession) -> AsyncGenerator[None, None]:
    """Remove integration-test users, and with them their documents."""

    async def cleanup() -> None:
        await async_session.execute(
            text("DELETE FROM users WHERE email LIKE 'it-%@example.com'")
        )
        await async_session.commit()

    await cleanup()
    yield
    await cleanup()
