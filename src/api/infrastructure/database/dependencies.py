"""Database dependency injection for FastAPI.

Provides the async session used by the lab registry, with lazy engine
creation and explicit disposal on shutdown.
"""

from __future__ import annotations

import threading
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from infrastructure.database.engines import create_registry_engine
from infrastructure.observability import DefaultConnectionProbe
from infrastructure.settings import get_database_settings

_probe = DefaultConnectionProbe()

# Module-level engine and sessionmaker (created on first use)
_registry_engine: AsyncEngine | None = None
_registry_sessionmaker: async_sessionmaker[AsyncSession] | None = None

_engine_lock = threading.Lock()


def get_registry_engine() -> AsyncEngine:
    """Get the registry database engine (singleton).

    Uses double-check locking for thread-safe initialization and creates
    the sessionmaker alongside the engine.

    Returns:
        Configured async engine
    """
    global _registry_engine, _registry_sessionmaker
    if _registry_engine is None:
        with _engine_lock:
            if _registry_engine is None:
                settings = get_database_settings()
                _registry_engine = create_registry_engine(settings)
                _registry_sessionmaker = async_sessionmaker(
                    _registry_engine,
                    expire_on_commit=False,
                    class_=AsyncSession,
                )
    return _registry_engine


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Provide a registry session (FastAPI dependency).

    The session does NOT auto-commit. Callers manage transactions with
    ``async with session.begin()``.

    Yields:
        AsyncSession for database operations
    """
    get_registry_engine()
    assert _registry_sessionmaker is not None

    async with _registry_sessionmaker() as session:
        yield session


async def close_database_connections() -> None:
    """Dispose the registry engine.

    Should be called on application shutdown. Resets the sessionmaker to
    allow reinitialization.
    """
    global _registry_engine, _registry_sessionmaker

    if _registry_engine is not None:
        await _registry_engine.dispose()
        _probe.pool_closed()
        _registry_engine = None
        _registry_sessionmaker = None
