"""Shared infrastructure dependencies.

Provides ONLY raw database infrastructure resources (connection pools).
Does NOT import from bounded contexts to maintain DDD boundaries.
"""

from functools import lru_cache

from infrastructure.database.connection_pool import ConnectionPool
from infrastructure.settings import get_database_settings


@lru_cache
def get_connection_pool() -> ConnectionPool:
    """Get application-scoped psycopg2 connection pool (singleton).

    The pool is thread-safe and shared across all requests. It is opened on
    first use and closed by the application lifespan on shutdown.

    Returns:
        ConnectionPool instance.
    """
    settings = get_database_settings()
    return ConnectionPool(settings)


def close_connection_pool() -> None:
    """Close the shared pool if it was ever opened."""
    if get_connection_pool.cache_info().currsize == 0:
        return
    get_connection_pool().close_all()
    get_connection_pool.cache_clear()
