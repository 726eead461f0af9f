"""Connection pool for PostgreSQL.

This module provides connection pooling using psycopg2.pool.ThreadedConnectionPool.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING, Iterator

import psycopg2
from psycopg2 import pool as psycopg2_pool

from infrastructure.database.exceptions import DatabaseConnectionError
from infrastructure.observability.probes import (
    ConnectionProbe,
    DefaultConnectionProbe,
)

if TYPE_CHECKING:
    from psycopg2.extensions import connection as PsycopgConnection

    from infrastructure.settings import DatabaseSettings


class ConnectionPool:
    """Thread-safe connection pool for PostgreSQL.

    Wraps psycopg2.pool.ThreadedConnectionPool. Every connection is opened
    with the configured ``statement_timeout`` so that no statement can
    outlive the caller's deadline.

    Attributes:
        _settings: Database configuration settings
        _pool: The underlying ThreadedConnectionPool instance
        _probe: Observability probe for monitoring
    """

    def __init__(
        self,
        settings: DatabaseSettings,
        probe: ConnectionProbe | None = None,
    ):
        """Initialize the connection pool.

        Args:
            settings: Database connection settings
            probe: Optional observability probe
        """
        self._settings = settings
        self._probe = probe or DefaultConnectionProbe()
        self._pool: psycopg2_pool.ThreadedConnectionPool | None = None

        if settings.pool_enabled:
            self._initialize_pool()

    def _initialize_pool(self) -> None:
        """Initialize the ThreadedConnectionPool."""
        try:
            self._pool = psycopg2_pool.ThreadedConnectionPool(
                minconn=self._settings.pool_min_connections,
                maxconn=self._settings.pool_max_connections,
                host=self._settings.host,
                port=self._settings.port,
                dbname=self._settings.database,
                user=self._settings.username,
                password=self._settings.password.get_secret_value(),
                connect_timeout=self._settings.connect_timeout_seconds,
                options=self._settings.connection_options,
            )
            self._probe.pool_initialized(
                min_conn=self._settings.pool_min_connections,
                max_conn=self._settings.pool_max_connections,
            )
        except psycopg2.Error as e:
            self._probe.pool_initialization_failed(error=e)
            raise DatabaseConnectionError(
                f"Failed to initialize connection pool: {e}"
            ) from e

    @property
    def is_initialized(self) -> bool:
        """Whether the underlying pool is open."""
        return self._pool is not None

    def get_connection(self) -> PsycopgConnection:
        """Get a connection from the pool.

        Returns:
            A psycopg2 connection.

        Raises:
            DatabaseConnectionError: If pool is not initialized or connection fails.
        """
        if self._pool is None:
            raise DatabaseConnectionError("Connection pool not initialized")

        try:
            conn = self._pool.getconn()
            self._probe.connection_acquired_from_pool()
            return conn
        except psycopg2_pool.PoolError as e:
            self._probe.pool_exhausted()
            raise DatabaseConnectionError(
                f"Pool exhausted, cannot get connection: {e}"
            ) from e
        except psycopg2.OperationalError as e:
            self._probe.connection_failed(
                host=self._settings.host,
                database=self._settings.database,
                error=e,
            )
            raise DatabaseConnectionError(f"Failed to connect to database: {e}") from e

    def return_connection(self, conn: PsycopgConnection) -> None:
        """Return a connection to the pool.

        Broken connections are discarded instead of being reused.

        Args:
            conn: The connection to return.
        """
        if self._pool is None:
            return

        try:
            self._pool.putconn(conn, close=bool(conn.closed))
            self._probe.connection_returned_to_pool()
        except Exception as e:
            self._probe.connection_return_failed(error=e)
            # Don't raise - connection will be discarded

    @contextmanager
    def connection(self) -> Iterator[PsycopgConnection]:
        """Borrow a connection for the duration of a ``with`` block.

        Usage:
            with pool.connection() as conn:
                with conn.cursor() as cursor:
                    cursor.execute("SELECT 1")
        """
        conn = self.get_connection()
        try:
            yield conn
        finally:
            self.return_connection(conn)

    def close_all(self) -> None:
        """Close all connections in the pool."""
        if self._pool is not None:
            self._pool.closeall()
            self._probe.pool_closed()
            self._pool = None
