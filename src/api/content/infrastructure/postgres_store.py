"""PostgreSQL implementation of the content backing store."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import psycopg2
from psycopg2.extras import RealDictCursor

from content.infrastructure.observability import (
    BackingStoreProbe,
    DefaultBackingStoreProbe,
)
from content.ports.protocols import Params, Statement
from infrastructure.database.exceptions import DatabaseError, DatabaseQueryError

if TYPE_CHECKING:
    from psycopg2.extensions import connection as PsycopgConnection

    from infrastructure.database.connection_pool import ConnectionPool


class PostgresBackingStore:
    """Backing store that runs each statement on a pooled connection.

    Every call borrows a connection for its own transaction: the statement
    is committed on success and rolled back on any failure, including an
    interruption, so a connection never goes back to the pool mid-transaction.
    Statement deadlines come from the pool's ``statement_timeout``.
    """

    def __init__(
        self,
        pool: ConnectionPool,
        probe: BackingStoreProbe | None = None,
    ):
        self._pool = pool
        self._probe = probe or DefaultBackingStoreProbe()

    def execute(self, statement: Statement, params: Params = None) -> int:
        with self._pool.connection() as conn:
            try:
                with conn:
                    with conn.cursor() as cursor:
                        cursor.execute(statement, params)
                        return max(cursor.rowcount, 0)
            except psycopg2.Error as e:
                raise self._query_error(conn, statement, e) from e

    def query(
        self, statement: Statement, params: Params = None
    ) -> list[dict[str, Any]]:
        with self._pool.connection() as conn:
            try:
                with conn:
                    with conn.cursor(cursor_factory=RealDictCursor) as cursor:
                        cursor.execute(statement, params)
                        return [dict(row) for row in cursor.fetchall()]
            except psycopg2.Error as e:
                raise self._query_error(conn, statement, e) from e

    def verify_connection(self) -> bool:
        """Check that the database answers a trivial query."""
        try:
            self.query("SELECT 1 AS ok")
        except DatabaseError as e:
            self._probe.connection_verification_failed(e)
            return False
        return True

    def _query_error(
        self,
        conn: PsycopgConnection,
        statement: Statement,
        error: psycopg2.Error,
    ) -> DatabaseQueryError:
        text = _statement_text(conn, statement)
        self._probe.statement_failed(text, error, error.pgcode)
        return DatabaseQueryError(
            f"Statement failed: {error}", statement=text, pgcode=error.pgcode
        )


def _statement_text(conn: PsycopgConnection, statement: Statement) -> str:
    if isinstance(statement, str):
        return statement
    try:
        return statement.as_string(conn)
    except psycopg2.Error:
        return repr(statement)
