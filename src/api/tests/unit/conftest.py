"""Unit test fixtures with mocked dependencies."""

from __future__ import annotations

import copy
import json
import re
import threading
from datetime import datetime, timezone
from typing import Any, Callable
from unittest.mock import MagicMock

import pytest
from psycopg2 import errorcodes, sql

from infrastructure.database.exceptions import DatabaseQueryError

_IDENT = r'"([^"]+)"'
_CREATE_SCHEMA = re.compile(rf"^CREATE SCHEMA IF NOT EXISTS {_IDENT}$")
_CREATE_TABLE = re.compile(rf"^CREATE TABLE IF NOT EXISTS {_IDENT}\.{_IDENT} \(")
_INSERT = re.compile(rf"^INSERT INTO {_IDENT}\.{_IDENT} ")
_SELECT_ONE = re.compile(rf"^SELECT .+ FROM {_IDENT}\.{_IDENT} WHERE document_id = %s$")
_SELECT_ALL = re.compile(rf"^SELECT .+ FROM {_IDENT}\.{_IDENT} ORDER BY document_id$")
_DELETE = re.compile(rf"^DELETE FROM {_IDENT}\.{_IDENT} WHERE document_id = %s$")


def render_statement(statement: Any) -> str:
    """Render a psycopg2.sql composable to text without a connection."""
    if isinstance(statement, str):
        text = statement
    elif isinstance(statement, sql.Composed):
        text = "".join(render_statement(part) for part in statement.seq)
    elif isinstance(statement, sql.Identifier):
        text = ".".join(f'"{s}"' for s in statement.strings)
    elif isinstance(statement, sql.SQL):
        text = statement.string
    elif isinstance(statement, sql.Literal):
        text = repr(statement.wrapped)
    else:
        raise TypeError(f"Unsupported statement: {statement!r}")
    return text


def _normalize(text: str) -> str:
    return " ".join(text.split())


class FakeBackingStore:
    """In-memory BackingStore understanding the content-store statements.

    Schemas and tables behave like PostgreSQL catalog objects: statements
    against a missing table fail with ``undefined_table``. Failures can be
    injected per statement with ``fail_when``.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.schemas: set[str] = set()
        self.tables: dict[tuple[str, str], dict[str, dict[str, Any]]] = {}
        self.schema_creations: list[str] = []
        self.table_creations: list[tuple[str, str]] = []
        self.statements: list[str] = []
        self._failures: list[list[Any]] = []

    def fail_when(
        self,
        predicate: Callable[[str, Any], bool],
        error: Exception,
        times: int = 1,
    ) -> None:
        """Raise ``error`` for the next ``times`` statements matching."""
        self._failures.append([predicate, error, times])

    def drop_schema(self, schema: str) -> None:
        """Drop a schema and its tables, as an operator would out-of-band."""
        with self._lock:
            self.schemas.discard(schema)
            for key in [k for k in self.tables if k[0] == schema]:
                del self.tables[key]

    def rows(self, schema: str, table: str = "doccontent") -> dict[str, dict]:
        return self.tables.get((schema, table), {})

    def execute(self, statement: Any, params: Any = None) -> int:
        text = self._record(statement, params)

        with self._lock:
            if match := _CREATE_SCHEMA.match(text):
                schema = match.group(1)
                if schema not in self.schemas:
                    self.schemas.add(schema)
                    self.schema_creations.append(schema)
                return 0

            if match := _CREATE_TABLE.match(text):
                key = (match.group(1), match.group(2))
                if key[0] not in self.schemas:
                    raise DatabaseQueryError(
                        f'schema "{key[0]}" does not exist',
                        statement=text,
                        pgcode=errorcodes.INVALID_SCHEMA_NAME,
                    )
                if key not in self.tables:
                    self.tables[key] = {}
                    self.table_creations.append(key)
                return 0

            if match := _INSERT.match(text):
                table = self._table(match, text)
                document_id, lab_prefix, payload = params
                table[document_id] = {
                    "document_id": document_id,
                    "lab_prefix": lab_prefix,
                    "content": json.loads(json.dumps(payload.adapted)),
                    "updated_at": datetime.now(timezone.utc),
                }
                return 1

            if match := _DELETE.match(text):
                table = self._table(match, text)
                return 1 if table.pop(params[0], None) is not None else 0

        raise AssertionError(f"Unexpected statement: {text}")

    def query(self, statement: Any, params: Any = None) -> list[dict[str, Any]]:
        text = self._record(statement, params)

        with self._lock:
            if text == "SELECT 1 AS ok":
                return [{"ok": 1}]

            if match := _SELECT_ONE.match(text):
                row = self._table(match, text).get(params[0])
                return [copy.deepcopy(row)] if row else []

            if match := _SELECT_ALL.match(text):
                table = self._table(match, text)
                return [copy.deepcopy(table[key]) for key in sorted(table)]

        raise AssertionError(f"Unexpected statement: {text}")

    def _record(self, statement: Any, params: Any) -> str:
        text = _normalize(render_statement(statement))
        with self._lock:
            self.statements.append(text)
            for failure in self._failures:
                predicate, error, remaining = failure
                if remaining > 0 and predicate(text, params):
                    failure[2] -= 1
                    raise error
        return text

    def _table(self, match: re.Match, text: str) -> dict[str, dict[str, Any]]:
        key = (match.group(1), match.group(2))
        if key not in self.tables:
            raise DatabaseQueryError(
                f'relation "{key[0]}.{key[1]}" does not exist',
                statement=text,
                pgcode=errorcodes.UNDEFINED_TABLE,
            )
        return self.tables[key]


@pytest.fixture
def fake_store() -> FakeBackingStore:
    """Provide an empty in-memory backing store."""
    return FakeBackingStore()


@pytest.fixture
def mock_db_settings():
    """Provide test database settings."""
    from infrastructure.settings import DatabaseSettings

    return DatabaseSettings(
        host="testhost",
        port=5432,
        database="testdb",
        username="testuser",
        password="testpass",
    )


@pytest.fixture
def mock_psycopg2_connection():
    """Provide a mocked psycopg2 connection."""
    conn = MagicMock()
    conn.closed = False

    cursor = MagicMock()
    cursor.fetchall.return_value = []
    cursor.fetchone.return_value = (1,)
    cursor.rowcount = 0

    # Set up context managers for both the transaction and the cursor
    conn.__enter__ = MagicMock(return_value=conn)
    conn.__exit__ = MagicMock(return_value=False)
    cursor.__enter__ = MagicMock(return_value=cursor)
    cursor.__exit__ = MagicMock(return_value=False)
    conn.cursor.return_value = cursor

    return conn, cursor


@pytest.fixture
def render():
    """Provide a renderer turning psycopg2.sql composables into text."""

    def _render(statement: Any) -> str:
        return _normalize(render_statement(statement))

    return _render
