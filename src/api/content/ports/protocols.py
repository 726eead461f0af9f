"""Ports for the content bounded context.

These protocols enable dependency inversion: the content store depends on
an abstract relational backing store and an abstract tenant registry, so it
can be exercised against in-memory fakes.
"""

from __future__ import annotations

from typing import (
    TYPE_CHECKING,
    Any,
    Mapping,
    Protocol,
    Sequence,
    Union,
    runtime_checkable,
)

if TYPE_CHECKING:
    from psycopg2.sql import Composable

Statement = Union[str, "Composable"]
Params = Union[Sequence[Any], Mapping[str, Any], None]


@runtime_checkable
class BackingStore(Protocol):
    """Synchronous relational backing store.

    Each call runs as its own unit of work: the statement is committed on
    success and rolled back on failure.
    """

    def execute(self, statement: Statement, params: Params = None) -> int:
        """Execute a statement and return the number of rows affected.

        Raises:
            DatabaseError: On any backing-store failure
        """
        ...

    def query(
        self, statement: Statement, params: Params = None
    ) -> list[dict[str, Any]]:
        """Execute a statement and return its rows as mappings.

        Raises:
            DatabaseError: On any backing-store failure
        """
        ...


@runtime_checkable
class TenantRegistry(Protocol):
    """Catalog of known labs, consulted before the content store is used."""

    async def exists(self, prefix: str) -> bool:
        """Return True if a lab with this prefix exists (case-insensitive)."""
        ...
