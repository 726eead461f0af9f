"""Database infrastructure - shared connection primitives."""

from infrastructure.database.exceptions import (
    DatabaseConnectionError,
    DatabaseError,
    DatabaseQueryError,
)

__all__ = [
    "DatabaseConnectionError",
    "DatabaseError",
    "DatabaseQueryError",
]
