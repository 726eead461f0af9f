"""Database-specific exceptions shared by all bounded contexts."""


class DatabaseError(Exception):
    """Base exception for database operations."""

    pass


class DatabaseConnectionError(DatabaseError):
    """Raised when a database connection cannot be obtained."""

    pass


class DatabaseQueryError(DatabaseError):
    """Raised when a SQL statement fails.

    Carries the PostgreSQL SQLSTATE code (``pgcode``) so callers can
    distinguish recoverable conditions such as duplicate catalog objects.
    """

    def __init__(
        self,
        message: str,
        statement: str | None = None,
        pgcode: str | None = None,
    ):
        super().__init__(message)
        self.statement = statement
        self.pgcode = pgcode
