"""SQL statement builder for per-lab document content.

Namespace names are always interpolated as quoted identifiers, never as
string literals, so a prefix can only ever address its own schema.
"""

from __future__ import annotations

from psycopg2 import sql

from content.domain.namespace import CONTENT_TABLE

_COLUMNS = sql.SQL("document_id, lab_prefix, content, updated_at")


class DocContentQueries:
    """SQL statements for the document content table of one namespace.

    All methods are static to allow stateless usage. This class serves as
    a namespace for organizing content-store SQL patterns.
    """

    @staticmethod
    def _table(namespace: str) -> sql.Identifier:
        return sql.Identifier(namespace, CONTENT_TABLE)

    # =========================================================================
    # Provisioning
    # =========================================================================

    @staticmethod
    def create_schema(namespace: str) -> sql.Composed:
        """Build an idempotent CREATE SCHEMA statement."""
        return sql.SQL("CREATE SCHEMA IF NOT EXISTS {}").format(
            sql.Identifier(namespace)
        )

    @staticmethod
    def create_content_table(namespace: str) -> sql.Composed:
        """Build an idempotent CREATE TABLE statement for the content table.

        ``document_id`` is the primary key, so a namespace holds at most one
        record per document.
        """
        return sql.SQL(
            """
            CREATE TABLE IF NOT EXISTS {} (
                document_id VARCHAR(100) PRIMARY KEY,
                lab_prefix VARCHAR(50) NOT NULL,
                content JSONB NOT NULL DEFAULT '{{}}'::jsonb,
                updated_at TIMESTAMP WITH TIME ZONE NOT NULL DEFAULT NOW()
            )
            """
        ).format(DocContentQueries._table(namespace))

    # =========================================================================
    # Content
    # =========================================================================

    @staticmethod
    def upsert(namespace: str) -> sql.Composed:
        """Build an insert-or-replace statement.

        Parameters: (document_id, lab_prefix, content)
        """
        return sql.SQL(
            """
            INSERT INTO {} (document_id, lab_prefix, content, updated_at)
            VALUES (%s, %s, %s::jsonb, NOW())
            ON CONFLICT (document_id) DO UPDATE
            SET lab_prefix = EXCLUDED.lab_prefix,
                content = EXCLUDED.content,
                updated_at = NOW()
            """
        ).format(DocContentQueries._table(namespace))

    @staticmethod
    def select_by_document(namespace: str) -> sql.Composed:
        """Build a lookup by document id.

        Parameters: (document_id,)
        """
        return sql.SQL("SELECT {} FROM {} WHERE document_id = %s").format(
            _COLUMNS, DocContentQueries._table(namespace)
        )

    @staticmethod
    def select_all(namespace: str) -> sql.Composed:
        """Build a full scan ordered by document id."""
        return sql.SQL("SELECT {} FROM {} ORDER BY document_id").format(
            _COLUMNS, DocContentQueries._table(namespace)
        )

    @staticmethod
    def delete(namespace: str) -> sql.Composed:
        """Build a delete by document id.

        Parameters: (document_id,)
        """
        return sql.SQL("DELETE FROM {} WHERE document_id = %s").format(
            DocContentQueries._table(namespace)
        )
