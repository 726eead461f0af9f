"""Unit tests for DocContentQueries statement building."""

from psycopg2 import sql

from content.infrastructure.queries import DocContentQueries


def _identifiers(statement):
    """Collect the identifiers a composed statement interpolates."""
    found = []
    for part in statement.seq:
        if isinstance(part, sql.Identifier):
            found.append(part.strings)
        elif isinstance(part, sql.Composed):
            found.extend(_identifiers(part))
    return found


class TestProvisioningStatements:
    """Tests for schema and table DDL."""

    def test_create_schema_is_idempotent(self, render):
        statement = DocContentQueries.create_schema("tenant_acme")

        assert render(statement) == 'CREATE SCHEMA IF NOT EXISTS "tenant_acme"'

    def test_create_schema_uses_identifier(self):
        statement = DocContentQueries.create_schema("tenant_acme")

        assert _identifiers(statement) == [("tenant_acme",)]

    def test_create_content_table_is_idempotent(self, render):
        text = render(DocContentQueries.create_content_table("tenant_acme"))

        assert text.startswith(
            'CREATE TABLE IF NOT EXISTS "tenant_acme"."doccontent" ('
        )

    def test_create_content_table_columns(self, render):
        text = render(DocContentQueries.create_content_table("tenant_acme"))

        assert "document_id VARCHAR(100) PRIMARY KEY" in text
        assert "lab_prefix VARCHAR(50) NOT NULL" in text
        assert "content JSONB NOT NULL DEFAULT '{}'::jsonb" in text
        assert "updated_at TIMESTAMP WITH TIME ZONE NOT NULL DEFAULT NOW()" in text


class TestContentStatements:
    """Tests for content read and write statements."""

    def test_upsert_replaces_on_document_conflict(self, render):
        text = render(DocContentQueries.upsert("tenant_acme"))

        assert text.startswith('INSERT INTO "tenant_acme"."doccontent"')
        assert "VALUES (%s, %s, %s::jsonb, NOW())" in text
        assert "ON CONFLICT (document_id) DO UPDATE" in text
        assert "content = EXCLUDED.content" in text
        assert "lab_prefix = EXCLUDED.lab_prefix" in text
        assert "updated_at = NOW()" in text

    def test_select_by_document(self, render):
        text = render(DocContentQueries.select_by_document("tenant_acme"))

        assert text == (
            "SELECT document_id, lab_prefix, content, updated_at "
            'FROM "tenant_acme"."doccontent" WHERE document_id = %s'
        )

    def test_select_all_orders_by_document_id(self, render):
        text = render(DocContentQueries.select_all("tenant_acme"))

        assert text.endswith("ORDER BY document_id")

    def test_delete(self, render):
        text = render(DocContentQueries.delete("tenant_acme"))

        assert text == 'DELETE FROM "tenant_acme"."doccontent" WHERE document_id = %s'

    def test_namespace_is_never_a_literal(self):
        """Hostile namespace text stays inside a quoted identifier."""
        hostile = 'tenant_x"; DROP TABLE labs; --'

        for build in (
            DocContentQueries.upsert,
            DocContentQueries.select_by_document,
            DocContentQueries.select_all,
            DocContentQueries.delete,
        ):
            assert _identifiers(build(hostile)) == [(hostile, "doccontent")]
