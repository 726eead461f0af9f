"""Integration tests for the tenant-scoped document content store.

These tests verify namespace provisioning and upsert behavior against a
real PostgreSQL instance.

Run with: pytest -m integration tests/integration/test_doc_content_store.py
Requires: Running PostgreSQL (LABDOCS_DB_* settings)
"""

from concurrent.futures import ThreadPoolExecutor

import pytest
from psycopg2 import sql

from content.domain.namespace import resolve_namespace
from content.infrastructure.doc_content_repository import DocContentRepository
from content.infrastructure.postgres_store import PostgresBackingStore
from content.infrastructure.provisioner import NamespaceProvisioner
from content.ports.exceptions import BulkSaveError

pytestmark = pytest.mark.integration


@pytest.fixture
def repository(backing_store: PostgresBackingStore) -> DocContentRepository:
    return DocContentRepository(backing_store, NamespaceProvisioner(backing_store))


def _namespace_exists(store: PostgresBackingStore, namespace: str) -> bool:
    rows = store.query(
        "SELECT 1 AS found FROM information_schema.schemata WHERE schema_name = %s",
        (namespace,),
    )
    return bool(rows)


class TestProvisioning:
    """Tests for namespace creation."""

    def test_verify_connection(self, backing_store):
        assert backing_store.verify_connection() is True

    def test_ensure_creates_namespace_and_table(self, backing_store, lab_prefix):
        namespace = NamespaceProvisioner(backing_store).ensure(lab_prefix)

        assert namespace.name == resolve_namespace(lab_prefix)
        assert _namespace_exists(backing_store, namespace.name)
        rows = backing_store.query(
            "SELECT column_name FROM information_schema.columns "
            "WHERE table_schema = %s AND table_name = 'doccontent' "
            "ORDER BY ordinal_position",
            (namespace.name,),
        )
        assert [r["column_name"] for r in rows] == [
            "document_id",
            "lab_prefix",
            "content",
            "updated_at",
        ]

    def test_ensure_is_idempotent(self, backing_store, lab_prefix):
        provisioner = NamespaceProvisioner(backing_store)

        provisioner.ensure(lab_prefix)
        provisioner.ensure(lab_prefix.lower())

        assert _namespace_exists(backing_store, resolve_namespace(lab_prefix))

    def test_concurrent_first_use(self, backing_store, lab_prefix):
        provisioner = NamespaceProvisioner(backing_store)

        with ThreadPoolExecutor(max_workers=6) as pool:
            results = list(pool.map(provisioner.ensure, [lab_prefix] * 12))

        assert {ns.name for ns in results} == {resolve_namespace(lab_prefix)}


class TestContentRoundTrip:
    """Tests for save, find and delete against PostgreSQL."""

    def test_draft_then_final(self, repository, lab_prefix):
        repository.save(lab_prefix, "doc-1", {"status": "draft"})
        repository.save(lab_prefix.lower(), "doc-1", {"status": "final"})

        records = repository.find_all(lab_prefix)

        assert len(records) == 1
        assert records[0].content == {"status": "final"}
        assert records[0].lab_prefix == lab_prefix.lower()
        assert records[0].updated_at is not None

    def test_content_round_trips(self, repository, lab_prefix):
        content = {
            "title": "Calibration record",
            "items": [{"id": 1, "ok": True}, {"id": 2, "ok": False}],
            "notes": None,
            "ratio": 0.25,
        }

        repository.save(lab_prefix, "doc-1", content)

        assert repository.find_by_document(lab_prefix, "doc-1")[0].content == content

    def test_delete_then_find(self, repository, lab_prefix):
        repository.save(lab_prefix, "doc-1", {})

        assert repository.delete(lab_prefix, "doc-1") is True
        assert repository.delete(lab_prefix, "doc-1") is False
        assert repository.find_by_document(lab_prefix, "doc-1") == []

    def test_bulk_save_stops_at_failing_entry(self, repository, lab_prefix):
        too_long = "x" * 101

        with pytest.raises(BulkSaveError) as exc_info:
            repository.bulk_save(lab_prefix, {"d1": {}, too_long: {}, "d3": {}})

        assert exc_info.value.saved_count == 1
        assert [r.document_id for r in repository.find_all(lab_prefix)] == ["d1"]

    def test_dropped_namespace_is_recreated(
        self, repository, backing_store, lab_prefix
    ):
        repository.save(lab_prefix, "doc-1", {})
        backing_store.execute(
            sql.SQL("DROP SCHEMA {} CASCADE").format(
                sql.Identifier(resolve_namespace(lab_prefix))
            )
        )

        repository.save(lab_prefix, "doc-2", {})

        assert [r.document_id for r in repository.find_all(lab_prefix)] == ["doc-2"]
