"""Tenant-scoped document content repository.

Each operation resolves the lab's namespace, provisions it, and then runs
its statement against the backing store. Nothing is cached between calls,
so a namespace dropped out-of-band is recreated on the next access.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Mapping

from psycopg2.extras import Json

from content.domain.value_objects import (
    MAX_DOCUMENT_ID_LENGTH,
    DocContentRecord,
    JSONValue,
)
from content.infrastructure.observability import (
    DefaultDocContentStoreProbe,
    DocContentStoreProbe,
)
from content.infrastructure.provisioner import NamespaceProvisioner
from content.infrastructure.queries import DocContentQueries
from content.ports.exceptions import (
    BulkSaveError,
    ContentNotSerializableError,
    InvalidDocumentIdError,
    StorageError,
)
from infrastructure.database.exceptions import DatabaseError
from infrastructure.observability.context import ObservationContext
from shared_kernel.lab_prefix import LabPrefix

if TYPE_CHECKING:
    from content.domain.namespace import TenantNamespace
    from content.ports.protocols import BackingStore, Params, Statement


class DocContentRepository:
    """Upsert store for per-lab document content.

    The repository does not check that a lab is registered; callers are
    expected to consult the lab registry first.
    """

    def __init__(
        self,
        store: BackingStore,
        provisioner: NamespaceProvisioner | None = None,
        probe: DocContentStoreProbe | None = None,
    ):
        self._store = store
        self._provisioner = provisioner or NamespaceProvisioner(store)
        self._probe = probe or DefaultDocContentStoreProbe()

    def save(self, lab_prefix: str, document_id: str, content: JSONValue) -> None:
        """Insert or wholly replace the content of one document.

        Raises:
            InvalidLabPrefixError: If the prefix fails validation
            InvalidDocumentIdError: If the document id is empty or too long
            ContentNotSerializableError: If content cannot be serialized
            ProvisioningError: If the namespace cannot be provisioned
            StorageError: If the upsert fails
        """
        prefix = LabPrefix.from_string(lab_prefix)
        _check_document_id(document_id)
        payload = _to_json(content)
        namespace = self._provisioner.ensure(prefix)
        probe = self._probe_for(prefix, namespace)

        try:
            self._upsert(namespace, prefix, document_id, payload)
        except DatabaseError as e:
            probe.storage_failed("save", e)
            raise StorageError(f"Failed to save document {document_id}: {e}") from e

        probe.content_saved(document_id)

    def bulk_save(
        self, lab_prefix: str, documents: Mapping[str, JSONValue]
    ) -> int:
        """Upsert every entry of ``documents`` in iteration order.

        The namespace is provisioned once. Entries are written one statement
        at a time; a failure stops the loop without rolling back entries
        already written.

        Ids and payloads are all validated before anything is written.

        Returns:
            Number of entries saved

        Raises:
            InvalidDocumentIdError: If any document id is empty or too long
            BulkSaveError: If an entry fails, with the count saved before it
        """
        prefix = LabPrefix.from_string(lab_prefix)
        for document_id in documents:
            _check_document_id(document_id)
        payloads = {
            document_id: _to_json(content)
            for document_id, content in documents.items()
        }
        namespace = self._provisioner.ensure(prefix)
        probe = self._probe_for(prefix, namespace)

        saved = 0
        for document_id, payload in payloads.items():
            try:
                self._upsert(namespace, prefix, document_id, payload)
            except DatabaseError as e:
                probe.bulk_save_interrupted(saved, document_id, e)
                raise BulkSaveError(
                    f"Bulk save stopped at document {document_id} "
                    f"after {saved} saved: {e}",
                    saved_count=saved,
                    document_id=document_id,
                ) from e
            saved += 1

        probe.bulk_save_completed(saved)
        return saved

    def find_by_document(
        self, lab_prefix: str, document_id: str
    ) -> list[DocContentRecord]:
        """Return the record for ``document_id`` as a list of zero or one."""
        prefix = LabPrefix.from_string(lab_prefix)
        namespace = self._provisioner.ensure(prefix)
        return self._select(
            prefix,
            namespace,
            "find_by_document",
            DocContentQueries.select_by_document(namespace.name),
            (document_id,),
        )

    def find_all(self, lab_prefix: str) -> list[DocContentRecord]:
        """Return every record of the lab ordered by document id."""
        prefix = LabPrefix.from_string(lab_prefix)
        namespace = self._provisioner.ensure(prefix)
        return self._select(
            prefix,
            namespace,
            "find_all",
            DocContentQueries.select_all(namespace.name),
            None,
        )

    def delete(self, lab_prefix: str, document_id: str) -> bool:
        """Remove a document's record.

        Returns:
            True if a row was removed, False if none existed
        """
        prefix = LabPrefix.from_string(lab_prefix)
        namespace = self._provisioner.ensure(prefix)
        probe = self._probe_for(prefix, namespace)

        try:
            removed = self._store.execute(
                DocContentQueries.delete(namespace.name), (document_id,)
            )
        except DatabaseError as e:
            probe.storage_failed("delete", e)
            raise StorageError(
                f"Failed to delete document {document_id}: {e}"
            ) from e

        deleted = removed > 0
        probe.content_deleted(document_id, deleted)
        return deleted

    def _upsert(
        self,
        namespace: TenantNamespace,
        prefix: LabPrefix,
        document_id: str,
        payload: Json,
    ) -> None:
        self._store.execute(
            DocContentQueries.upsert(namespace.name),
            (document_id, prefix.value, payload),
        )

    def _select(
        self,
        prefix: LabPrefix,
        namespace: TenantNamespace,
        operation: str,
        statement: Statement,
        params: Params,
    ) -> list[DocContentRecord]:
        probe = self._probe_for(prefix, namespace)
        try:
            rows = self._store.query(statement, params)
        except DatabaseError as e:
            probe.storage_failed(operation, e)
            raise StorageError(f"Failed to read content: {e}") from e

        probe.content_retrieved(len(rows))
        return [DocContentRecord.from_row(row) for row in rows]

    def _probe_for(
        self, prefix: LabPrefix, namespace: TenantNamespace
    ) -> DocContentStoreProbe:
        return self._probe.with_context(
            ObservationContext(lab_prefix=prefix.value, namespace=namespace.name)
        )


def _to_json(content: JSONValue) -> Json:
    try:
        json.dumps(content, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise ContentNotSerializableError(
            f"Content is not JSON serializable: {e}"
        ) from e
    return Json(content)


def _check_document_id(document_id: str) -> None:
    if not document_id or len(document_id) > MAX_DOCUMENT_ID_LENGTH:
        raise InvalidDocumentIdError(
            f"Document id must be 1 to {MAX_DOCUMENT_ID_LENGTH} characters",
            document_id=document_id,
        )
