"""Document content application service.

Exposes the tenant-scoped content store to the request layer. The service
is synchronous because the backing store is; async callers dispatch to a
worker thread.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Mapping

from content.application.observability import (
    DefaultDocContentServiceProbe,
    DocContentServiceProbe,
)
from content.ports.exceptions import BulkSaveError

if TYPE_CHECKING:
    from content.domain.value_objects import DocContentRecord, JSONValue
    from content.infrastructure.doc_content_repository import DocContentRepository


class DocContentService:
    """Application service for per-lab document content.

    Lab registration is not checked here; the request layer validates the
    lab against the registry before calling in.
    """

    def __init__(
        self,
        repository: DocContentRepository,
        probe: DocContentServiceProbe | None = None,
    ):
        """Initialize DocContentService with dependencies.

        Args:
            repository: Tenant-scoped content repository
            probe: Optional domain probe for observability
        """
        self._repository = repository
        self._probe = probe or DefaultDocContentServiceProbe()

    def save_content(
        self, lab_prefix: str, document_id: str, content: JSONValue
    ) -> None:
        """Save (insert or replace) the content of one document."""
        self._repository.save(lab_prefix, document_id, content)
        self._probe.content_saved(lab_prefix=lab_prefix, document_id=document_id)

    def bulk_save_content(
        self, lab_prefix: str, documents: Mapping[str, JSONValue]
    ) -> int:
        """Save many documents, stopping at the first failure.

        Entries saved before a failure are not rolled back.

        Returns:
            Number of documents saved

        Raises:
            BulkSaveError: With ``saved_count`` when an entry fails
        """
        try:
            count = self._repository.bulk_save(lab_prefix, documents)
        except BulkSaveError as e:
            self._probe.content_bulk_save_partial(
                lab_prefix=lab_prefix,
                saved_count=e.saved_count,
                failed_document_id=e.document_id,
            )
            raise

        self._probe.content_bulk_saved(lab_prefix=lab_prefix, count=count)
        return count

    def find_content_by_document(
        self, lab_prefix: str, document_id: str
    ) -> list[DocContentRecord]:
        """Return the document's record as a list of zero or one."""
        records = self._repository.find_by_document(lab_prefix, document_id)
        self._probe.content_listed(lab_prefix=lab_prefix, count=len(records))
        return records

    def find_all_content(self, lab_prefix: str) -> list[DocContentRecord]:
        """Return all records of the lab ordered by document id."""
        records = self._repository.find_all(lab_prefix)
        self._probe.content_listed(lab_prefix=lab_prefix, count=len(records))
        return records

    def delete_content(self, lab_prefix: str, document_id: str) -> bool:
        """Delete a document's content.

        Returns:
            True if the document existed, False otherwise
        """
        deleted = self._repository.delete(lab_prefix, document_id)
        if deleted:
            self._probe.content_deleted(lab_prefix=lab_prefix, document_id=document_id)
        else:
            self._probe.content_not_found(
                lab_prefix=lab_prefix, document_id=document_id
            )
        return deleted
