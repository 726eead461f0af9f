"""Repository protocols (ports) for the documents context."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from documents.domain.aggregates import Document


@runtime_checkable
class IDocumentRepository(Protocol):
    """Repository for Document aggregate persistence."""

    async def save(self, document: Document) -> None:
        """Insert a new document or update an existing one.

        A new document gets its ``id`` and timestamps assigned on save.

        Raises:
            DocumentOwnerNotFoundError: If the owner is not a known user
        """
        ...

    async def get_by_id(self, document_id: int) -> Document | None:
        """Retrieve a document by id, or None if not found."""
        ...

    async def list_all(self) -> list[Document]:
        """Return every document, newest first."""
        ...

    async def list_by_owner(self, owner_id: int) -> list[Document]:
        """Return the documents of one owner, newest first."""
        ...

    async def delete(self, document: Document) -> bool:
        """Delete a document.

        Returns:
            True if deleted, False if not found
        """
        ...
