"""Document application service for the documents bounded context."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from documents.application.observability import (
    DefaultDocumentServiceProbe,
    DocumentServiceProbe,
)
from documents.domain.aggregates import Document
from documents.ports.repositories import IDocumentRepository


class DocumentService:
    """Application service for document records.

    Writes run in a transaction on the injected session. Owner existence
    is enforced by the database, so an unknown owner surfaces from
    ``save`` as DocumentOwnerNotFoundError.
    """

    def __init__(
        self,
        document_repository: IDocumentRepository,
        session: AsyncSession,
        probe: DocumentServiceProbe | None = None,
    ):
        self._document_repository = document_repository
        self._session = session
        self._probe = probe or DefaultDocumentServiceProbe()

    async def create_document(
        self, title: str, content: str, owner_id: int
    ) -> Document:
        """Create a document for an existing user.

        Raises:
            ValueError: If the title or content is blank
            DocumentOwnerNotFoundError: If the owner is not a known user
        """
        document = Document.create(title, content, owner_id)

        async with self._session.begin():
            await self._document_repository.save(document)

        self._probe.document_created(
            document_id=document.id, owner_id=document.owner_id
        )
        return document

    async def list_documents(self, owner_id: int | None = None) -> list[Document]:
        """List documents newest first, optionally for one owner only."""
        if owner_id is not None:
            return await self._document_repository.list_by_owner(owner_id)
        return await self._document_repository.list_all()

    async def get_document(self, document_id: int) -> Document | None:
        document = await self._document_repository.get_by_id(document_id)
        if document is None:
            self._probe.document_not_found(document_id=document_id)
        return document

    async def update_document(
        self,
        document_id: int,
        title: str | None = None,
        content: str | None = None,
    ) -> Document | None:
        """Apply a partial update to a document.

        Returns:
            The updated Document, or None if not found
        """
        async with self._session.begin():
            document = await self._document_repository.get_by_id(document_id)
            if document is None:
                self._probe.document_not_found(document_id=document_id)
                return None

            changed = document.update(title=title, content=content)
            if changed:
                await self._document_repository.save(document)

        if changed:
            self._probe.document_updated(document_id=document_id, fields=changed)
        return document

    async def delete_document(self, document_id: int) -> bool:
        """Delete a document.

        Returns:
            True if deleted, False if not found
        """
        async with self._session.begin():
            document = await self._document_repository.get_by_id(document_id)
            if document is None:
                self._probe.document_not_found(document_id=document_id)
                return False

            deleted = await self._document_repository.delete(document)

        if deleted:
            self._probe.document_deleted(document_id=document_id)
        return deleted
