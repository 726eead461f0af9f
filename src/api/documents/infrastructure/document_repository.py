"""PostgreSQL implementation of IDocumentRepository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from documents.domain.aggregates import Document
from documents.infrastructure.models import DocumentModel
from documents.infrastructure.observability import (
    DefaultDocumentRepositoryProbe,
    DocumentRepositoryProbe,
)
from documents.ports.exceptions import DocumentOwnerNotFoundError
from documents.ports.repositories import IDocumentRepository


class DocumentRepository(IDocumentRepository):
    """Repository managing PostgreSQL storage for Document aggregates.

    Transactions are owned by the caller; this repository only flushes.
    """

    def __init__(
        self,
        session: AsyncSession,
        probe: DocumentRepositoryProbe | None = None,
    ) -> None:
        self._session = session
        self._probe = probe or DefaultDocumentRepositoryProbe()

    async def save(self, document: Document) -> None:
        """Persist a document, inserting it or updating the row with its id.

        Raises:
            DocumentOwnerNotFoundError: If the owner is not a known user
        """
        try:
            model = None
            if document.id is not None:
                model = await self._session.get(DocumentModel, document.id)
            if model is None:
                model = DocumentModel(id=document.id)
                self._session.add(model)

            model.title = document.title
            model.content = document.content
            model.owner_id = document.owner_id

            # Flush to assign the id and surface foreign key violations here
            await self._session.flush()

        except IntegrityError as e:
            if "fk_documents_owner_id_users" in str(e):
                self._probe.unknown_owner(document.owner_id)
                raise DocumentOwnerNotFoundError(document.owner_id) from e
            raise

        document.id = model.id
        document.created_at = model.created_at
        document.updated_at = model.updated_at
        self._probe.document_saved(model.id, document.owner_id)

    async def get_by_id(self, document_id: int) -> Document | None:
        model = await self._session.get(DocumentModel, document_id)
        if model is None:
            self._probe.document_not_found(document_id)
            return None
        return self._to_domain(model)

    async def list_all(self) -> list[Document]:
        stmt = select(DocumentModel).order_by(
            DocumentModel.created_at.desc(), DocumentModel.id.desc()
        )
        result = await self._session.execute(stmt)
        documents = [self._to_domain(model) for model in result.scalars().all()]

        self._probe.documents_listed(len(documents))
        return documents

    async def list_by_owner(self, owner_id: int) -> list[Document]:
        stmt = (
            select(DocumentModel)
            .where(DocumentModel.owner_id == owner_id)
            .order_by(DocumentModel.created_at.desc(), DocumentModel.id.desc())
        )
        result = await self._session.execute(stmt)
        documents = [self._to_domain(model) for model in result.scalars().all()]

        self._probe.documents_listed(len(documents), owner_id=owner_id)
        return documents

    async def delete(self, document: Document) -> bool:
        """Delete a document row.

        Returns:
            True if deleted, False if not found
        """
        if document.id is None:
            return False

        model = await self._session.get(DocumentModel, document.id)
        if model is None:
            return False

        await self._session.delete(model)
        await self._session.flush()

        self._probe.document_deleted(document.id)
        return True

    @staticmethod
    def _to_domain(model: DocumentModel) -> Document:
        return Document(
            id=model.id,
            title=model.title,
            content=model.content,
            owner_id=model.owner_id,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
