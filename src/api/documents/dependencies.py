"""Dependency injection for the documents bounded context."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from documents.application.observability import (
    DefaultDocumentServiceProbe,
    DocumentServiceProbe,
)
from documents.application.services import DocumentService
from documents.infrastructure.document_repository import DocumentRepository
from infrastructure.database.dependencies import get_session


def get_document_repository(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> DocumentRepository:
    return DocumentRepository(session=session)


def get_document_service_probe() -> DocumentServiceProbe:
    return DefaultDocumentServiceProbe()


def get_document_service(
    session: Annotated[AsyncSession, Depends(get_session)],
    document_repository: Annotated[
        DocumentRepository, Depends(get_document_repository)
    ],
    probe: Annotated[DocumentServiceProbe, Depends(get_document_service_probe)],
) -> DocumentService:
    """Get DocumentService instance sharing the request's session."""
    return DocumentService(
        document_repository=document_repository,
        session=session,
        probe=probe,
    )
