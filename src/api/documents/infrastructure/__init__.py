"""Documents infrastructure module."""

from documents.infrastructure.document_repository import DocumentRepository
from documents.infrastructure.models import DocumentModel
from documents.infrastructure.observability import (
    DefaultDocumentRepositoryProbe,
    DocumentRepositoryProbe,
)

__all__ = [
    "DefaultDocumentRepositoryProbe",
    "DocumentModel",
    "DocumentRepository",
    "DocumentRepositoryProbe",
]
