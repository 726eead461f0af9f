"""Documents ports (interfaces) module."""

from documents.ports.exceptions import DocumentOwnerNotFoundError
from documents.ports.repositories import IDocumentRepository

__all__ = [
    "DocumentOwnerNotFoundError",
    "IDocumentRepository",
]
