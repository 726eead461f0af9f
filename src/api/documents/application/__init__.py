"""Documents application layer."""

from documents.application.observability import (
    DefaultDocumentServiceProbe,
    DocumentServiceProbe,
)
from documents.application.services import DocumentService

__all__ = [
    "DefaultDocumentServiceProbe",
    "DocumentService",
    "DocumentServiceProbe",
]
