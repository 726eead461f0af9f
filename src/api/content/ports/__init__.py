"""Content ports (interfaces) module."""

from content.ports.exceptions import (
    BulkSaveError,
    ContentNotSerializableError,
    DocContentError,
    InvalidDocumentIdError,
    ProvisioningError,
    StorageError,
)
from content.ports.protocols import BackingStore, TenantRegistry

__all__ = [
    "BackingStore",
    "BulkSaveError",
    "ContentNotSerializableError",
    "DocContentError",
    "InvalidDocumentIdError",
    "ProvisioningError",
    "StorageError",
    "TenantRegistry",
]
