"""Exceptions raised by the document content store.

All storage failures propagate to the caller unmodified in meaning; the
store performs no retry of its own, so each of these is safe to retry.
"""


class DocContentError(Exception):
    """Base exception for document content operations."""

    pass


class ProvisioningError(DocContentError):
    """Raised when a lab namespace or its content table cannot be created.

    The requested operation is aborted before any content is read or written.
    """

    def __init__(self, message: str, namespace: str):
        super().__init__(message)
        self.namespace = namespace


class StorageError(DocContentError):
    """Raised when reading, writing or deleting content fails."""

    pass


class BulkSaveError(StorageError):
    """Raised when a bulk save stops at a failing entry.

    Entries saved before the failure stay persisted; nothing is rolled back.

    Attributes:
        saved_count: Number of entries persisted before the failure
        document_id: Document id of the entry that failed
    """

    def __init__(self, message: str, saved_count: int, document_id: str):
        super().__init__(message)
        self.saved_count = saved_count
        self.document_id = document_id


class ContentNotSerializableError(DocContentError, ValueError):
    """Raised when a content payload cannot be serialized to JSON."""

    pass


class InvalidDocumentIdError(DocContentError, ValueError):
    """Raised when a document id is empty or longer than the id column."""

    def __init__(self, message: str, document_id: str):
        super().__init__(message)
        self.document_id = document_id
