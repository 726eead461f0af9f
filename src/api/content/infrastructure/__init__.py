"""Content infrastructure module.

Contains the PostgreSQL backing store, the namespace provisioner, and the
document content repository.
"""

from content.infrastructure.doc_content_repository import DocContentRepository
from content.infrastructure.postgres_store import PostgresBackingStore
from content.infrastructure.provisioner import NamespaceProvisioner
from content.infrastructure.queries import DocContentQueries

__all__ = [
    "DocContentQueries",
    "DocContentRepository",
    "NamespaceProvisioner",
    "PostgresBackingStore",
]
