"""Dependency injection for the content bounded context.

Wires the shared connection pool into the backing store, the namespace
provisioner, the content repository and the application service.
"""

from typing import Annotated

from fastapi import Depends

from content.application.observability import (
    DefaultDocContentServiceProbe,
    DocContentServiceProbe,
)
from content.application.services import DocContentService
from content.infrastructure.doc_content_repository import DocContentRepository
from content.infrastructure.postgres_store import PostgresBackingStore
from content.infrastructure.provisioner import NamespaceProvisioner
from infrastructure.database.connection_pool import ConnectionPool
from infrastructure.dependencies import get_connection_pool


def get_backing_store(
    pool: Annotated[ConnectionPool, Depends(get_connection_pool)],
) -> PostgresBackingStore:
    """Get a backing store over the application connection pool.

    Args:
        pool: Application-scoped connection pool

    Returns:
        PostgresBackingStore instance
    """
    return PostgresBackingStore(pool)


def get_namespace_provisioner(
    store: Annotated[PostgresBackingStore, Depends(get_backing_store)],
) -> NamespaceProvisioner:
    """Get NamespaceProvisioner instance."""
    return NamespaceProvisioner(store)


def get_doc_content_repository(
    store: Annotated[PostgresBackingStore, Depends(get_backing_store)],
    provisioner: Annotated[NamespaceProvisioner, Depends(get_namespace_provisioner)],
) -> DocContentRepository:
    """Get DocContentRepository instance."""
    return DocContentRepository(store, provisioner=provisioner)


def get_doc_content_service_probe() -> DocContentServiceProbe:
    """Get DocContentServiceProbe instance.

    Returns:
        DefaultDocContentServiceProbe instance for observability
    """
    return DefaultDocContentServiceProbe()


def get_doc_content_service(
    repository: Annotated[DocContentRepository, Depends(get_doc_content_repository)],
    probe: Annotated[DocContentServiceProbe, Depends(get_doc_content_service_probe)],
) -> DocContentService:
    """Get DocContentService instance.

    Args:
        repository: Tenant-scoped content repository
        probe: Service probe for observability

    Returns:
        DocContentService instance
    """
    return DocContentService(repository=repository, probe=probe)
