"""Domain probes for content infrastructure observability.

These probes capture domain-significant events related to namespace
provisioning and content persistence, following the Domain Oriented
Observability pattern.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from infrastructure.observability.context import ObservationContext


class BackingStoreProbe(Protocol):
    """Domain probe for raw backing-store statement execution."""

    def statement_failed(
        self, statement: str, error: Exception, pgcode: str | None
    ) -> None:
        """Record that a SQL statement failed."""
        ...

    def connection_verification_failed(self, error: Exception) -> None:
        """Record that a connectivity check failed."""
        ...


class NamespaceProvisionerProbe(Protocol):
    """Domain probe for namespace provisioning."""

    def namespace_ensured(self, namespace: str) -> None:
        """Record that a namespace and its content table are present."""
        ...

    def concurrent_provisioning_detected(self, namespace: str) -> None:
        """Record that another session created the same object concurrently."""
        ...

    def provisioning_failed(self, namespace: str, error: Exception) -> None:
        """Record that provisioning a namespace failed."""
        ...

    def with_context(self, context: ObservationContext) -> NamespaceProvisionerProbe:
        """Create a new probe with observation context bound."""
        ...


class DocContentStoreProbe(Protocol):
    """Domain probe for document content persistence."""

    def content_saved(self, document_id: str) -> None:
        """Record that a document's content was upserted."""
        ...

    def bulk_save_completed(self, count: int) -> None:
        """Record that every entry of a bulk save was persisted."""
        ...

    def bulk_save_interrupted(
        self, saved_count: int, document_id: str, error: Exception
    ) -> None:
        """Record that a bulk save stopped at a failing entry."""
        ...

    def content_retrieved(self, count: int) -> None:
        """Record that content records were read."""
        ...

    def content_deleted(self, document_id: str, deleted: bool) -> None:
        """Record the outcome of a delete."""
        ...

    def storage_failed(self, operation: str, error: Exception) -> None:
        """Record that a content operation failed in the backing store."""
        ...

    def with_context(self, context: ObservationContext) -> DocContentStoreProbe:
        """Create a new probe with observation context bound."""
        ...


class _StructlogProbe:
    """Shared structlog plumbing for the default probes."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        if self._context is None:
            return {}
        return self._context.as_dict()


class DefaultBackingStoreProbe(_StructlogProbe):
    """Default implementation of BackingStoreProbe using structlog."""

    def statement_failed(
        self, statement: str, error: Exception, pgcode: str | None
    ) -> None:
        self._logger.error(
            "backing_store_statement_failed",
            statement=statement,
            pgcode=pgcode,
            error=str(error),
            **self._get_context_kwargs(),
        )

    def connection_verification_failed(self, error: Exception) -> None:
        self._logger.warning(
            "backing_store_verification_failed",
            error=str(error),
            **self._get_context_kwargs(),
        )


class DefaultNamespaceProvisionerProbe(_StructlogProbe):
    """Default implementation of NamespaceProvisionerProbe using structlog."""

    def with_context(
        self, context: ObservationContext
    ) -> DefaultNamespaceProvisionerProbe:
        return DefaultNamespaceProvisionerProbe(logger=self._logger, context=context)

    def namespace_ensured(self, namespace: str) -> None:
        self._logger.debug(
            "namespace_ensured",
            namespace=namespace,
            **self._get_context_kwargs(),
        )

    def concurrent_provisioning_detected(self, namespace: str) -> None:
        self._logger.info(
            "namespace_concurrent_provisioning_detected",
            namespace=namespace,
            **self._get_context_kwargs(),
        )

    def provisioning_failed(self, namespace: str, error: Exception) -> None:
        self._logger.error(
            "namespace_provisioning_failed",
            namespace=namespace,
            error=str(error),
            **self._get_context_kwargs(),
        )


class DefaultDocContentStoreProbe(_StructlogProbe):
    """Default implementation of DocContentStoreProbe using structlog."""

    def with_context(self, context: ObservationContext) -> DefaultDocContentStoreProbe:
        return DefaultDocContentStoreProbe(logger=self._logger, context=context)

    def content_saved(self, document_id: str) -> None:
        self._logger.info(
            "doc_content_saved",
            document_id=document_id,
            **self._get_context_kwargs(),
        )

    def bulk_save_completed(self, count: int) -> None:
        self._logger.info(
            "doc_content_bulk_saved",
            count=count,
            **self._get_context_kwargs(),
        )

    def bulk_save_interrupted(
        self, saved_count: int, document_id: str, error: Exception
    ) -> None:
        self._logger.error(
            "doc_content_bulk_save_interrupted",
            saved_count=saved_count,
            document_id=document_id,
            error=str(error),
            **self._get_context_kwargs(),
        )

    def content_retrieved(self, count: int) -> None:
        self._logger.debug(
            "doc_content_retrieved",
            count=count,
            **self._get_context_kwargs(),
        )

    def content_deleted(self, document_id: str, deleted: bool) -> None:
        self._logger.info(
            "doc_content_deleted",
            document_id=document_id,
            deleted=deleted,
            **self._get_context_kwargs(),
        )

    def storage_failed(self, operation: str, error: Exception) -> None:
        self._logger.error(
            "doc_content_storage_failed",
            operation=operation,
            error=str(error),
            **self._get_context_kwargs(),
        )
