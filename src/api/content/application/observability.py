"""Protocol for document content application service observability.

Defines the interface for domain probes that capture application-level
domain events for content service operations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from infrastructure.observability.context import ObservationContext


class DocContentServiceProbe(Protocol):
    """Domain probe for document content service operations."""

    def content_saved(self, lab_prefix: str, document_id: str) -> None:
        """Record that a document's content was saved."""
        ...

    def content_bulk_saved(self, lab_prefix: str, count: int) -> None:
        """Record that a bulk save completed."""
        ...

    def content_bulk_save_partial(
        self, lab_prefix: str, saved_count: int, failed_document_id: str
    ) -> None:
        """Record that a bulk save persisted only a leading subset."""
        ...

    def content_listed(self, lab_prefix: str, count: int) -> None:
        """Record that content records were listed."""
        ...

    def content_deleted(self, lab_prefix: str, document_id: str) -> None:
        """Record that a document's content was deleted."""
        ...

    def content_not_found(self, lab_prefix: str, document_id: str) -> None:
        """Record that a document to delete did not exist."""
        ...

    def with_context(self, context: ObservationContext) -> DocContentServiceProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultDocContentServiceProbe:
    """Default implementation of DocContentServiceProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        """Get context metadata as kwargs for logging."""
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(
        self, context: ObservationContext
    ) -> DefaultDocContentServiceProbe:
        """Create a new probe with observation context bound."""
        return DefaultDocContentServiceProbe(logger=self._logger, context=context)

    def content_saved(self, lab_prefix: str, document_id: str) -> None:
        self._logger.info(
            "content_saved",
            lab_prefix=lab_prefix,
            document_id=document_id,
            **self._get_context_kwargs(),
        )

    def content_bulk_saved(self, lab_prefix: str, count: int) -> None:
        self._logger.info(
            "content_bulk_saved",
            lab_prefix=lab_prefix,
            count=count,
            **self._get_context_kwargs(),
        )

    def content_bulk_save_partial(
        self, lab_prefix: str, saved_count: int, failed_document_id: str
    ) -> None:
        self._logger.warning(
            "content_bulk_save_partial",
            lab_prefix=lab_prefix,
            saved_count=saved_count,
            failed_document_id=failed_document_id,
            **self._get_context_kwargs(),
        )

    def content_listed(self, lab_prefix: str, count: int) -> None:
        self._logger.debug(
            "content_listed",
            lab_prefix=lab_prefix,
            count=count,
            **self._get_context_kwargs(),
        )

    def content_deleted(self, lab_prefix: str, document_id: str) -> None:
        self._logger.info(
            "content_deleted",
            lab_prefix=lab_prefix,
            document_id=document_id,
            **self._get_context_kwargs(),
        )

    def content_not_found(self, lab_prefix: str, document_id: str) -> None:
        self._logger.debug(
            "content_not_found",
            lab_prefix=lab_prefix,
            document_id=document_id,
            **self._get_context_kwargs(),
        )
