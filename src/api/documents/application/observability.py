"""Protocol for document application service observability."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from infrastructure.observability.context import ObservationContext


class DocumentServiceProbe(Protocol):
    """Domain probe for document application service operations."""

    def document_created(self, document_id: int, owner_id: int) -> None:
        """Record that a document was created."""
        ...

    def document_updated(self, document_id: int, fields: list[str]) -> None:
        """Record that a document was updated."""
        ...

    def document_deleted(self, document_id: int) -> None:
        """Record that a document was deleted."""
        ...

    def document_not_found(self, document_id: int) -> None:
        """Record that a requested document does not exist."""
        ...

    def with_context(self, context: ObservationContext) -> DocumentServiceProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultDocumentServiceProbe:
    """Default implementation of DocumentServiceProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultDocumentServiceProbe:
        return DefaultDocumentServiceProbe(logger=self._logger, context=context)

    def document_created(self, document_id: int, owner_id: int) -> None:
        self._logger.info(
            "document_created",
            document_id=document_id,
            owner_id=owner_id,
            **self._get_context_kwargs(),
        )

    def document_updated(self, document_id: int, fields: list[str]) -> None:
        self._logger.info(
            "document_updated",
            document_id=document_id,
            fields=fields,
            **self._get_context_kwargs(),
        )

    def document_deleted(self, document_id: int) -> None:
        self._logger.info(
            "document_deleted",
            document_id=document_id,
            **self._get_context_kwargs(),
        )

    def document_not_found(self, document_id: int) -> None:
        self._logger.debug(
            "document_not_found",
            document_id=document_id,
            **self._get_context_kwargs(),
        )
