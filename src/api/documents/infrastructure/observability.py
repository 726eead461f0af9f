"""Domain probe for document repository operations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from infrastructure.observability.context import ObservationContext


class DocumentRepositoryProbe(Protocol):
    """Domain probe for document repository operations."""

    def document_saved(self, document_id: int, owner_id: int) -> None:
        """Record that a document was successfully saved."""
        ...

    def document_not_found(self, document_id: int) -> None:
        """Record that a document was not found."""
        ...

    def documents_listed(self, count: int, owner_id: int | None = None) -> None:
        """Record that documents were listed."""
        ...

    def document_deleted(self, document_id: int) -> None:
        """Record that a document was deleted."""
        ...

    def unknown_owner(self, owner_id: int) -> None:
        """Record that a save named an owner that does not exist."""
        ...

    def with_context(self, context: ObservationContext) -> DocumentRepositoryProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultDocumentRepositoryProbe:
    """Default implementation of DocumentRepositoryProbe using structlog."""

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

    def with_context(
        self, context: ObservationContext
    ) -> DefaultDocumentRepositoryProbe:
        return DefaultDocumentRepositoryProbe(logger=self._logger, context=context)

    def document_saved(self, document_id: int, owner_id: int) -> None:
        self._logger.info(
            "document_saved",
            document_id=document_id,
            owner_id=owner_id,
            **self._get_context_kwargs(),
        )

    def document_not_found(self, document_id: int) -> None:
        self._logger.debug(
            "document_not_found",
            document_id=document_id,
            **self._get_context_kwargs(),
        )

    def documents_listed(self, count: int, owner_id: int | None = None) -> None:
        self._logger.debug(
            "documents_listed",
            count=count,
            owner_id=owner_id,
            **self._get_context_kwargs(),
        )

    def document_deleted(self, document_id: int) -> None:
        self._logger.info(
            "document_deleted",
            document_id=document_id,
            **self._get_context_kwargs(),
        )

    def unknown_owner(self, owner_id: int) -> None:
        self._logger.warning(
            "document_owner_not_found",
            owner_id=owner_id,
            **self._get_context_kwargs(),
        )
