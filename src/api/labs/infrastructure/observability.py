"""Domain probe for lab repository operations.

Following Domain-Oriented Observability patterns, this probe captures
domain-significant events related to lab registry persistence.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from infrastructure.observability.context import ObservationContext


class LabRepositoryProbe(Protocol):
    """Domain probe for lab repository operations."""

    def lab_saved(self, prefix: str) -> None:
        """Record that a lab was successfully saved."""
        ...

    def lab_retrieved(self, prefix: str) -> None:
        """Record that a lab was retrieved."""
        ...

    def lab_not_found(self, prefix: str) -> None:
        """Record that a lab was not found."""
        ...

    def labs_listed(self, count: int) -> None:
        """Record that labs were listed."""
        ...

    def lab_deleted(self, prefix: str) -> None:
        """Record that a lab was deleted."""
        ...

    def duplicate_lab_prefix(self, prefix: str) -> None:
        """Record that a duplicate lab prefix was detected."""
        ...

    def with_context(self, context: ObservationContext) -> LabRepositoryProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultLabRepositoryProbe:
    """Default implementation of LabRepositoryProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultLabRepositoryProbe:
        """Create a new probe with observation context bound."""
        return DefaultLabRepositoryProbe(logger=self._logger, context=context)

    def lab_saved(self, prefix: str) -> None:
        self._logger.info(
            "lab_saved",
            lab_prefix=prefix,
            **self._get_context_kwargs(),
        )

    def lab_retrieved(self, prefix: str) -> None:
        self._logger.debug(
            "lab_retrieved",
            lab_prefix=prefix,
            **self._get_context_kwargs(),
        )

    def lab_not_found(self, prefix: str) -> None:
        self._logger.debug(
            "lab_not_found",
            lab_prefix=prefix,
            **self._get_context_kwargs(),
        )

    def labs_listed(self, count: int) -> None:
        self._logger.debug(
            "labs_listed",
            count=count,
            **self._get_context_kwargs(),
        )

    def lab_deleted(self, prefix: str) -> None:
        self._logger.info(
            "lab_deleted",
            lab_prefix=prefix,
            **self._get_context_kwargs(),
        )

    def duplicate_lab_prefix(self, prefix: str) -> None:
        self._logger.warning(
            "duplicate_lab_prefix",
            lab_prefix=prefix,
            **self._get_context_kwargs(),
        )
