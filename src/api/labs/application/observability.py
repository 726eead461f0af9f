"""Protocol for lab application service observability.

Defines the interface for domain probes that capture application-level
domain events for lab service operations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from infrastructure.observability.context import ObservationContext


class LabServiceProbe(Protocol):
    """Domain probe for lab application service operations."""

    def lab_onboarded(self, prefix: str, name: str) -> None:
        """Record that a lab was onboarded."""
        ...

    def namespace_provisioned(self, prefix: str, namespace: str) -> None:
        """Record that a newly onboarded lab's namespace was created."""
        ...

    def namespace_provisioning_failed(self, prefix: str, error: Exception) -> None:
        """Record that the lab was saved but its namespace was not created."""
        ...

    def duplicate_lab_prefix(self, prefix: str) -> None:
        """Record that onboarding was rejected for a taken prefix."""
        ...

    def lab_updated(self, prefix: str, fields: list[str]) -> None:
        """Record that a lab's profile was updated."""
        ...

    def lab_status_changed(self, prefix: str, status: str) -> None:
        """Record that a lab's status changed."""
        ...

    def document_settings_updated(self, prefix: str) -> None:
        """Record that a lab's document settings were updated."""
        ...

    def lab_deleted(self, prefix: str) -> None:
        """Record that a lab was deleted and its namespace orphaned."""
        ...

    def lab_not_found(self, prefix: str) -> None:
        """Record that a lab was not found."""
        ...

    def with_context(self, context: ObservationContext) -> LabServiceProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultLabServiceProbe:
    """Default implementation of LabServiceProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultLabServiceProbe:
        """Create a new probe with observation context bound."""
        return DefaultLabServiceProbe(logger=self._logger, context=context)

    def lab_onboarded(self, prefix: str, name: str) -> None:
        self._logger.info(
            "lab_onboarded",
            lab_prefix=prefix,
            name=name,
            **self._get_context_kwargs(),
        )

    def namespace_provisioned(self, prefix: str, namespace: str) -> None:
        self._logger.info(
            "lab_namespace_provisioned",
            lab_prefix=prefix,
            namespace=namespace,
            **self._get_context_kwargs(),
        )

    def namespace_provisioning_failed(self, prefix: str, error: Exception) -> None:
        self._logger.error(
            "lab_namespace_provisioning_failed",
            lab_prefix=prefix,
            error=str(error),
            **self._get_context_kwargs(),
        )

    def duplicate_lab_prefix(self, prefix: str) -> None:
        self._logger.warning(
            "lab_onboarding_duplicate_prefix",
            lab_prefix=prefix,
            **self._get_context_kwargs(),
        )

    def lab_updated(self, prefix: str, fields: list[str]) -> None:
        self._logger.info(
            "lab_updated",
            lab_prefix=prefix,
            fields=fields,
            **self._get_context_kwargs(),
        )

    def lab_status_changed(self, prefix: str, status: str) -> None:
        self._logger.info(
            "lab_status_changed",
            lab_prefix=prefix,
            lab_status=status,
            **self._get_context_kwargs(),
        )

    def document_settings_updated(self, prefix: str) -> None:
        self._logger.info(
            "lab_document_settings_updated",
            lab_prefix=prefix,
            **self._get_context_kwargs(),
        )

    def lab_deleted(self, prefix: str) -> None:
        self._logger.info(
            "lab_deleted",
            lab_prefix=prefix,
            **self._get_context_kwargs(),
        )

    def lab_not_found(self, prefix: str) -> None:
        self._logger.debug(
            "lab_not_found",
            lab_prefix=prefix,
            **self._get_context_kwargs(),
        )
