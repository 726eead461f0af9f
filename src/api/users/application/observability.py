"""Protocol for user application service observability.

Defines the interface for domain probes that capture application-level
domain events for user service operations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from infrastructure.observability.context import ObservationContext


class UserServiceProbe(Protocol):
    """Domain probe for user application service operations."""

    def user_created(self, user_id: int, email: str, role: str) -> None:
        """Record that a user account was created."""
        ...

    def duplicate_user_email(self, email: str) -> None:
        """Record that account creation was rejected for a taken email."""
        ...

    def user_updated(self, email: str, fields: list[str]) -> None:
        """Record that a user account was updated."""
        ...

    def user_status_changed(self, user_id: int, is_active: bool) -> None:
        """Record that a user was activated or deactivated."""
        ...

    def user_deleted(self, email: str) -> None:
        """Record that a user account was deleted."""
        ...

    def last_super_admin_protected(self, email: str) -> None:
        """Record that deleting the last super admin was refused."""
        ...

    def user_not_found(self, lookup: int | str) -> None:
        """Record that a user was not found."""
        ...

    def with_context(self, context: ObservationContext) -> UserServiceProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultUserServiceProbe:
    """Default implementation of UserServiceProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultUserServiceProbe:
        """Create a new probe with observation context bound."""
        return DefaultUserServiceProbe(logger=self._logger, context=context)

    def user_created(self, user_id: int, email: str, role: str) -> None:
        self._logger.info(
            "user_created",
            user_id=user_id,
            email=email,
            role=role,
            **self._get_context_kwargs(),
        )

    def duplicate_user_email(self, email: str) -> None:
        self._logger.warning(
            "user_creation_duplicate_email",
            email=email,
            **self._get_context_kwargs(),
        )

    def user_updated(self, email: str, fields: list[str]) -> None:
        self._logger.info(
            "user_updated",
            email=email,
            fields=fields,
            **self._get_context_kwargs(),
        )

    def user_status_changed(self, user_id: int, is_active: bool) -> None:
        self._logger.info(
            "user_status_changed",
            user_id=user_id,
            is_active=is_active,
            **self._get_context_kwargs(),
        )

    def user_deleted(self, email: str) -> None:
        self._logger.info(
            "user_deleted",
            email=email,
            **self._get_context_kwargs(),
        )

    def last_super_admin_protected(self, email: str) -> None:
        self._logger.warning(
            "last_super_admin_delete_refused",
            email=email,
            **self._get_context_kwargs(),
        )

    def user_not_found(self, lookup: int | str) -> None:
        self._logger.debug(
            "user_not_found",
            lookup=lookup,
            **self._get_context_kwargs(),
        )
