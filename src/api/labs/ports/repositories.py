"""Repository and collaborator protocols (ports) for the labs context."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from labs.domain.aggregates import Lab

if TYPE_CHECKING:
    from content.domain.namespace import TenantNamespace


@runtime_checkable
class ILabRepository(Protocol):
    """Repository for Lab aggregate persistence.

    All prefix lookups are case-insensitive. This protocol is also the
    tenant registry consulted by the content routes.
    """

    async def save(self, lab: Lab) -> None:
        """Insert a new lab or update an existing one.

        Raises:
            DuplicateLabPrefixError: If another lab already uses the prefix
        """
        ...

    async def get_by_prefix(self, prefix: str) -> Lab | None:
        """Retrieve a lab by prefix, or None if not registered."""
        ...

    async def exists(self, prefix: str) -> bool:
        """Return True if a lab with this prefix is registered."""
        ...

    async def list_all(self) -> list[Lab]:
        """Return every lab, newest first."""
        ...

    async def delete(self, lab: Lab) -> bool:
        """Delete a lab.

        Returns:
            True if deleted, False if not found
        """
        ...


@runtime_checkable
class INamespaceProvisioner(Protocol):
    """Creates a lab's storage namespace; blocking and idempotent."""

    def ensure(self, lab_prefix: str) -> TenantNamespace:
        """Ensure the namespace exists.

        Raises:
            ProvisioningError: If the namespace cannot be created
        """
        ...
