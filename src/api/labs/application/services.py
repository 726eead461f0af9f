"""Lab application service for the labs bounded context.

Handles lab onboarding and registry management. Onboarding also creates the
lab's document content namespace.
"""

from __future__ import annotations

import asyncio
from datetime import date
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from content.ports.exceptions import ProvisioningError
from labs.application.observability import DefaultLabServiceProbe, LabServiceProbe
from labs.domain.aggregates import Lab
from labs.domain.value_objects import DocumentSettings, LabStatus
from labs.ports.exceptions import DuplicateLabPrefixError
from labs.ports.repositories import ILabRepository, INamespaceProvisioner
from shared_kernel.lab_prefix import LabPrefix


class LabService:
    """Application service for lab management.

    Registry writes run in a transaction on the injected session. Namespace
    provisioning is blocking and runs in a worker thread after the lab row
    is committed.
    """

    def __init__(
        self,
        lab_repository: ILabRepository,
        provisioner: INamespaceProvisioner,
        session: AsyncSession,
        probe: LabServiceProbe | None = None,
    ):
        """Initialize LabService with dependencies.

        Args:
            lab_repository: Repository for lab persistence
            provisioner: Creates the lab's content namespace
            session: Database session for transaction management
            probe: Optional domain probe for observability
        """
        self._lab_repository = lab_repository
        self._provisioner = provisioner
        self._session = session
        self._probe = probe or DefaultLabServiceProbe()

    async def onboard_lab(self, prefix: str, **profile: Any) -> Lab:
        """Register a new lab and provision its namespace.

        The lab stays registered when provisioning fails; the namespace is
        created again on first content access.

        Args:
            prefix: The lab prefix (tenant key)
            **profile: Profile fields and optional document settings

        Returns:
            The onboarded Lab

        Raises:
            InvalidLabPrefixError: If the prefix fails validation
            DuplicateLabPrefixError: If the prefix is taken in any case
            ProvisioningError: If the lab was saved but its namespace was not
        """
        lab = Lab.onboard(prefix, **profile)

        async with self._session.begin():
            try:
                if await self._lab_repository.exists(lab.document_id_prefix):
                    raise DuplicateLabPrefixError(lab.document_id_prefix)
                await self._lab_repository.save(lab)
            except DuplicateLabPrefixError:
                self._probe.duplicate_lab_prefix(prefix=lab.document_id_prefix)
                raise

        self._probe.lab_onboarded(prefix=lab.document_id_prefix, name=lab.name)

        try:
            namespace = await asyncio.to_thread(
                self._provisioner.ensure, lab.document_id_prefix
            )
        except ProvisioningError as e:
            self._probe.namespace_provisioning_failed(
                prefix=lab.document_id_prefix, error=e
            )
            raise

        self._probe.namespace_provisioned(
            prefix=lab.document_id_prefix, namespace=namespace.name
        )
        return lab

    async def get_lab(self, prefix: str) -> Lab | None:
        """Retrieve a lab by prefix (case-insensitive)."""
        lab = await self._lab_repository.get_by_prefix(prefix)
        if lab is None:
            self._probe.lab_not_found(prefix=prefix)
        return lab

    async def list_labs(self) -> list[Lab]:
        """List all labs, newest first."""
        return await self._lab_repository.list_all()

    async def prefix_exists(self, prefix: str) -> bool:
        """Check whether a prefix is taken, ignoring case and whitespace.

        Raises:
            InvalidLabPrefixError: If the prefix fails validation
        """
        return await self._lab_repository.exists(LabPrefix.from_string(prefix).value)

    async def update_lab(self, prefix: str, **changes: Any) -> Lab | None:
        """Apply a partial profile update.

        Returns:
            The updated Lab, or None if not found
        """
        async with self._session.begin():
            lab = await self._lab_repository.get_by_prefix(prefix)
            if lab is None:
                self._probe.lab_not_found(prefix=prefix)
                return None

            lab.update_profile(**changes)
            await self._lab_repository.save(lab)

        self._probe.lab_updated(prefix=lab.document_id_prefix, fields=sorted(changes))
        return lab

    async def set_lab_status(self, prefix: str, status: LabStatus) -> Lab | None:
        """Activate or deactivate a lab.

        Returns:
            The updated Lab, or None if not found
        """
        async with self._session.begin():
            lab = await self._lab_repository.get_by_prefix(prefix)
            if lab is None:
                self._probe.lab_not_found(prefix=prefix)
                return None

            lab.set_status(status)
            await self._lab_repository.save(lab)

        self._probe.lab_status_changed(
            prefix=lab.document_id_prefix, status=lab.lab_status.value
        )
        return lab

    async def get_document_settings(self, prefix: str) -> DocumentSettings | None:
        """Return the lab's document issue settings, or None if not found."""
        lab = await self.get_lab(prefix)
        return lab.document_settings if lab else None

    async def update_document_settings(
        self,
        prefix: str,
        issue_no: str | None = None,
        issue_date: date | None = None,
    ) -> DocumentSettings | None:
        """Update the lab's document issue settings.

        Returns:
            The resulting settings, or None if not found
        """
        async with self._session.begin():
            lab = await self._lab_repository.get_by_prefix(prefix)
            if lab is None:
                self._probe.lab_not_found(prefix=prefix)
                return None

            lab.update_document_settings(issue_no=issue_no, issue_date=issue_date)
            await self._lab_repository.save(lab)

        self._probe.document_settings_updated(prefix=lab.document_id_prefix)
        return lab.document_settings

    async def delete_lab(self, prefix: str) -> bool:
        """Delete a lab from the registry.

        The lab's namespace and its content are left in place.

        Returns:
            True if deleted, False if not found
        """
        async with self._session.begin():
            lab = await self._lab_repository.get_by_prefix(prefix)
            if lab is None:
                self._probe.lab_not_found(prefix=prefix)
                return False

            deleted = await self._lab_repository.delete(lab)

        if deleted:
            self._probe.lab_deleted(prefix=lab.document_id_prefix)
        return deleted
