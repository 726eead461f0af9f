"""PostgreSQL implementation of ILabRepository.

This repository manages the lab registry in the public schema. It does not
touch lab namespaces; those are managed by the content context.
"""

from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from labs.domain.aggregates import Lab
from labs.domain.value_objects import LabStatus, LabType
from labs.infrastructure.models import LabModel
from labs.infrastructure.observability import (
    DefaultLabRepositoryProbe,
    LabRepositoryProbe,
)
from labs.ports.exceptions import DuplicateLabPrefixError
from labs.ports.repositories import ILabRepository
from shared_kernel.lab_prefix import LabPrefix


class LabRepository(ILabRepository):
    """Repository managing PostgreSQL storage for Lab aggregates.

    Transactions are owned by the caller; this repository only flushes.
    """

    def __init__(
        self,
        session: AsyncSession,
        probe: LabRepositoryProbe | None = None,
    ) -> None:
        """Initialize repository with database session.

        Args:
            session: AsyncSession from FastAPI dependency injection
            probe: Optional domain probe for observability
        """
        self._session = session
        self._probe = probe or DefaultLabRepositoryProbe()

    async def save(self, lab: Lab) -> None:
        """Persist a lab, inserting it or updating the row with its prefix.

        Raises:
            DuplicateLabPrefixError: If another lab uses the prefix in any case
        """
        existing = await self._get_model(lab.document_id_prefix)
        if existing and existing.document_id_prefix != lab.document_id_prefix:
            self._probe.duplicate_lab_prefix(lab.document_id_prefix)
            raise DuplicateLabPrefixError(lab.document_id_prefix)

        try:
            if existing is None:
                model = LabModel(document_id_prefix=lab.document_id_prefix)
                self._apply(model, lab)
                self._session.add(model)
            else:
                model = existing
                self._apply(model, lab)

            # Flush to surface unique index violations here
            await self._session.flush()

        except IntegrityError as e:
            if "ix_labs_document_id_prefix_lower" in str(e) or "labs_pkey" in str(e):
                self._probe.duplicate_lab_prefix(lab.document_id_prefix)
                raise DuplicateLabPrefixError(lab.document_id_prefix) from e
            raise

        lab.created_at = model.created_at
        lab.updated_at = model.updated_at
        self._probe.lab_saved(lab.document_id_prefix)

    async def get_by_prefix(self, prefix: str) -> Lab | None:
        """Fetch a lab by prefix, ignoring case.

        Args:
            prefix: The lab prefix

        Returns:
            The Lab aggregate, or None if not found
        """
        model = await self._get_model(prefix)
        if model is None:
            self._probe.lab_not_found(prefix)
            return None

        lab = self._to_domain(model)
        self._probe.lab_retrieved(lab.document_id_prefix)
        return lab

    async def exists(self, prefix: str) -> bool:
        """Return True if a lab is registered under ``prefix`` in any case."""
        stmt = select(func.count()).select_from(LabModel).where(
            func.lower(LabModel.document_id_prefix) == _lookup_key(prefix)
        )
        result = await self._session.execute(stmt)
        return (result.scalar_one() or 0) > 0

    async def list_all(self) -> list[Lab]:
        """Fetch all labs, newest first.

        Returns:
            List of all Lab aggregates
        """
        stmt = select(LabModel).order_by(LabModel.created_at.desc())
        result = await self._session.execute(stmt)
        labs = [self._to_domain(model) for model in result.scalars().all()]

        self._probe.labs_listed(len(labs))
        return labs

    async def delete(self, lab: Lab) -> bool:
        """Delete a lab row. The lab's namespace is left in place.

        Returns:
            True if deleted, False if not found
        """
        stmt = select(LabModel).where(
            LabModel.document_id_prefix == lab.document_id_prefix
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return False

        await self._session.delete(model)
        await self._session.flush()

        self._probe.lab_deleted(lab.document_id_prefix)
        return True

    async def _get_model(self, prefix: str) -> LabModel | None:
        stmt = select(LabModel).where(
            func.lower(LabModel.document_id_prefix) == _lookup_key(prefix)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    def _apply(model: LabModel, lab: Lab) -> None:
        model.name = lab.name
        model.address = lab.address
        model.city = lab.city
        model.state = lab.state
        model.country = lab.country
        model.postal_code = lab.postal_code
        model.type = LabType(lab.type).value
        model.lab_category = lab.lab_category
        model.operating_hours = lab.operating_hours
        model.website_url = lab.website_url
        model.director_name = lab.director_name
        model.quality_manager_name = lab.quality_manager_name
        model.selected_departments = list(lab.selected_departments)
        model.issue_no = lab.issue_no
        model.issue_date = lab.issue_date
        model.lab_status = LabStatus(lab.lab_status).value

    @staticmethod
    def _to_domain(model: LabModel) -> Lab:
        return Lab(
            prefix=LabPrefix(model.document_id_prefix),
            name=model.name,
            address=model.address,
            city=model.city,
            state=model.state,
            country=model.country,
            postal_code=model.postal_code,
            type=LabType(model.type),
            lab_category=model.lab_category,
            operating_hours=model.operating_hours,
            website_url=model.website_url,
            director_name=model.director_name,
            quality_manager_name=model.quality_manager_name,
            selected_departments=list(model.selected_departments or []),
            issue_no=model.issue_no,
            issue_date=model.issue_date,
            lab_status=LabStatus(model.lab_status),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )


def _lookup_key(prefix: str) -> str:
    return (prefix or "").strip().lower()
