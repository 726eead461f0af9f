"""Dependency injection for the labs bounded context."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from content.dependencies import get_namespace_provisioner
from content.infrastructure.provisioner import NamespaceProvisioner
from infrastructure.database.dependencies import get_session
from labs.application.observability import DefaultLabServiceProbe, LabServiceProbe
from labs.application.services import LabService
from labs.infrastructure.lab_repository import LabRepository


def get_lab_repository(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> LabRepository:
    """Get LabRepository instance.

    The repository is also the tenant registry consulted by content routes.

    Args:
        session: Async database session

    Returns:
        LabRepository instance
    """
    return LabRepository(session=session)


def get_lab_service_probe() -> LabServiceProbe:
    """Get LabServiceProbe instance.

    Returns:
        DefaultLabServiceProbe instance for observability
    """
    return DefaultLabServiceProbe()


def get_lab_service(
    session: Annotated[AsyncSession, Depends(get_session)],
    lab_repository: Annotated[LabRepository, Depends(get_lab_repository)],
    provisioner: Annotated[NamespaceProvisioner, Depends(get_namespace_provisioner)],
    probe: Annotated[LabServiceProbe, Depends(get_lab_service_probe)],
) -> LabService:
    """Get LabService instance.

    Args:
        session: Async database session (shared with the repository)
        lab_repository: Lab repository
        provisioner: Namespace provisioner used on onboarding
        probe: Service probe for observability

    Returns:
        LabService instance
    """
    return LabService(
        lab_repository=lab_repository,
        provisioner=provisioner,
        session=session,
        probe=probe,
    )
