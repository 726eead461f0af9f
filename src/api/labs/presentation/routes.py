"""HTTP routes for lab onboarding and registry management."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from content.ports.exceptions import ProvisioningError
from labs.application.services import LabService
from labs.dependencies import get_lab_service
from labs.ports.exceptions import DuplicateLabPrefixError
from labs.presentation.models import (
    CheckPrefixRequest,
    CheckPrefixResponse,
    DocumentSettingsRequest,
    DocumentSettingsResponse,
    LabResponse,
    OnboardLabRequest,
    UpdateLabRequest,
    UpdateLabStatusRequest,
)
from shared_kernel.lab_prefix import InvalidLabPrefixError

router = APIRouter(
    prefix="/labs",
    tags=["labs"],
)


def _lab_not_found(prefix: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Lab {prefix} not found",
    )


@router.post(
    "/onboarding",
    status_code=status.HTTP_201_CREATED,
)
async def onboard_lab(
    request: OnboardLabRequest,
    service: Annotated[LabService, Depends(get_lab_service)],
) -> LabResponse:
    """Onboard a new lab and create its document content namespace.

    Args:
        request: Lab onboarding request
        service: Lab service for orchestration

    Returns:
        LabResponse with the onboarded lab

    Raises:
        HTTPException: 400 if the prefix is invalid
        HTTPException: 409 if the prefix is already taken
        HTTPException: 500 if the lab was saved but its namespace was not
            created, or for unexpected errors
    """
    try:
        lab = await service.onboard_lab(
            request.document_id_prefix, **request.profile()
        )
        return LabResponse.from_domain(lab)

    except InvalidLabPrefixError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e
    except DuplicateLabPrefixError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="A lab with this prefix already exists",
        ) from e
    except ProvisioningError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Lab saved, but failed to create its storage namespace",
        ) from e
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to onboard lab",
        ) from e


@router.get("")
async def list_labs(
    service: Annotated[LabService, Depends(get_lab_service)],
) -> list[LabResponse]:
    """List all labs, newest first."""
    try:
        labs = await service.list_labs()
        return [LabResponse.from_domain(lab) for lab in labs]

    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to list labs",
        ) from e


@router.post("/check-prefix")
async def check_prefix(
    request: CheckPrefixRequest,
    service: Annotated[LabService, Depends(get_lab_service)],
) -> CheckPrefixResponse:
    """Check whether a prefix is already taken (case-insensitive)."""
    try:
        exists = await service.prefix_exists(request.prefix)
        return CheckPrefixResponse(exists=exists)

    except InvalidLabPrefixError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to check prefix",
        ) from e


@router.get("/{prefix}")
async def get_lab(
    prefix: str,
    service: Annotated[LabService, Depends(get_lab_service)],
) -> LabResponse:
    """Get lab detail by prefix.

    Raises:
        HTTPException: 404 if the lab is not found
        HTTPException: 500 for unexpected errors
    """
    try:
        lab = await service.get_lab(prefix)
        if lab is None:
            raise _lab_not_found(prefix)
        return LabResponse.from_domain(lab)

    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve lab",
        ) from e


@router.put("/{prefix}")
async def update_lab(
    prefix: str,
    request: UpdateLabRequest,
    service: Annotated[LabService, Depends(get_lab_service)],
) -> LabResponse:
    """Update a lab's profile. Only fields present in the body change.

    Raises:
        HTTPException: 404 if the lab is not found
        HTTPException: 500 for unexpected errors
    """
    try:
        lab = await service.update_lab(prefix, **request.changes())
        if lab is None:
            raise _lab_not_found(prefix)
        return LabResponse.from_domain(lab)

    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update lab",
        ) from e


@router.patch("/{prefix}/status")
async def update_lab_status(
    prefix: str,
    request: UpdateLabStatusRequest,
    service: Annotated[LabService, Depends(get_lab_service)],
) -> LabResponse:
    """Activate or deactivate a lab."""
    try:
        lab = await service.set_lab_status(prefix, request.lab_status)
        if lab is None:
            raise _lab_not_found(prefix)
        return LabResponse.from_domain(lab)

    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update lab status",
        ) from e


@router.get("/{prefix}/document-settings")
async def get_document_settings(
    prefix: str,
    service: Annotated[LabService, Depends(get_lab_service)],
) -> DocumentSettingsResponse:
    """Get a lab's document issue settings."""
    try:
        settings = await service.get_document_settings(prefix)
        if settings is None:
            raise _lab_not_found(prefix)
        return DocumentSettingsResponse.from_domain(settings)

    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve document settings",
        ) from e


@router.put("/{prefix}/document-settings")
async def update_document_settings(
    prefix: str,
    request: DocumentSettingsRequest,
    service: Annotated[LabService, Depends(get_lab_service)],
) -> DocumentSettingsResponse:
    """Update a lab's document issue settings."""
    try:
        settings = await service.update_document_settings(
            prefix, issue_no=request.issue_no, issue_date=request.issue_date
        )
        if settings is None:
            raise _lab_not_found(prefix)
        return DocumentSettingsResponse.from_domain(settings)

    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update document settings",
        ) from e


@router.delete(
    "/{prefix}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_model=None,
    responses={
        204: {"description": "Lab deleted; its content namespace is kept"},
        404: {"description": "Lab not found"},
        500: {"description": "Internal server error"},
    },
)
async def delete_lab(
    prefix: str,
    service: Annotated[LabService, Depends(get_lab_service)],
) -> None:
    """Delete a lab from the registry.

    The lab's document content namespace is not dropped.
    """
    try:
        deleted = await service.delete_lab(prefix)
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete lab",
        ) from e

    if not deleted:
        raise _lab_not_found(prefix)
