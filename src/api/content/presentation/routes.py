"""HTTP routes for per-lab document content.

Every route checks the lab against the registry before the content store
is touched. Store calls block on the connection pool, so they run in a
worker thread.
"""

from __future__ import annotations

import asyncio
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from content.application.services import DocContentService
from content.dependencies import get_doc_content_service
from content.ports.exceptions import (
    BulkSaveError,
    ContentNotSerializableError,
    InvalidDocumentIdError,
    ProvisioningError,
)
from content.ports.protocols import TenantRegistry
from content.presentation.models import (
    BulkSaveDocContentRequest,
    BulkSaveResponse,
    DocContentResponse,
    SaveDocContentRequest,
)
from labs.dependencies import get_lab_repository
from labs.ports.exceptions import LabNotFoundError
from shared_kernel.lab_prefix import InvalidLabPrefixError, LabPrefix

router = APIRouter(
    prefix="/doc-content",
    tags=["doc-content"],
)


async def _require_lab(registry: TenantRegistry, lab_prefix: str) -> None:
    prefix = LabPrefix.from_string(lab_prefix)
    if not await registry.exists(prefix.value):
        raise LabNotFoundError(prefix.value)


def _to_http_exception(error: Exception, action: str) -> HTTPException:
    """Translate a content or registry error into an HTTP error."""
    if isinstance(error, InvalidLabPrefixError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))
    if isinstance(error, LabNotFoundError):
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Lab with prefix '{error.prefix}' does not exist",
        )
    if isinstance(error, (ContentNotSerializableError, InvalidDocumentIdError)):
        return HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(error)
        )
    if isinstance(error, BulkSaveError):
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={
                "message": f"Failed to {action}",
                "saved_count": error.saved_count,
                "failed_document_id": error.document_id,
            },
        )
    if isinstance(error, ProvisioningError):
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to provision lab storage for {action}",
        )
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Failed to {action}",
    )


@router.get("")
async def list_doc_content(
    registry: Annotated[TenantRegistry, Depends(get_lab_repository)],
    service: Annotated[DocContentService, Depends(get_doc_content_service)],
    lab_prefix: Annotated[str, Query(min_length=1)],
    document_id: Annotated[str | None, Query()] = None,
) -> list[DocContentResponse]:
    """List a lab's document content, or one document's content.

    Args:
        registry: Lab registry used to validate the prefix
        service: Document content service
        lab_prefix: Lab prefix
        document_id: Optional document id filter

    Returns:
        Matching records ordered by document id

    Raises:
        HTTPException: 400 if the lab prefix is invalid or unknown
        HTTPException: 500 for storage failures
    """
    try:
        await _require_lab(registry, lab_prefix)
        if document_id:
            records = await asyncio.to_thread(
                service.find_content_by_document, lab_prefix, document_id
            )
        else:
            records = await asyncio.to_thread(service.find_all_content, lab_prefix)
        return [DocContentResponse.from_domain(r) for r in records]

    except Exception as e:
        raise _to_http_exception(e, "fetch document content") from e


@router.post("", status_code=status.HTTP_201_CREATED, response_model=None)
async def save_doc_content(
    request: SaveDocContentRequest,
    registry: Annotated[TenantRegistry, Depends(get_lab_repository)],
    service: Annotated[DocContentService, Depends(get_doc_content_service)],
) -> None:
    """Save (insert or replace) one document's content.

    Raises:
        HTTPException: 400 if the lab prefix is invalid or unknown
        HTTPException: 422 if the content is not JSON serializable
        HTTPException: 500 for provisioning or storage failures
    """
    try:
        await _require_lab(registry, request.lab_prefix)
        await asyncio.to_thread(
            service.save_content,
            request.lab_prefix,
            request.document_id,
            request.content,
        )

    except Exception as e:
        raise _to_http_exception(e, "save document content") from e


@router.post("/bulk-save", status_code=status.HTTP_201_CREATED)
async def bulk_save_doc_content(
    request: BulkSaveDocContentRequest,
    registry: Annotated[TenantRegistry, Depends(get_lab_repository)],
    service: Annotated[DocContentService, Depends(get_doc_content_service)],
) -> BulkSaveResponse:
    """Save many documents of one lab.

    Entries are saved in order and the first failure stops the batch.
    Entries saved before the failure stay saved; the 500 response reports
    how many.

    Raises:
        HTTPException: 400 if the lab prefix is invalid or unknown
        HTTPException: 422 if an id is invalid or some content is not
            JSON serializable
        HTTPException: 500 with ``saved_count`` if an entry fails
    """
    try:
        await _require_lab(registry, request.lab_prefix)
        count = await asyncio.to_thread(
            service.bulk_save_content, request.lab_prefix, request.documents
        )
        return BulkSaveResponse(count=count)

    except Exception as e:
        raise _to_http_exception(e, "bulk save document content") from e


@router.get("/by-document/{lab_prefix}/{document_id}")
async def get_doc_content_by_document(
    lab_prefix: str,
    document_id: str,
    registry: Annotated[TenantRegistry, Depends(get_lab_repository)],
    service: Annotated[DocContentService, Depends(get_doc_content_service)],
) -> list[DocContentResponse]:
    """Get one document's content as a list of zero or one record."""
    try:
        await _require_lab(registry, lab_prefix)
        records = await asyncio.to_thread(
            service.find_content_by_document, lab_prefix, document_id
        )
        return [DocContentResponse.from_domain(r) for r in records]

    except Exception as e:
        raise _to_http_exception(e, "fetch document content") from e


@router.delete(
    "/{lab_prefix}/{document_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_model=None,
    responses={
        204: {"description": "Content deleted"},
        400: {"description": "Invalid or unknown lab prefix"},
        404: {"description": "Content not found"},
        500: {"description": "Internal server error"},
    },
)
async def delete_doc_content(
    lab_prefix: str,
    document_id: str,
    registry: Annotated[TenantRegistry, Depends(get_lab_repository)],
    service: Annotated[DocContentService, Depends(get_doc_content_service)],
) -> None:
    """Delete one document's content."""
    try:
        await _require_lab(registry, lab_prefix)
        deleted = await asyncio.to_thread(
            service.delete_content, lab_prefix, document_id
        )
    except Exception as e:
        raise _to_http_exception(e, "delete document content") from e

    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Content not found",
        )
