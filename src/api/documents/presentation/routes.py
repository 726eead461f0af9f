"""HTTP routes for document records."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from documents.application.services import DocumentService
from documents.dependencies import get_document_service
from documents.ports.exceptions import DocumentOwnerNotFoundError
from documents.presentation.models import (
    CreateDocumentRequest,
    DocumentResponse,
    UpdateDocumentRequest,
)

router = APIRouter(
    prefix="/documents",
    tags=["documents"],
)


def _document_not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Document not found",
    )


@router.get("")
async def list_documents(
    service: Annotated[DocumentService, Depends(get_document_service)],
    owner_id: Annotated[int | None, Query(gt=0)] = None,
) -> list[DocumentResponse]:
    """List documents newest first, optionally filtered by owner."""
    try:
        documents = await service.list_documents(owner_id=owner_id)
        return [DocumentResponse.from_domain(document) for document in documents]

    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to list documents",
        ) from e


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_document(
    request: CreateDocumentRequest,
    service: Annotated[DocumentService, Depends(get_document_service)],
) -> DocumentResponse:
    """Create a document.

    Raises:
        HTTPException: 400 if the owner does not exist or a field is blank
        HTTPException: 500 for unexpected errors
    """
    try:
        document = await service.create_document(
            title=request.title,
            content=request.content,
            owner_id=request.owner_id,
        )
        return DocumentResponse.from_domain(document)

    except (DocumentOwnerNotFoundError, ValueError) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create document",
        ) from e


@router.get("/{document_id}")
async def get_document(
    document_id: int,
    service: Annotated[DocumentService, Depends(get_document_service)],
) -> DocumentResponse:
    try:
        document = await service.get_document(document_id)
        if document is None:
            raise _document_not_found()
        return DocumentResponse.from_domain(document)

    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve document",
        ) from e


@router.put("/{document_id}")
async def update_document(
    document_id: int,
    request: UpdateDocumentRequest,
    service: Annotated[DocumentService, Depends(get_document_service)],
) -> DocumentResponse:
    """Update a document's title or content."""
    try:
        document = await service.update_document(
            document_id,
            title=request.title,
            content=request.content,
        )
        if document is None:
            raise _document_not_found()
        return DocumentResponse.from_domain(document)

    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update document",
        ) from e


@router.delete(
    "/{document_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_model=None,
    responses={
        204: {"description": "Document deleted"},
        404: {"description": "Document not found"},
        500: {"description": "Internal server error"},
    },
)
async def delete_document(
    document_id: int,
    service: Annotated[DocumentService, Depends(get_document_service)],
) -> None:
    try:
        deleted = await service.delete_document(document_id)
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete document",
        ) from e

    if not deleted:
        raise _document_not_found()
