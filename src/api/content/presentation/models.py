"""Pydantic models for document content API requests and responses."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any

from pydantic import BaseModel, Field, StringConstraints

from content.domain.value_objects import MAX_DOCUMENT_ID_LENGTH, DocContentRecord
from shared_kernel.lab_prefix import MAX_LAB_PREFIX_LENGTH

DocumentIdKey = Annotated[
    str, StringConstraints(min_length=1, max_length=MAX_DOCUMENT_ID_LENGTH)
]


class SaveDocContentRequest(BaseModel):
    """Request model for saving one document's content."""

    lab_prefix: str = Field(
        ..., description="Lab prefix", min_length=1, max_length=MAX_LAB_PREFIX_LENGTH
    )
    document_id: str = Field(
        ...,
        description="Document identifier",
        min_length=1,
        max_length=MAX_DOCUMENT_ID_LENGTH,
    )
    content: Any = Field(..., description="Free-form JSON content")


class BulkSaveDocContentRequest(BaseModel):
    """Request model for saving many documents of one lab."""

    lab_prefix: str = Field(
        ..., description="Lab prefix", min_length=1, max_length=MAX_LAB_PREFIX_LENGTH
    )
    documents: dict[DocumentIdKey, Any] = Field(
        ..., description="Mapping of document id to content"
    )


class BulkSaveResponse(BaseModel):
    """Response model for a completed bulk save."""

    count: int = Field(..., description="Number of documents saved")


class DocContentResponse(BaseModel):
    """Response model for one document content record."""

    document_id: str = Field(..., description="Document identifier")
    lab_prefix: str = Field(..., description="Lab prefix used by the last save")
    content: Any = Field(..., description="Stored content")
    updated_at: datetime | None = Field(None, description="Time of the last save")

    @classmethod
    def from_domain(cls, record: DocContentRecord) -> DocContentResponse:
        """Convert a DocContentRecord to an API response."""
        return cls(
            document_id=record.document_id,
            lab_prefix=record.lab_prefix,
            content=record.content,
            updated_at=record.updated_at,
        )
