"""Pydantic models for document API requests and responses."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from documents.domain.aggregates import Document


class CreateDocumentRequest(BaseModel):
    """Request model for creating a document."""

    title: str = Field(..., min_length=1, max_length=255)
    content: str = Field(..., min_length=1)
    owner_id: int = Field(..., gt=0, description="Id of the owning user")


class UpdateDocumentRequest(BaseModel):
    """Request model for a partial document update."""

    title: str | None = Field(None, min_length=1, max_length=255)
    content: str | None = Field(None, min_length=1)


class DocumentResponse(BaseModel):
    """Response model for a document."""

    id: int
    title: str
    content: str
    owner_id: int
    created_at: datetime | None
    updated_at: datetime | None

    @classmethod
    def from_domain(cls, document: Document) -> DocumentResponse:
        return cls(
            id=document.id,
            title=document.title,
            content=document.content,
            owner_id=document.owner_id,
            created_at=document.created_at,
            updated_at=document.updated_at,
        )
