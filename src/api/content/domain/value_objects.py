"""Domain value objects for the content bounded context."""

from __future__ import annotations

from datetime import datetime
from typing import Any, TypeAlias

from pydantic import BaseModel, ConfigDict, Field

# Document content is tenant-defined free-form JSON. The store treats it as
# an opaque value and only requires that it serialize.
JSONValue: TypeAlias = Any

# Matches the width of the document_id column in every lab namespace.
MAX_DOCUMENT_ID_LENGTH = 100


class DocContentRecord(BaseModel):
    """Current content of one document within one lab namespace."""

    model_config = ConfigDict(frozen=True)

    document_id: str = Field(..., description="Document identifier, unique per lab")
    lab_prefix: str = Field(..., description="Lab prefix used by the last save")
    content: JSONValue = Field(default_factory=dict, description="Stored payload")
    updated_at: datetime | None = Field(
        default=None, description="Time of the last save"
    )

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> DocContentRecord:
        """Build a record from a backing-store row mapping."""
        return cls(
            document_id=row["document_id"],
            lab_prefix=row["lab_prefix"],
            content=row["content"],
            updated_at=row.get("updated_at"),
        )
