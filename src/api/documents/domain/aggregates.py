"""Document aggregate for the documents context."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Document:
    """A titled text document owned by a user account.

    These records are independent of the per-lab document content store;
    they hold plain text and are keyed by a numeric id.
    """

    title: str
    content: str
    owner_id: int
    id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def create(cls, title: str, content: str, owner_id: int) -> Document:
        """Factory method for a new document.

        Raises:
            ValueError: If the title or content is blank
        """
        if not title or not title.strip():
            raise ValueError("Document title must not be blank")
        if not content:
            raise ValueError("Document content must not be empty")
        return cls(title=title, content=content, owner_id=owner_id)

    def update(self, title: str | None = None, content: str | None = None) -> list[str]:
        """Apply a partial update; ``None`` leaves a value as is.

        Returns:
            Names of the fields that were set
        """
        changed = []
        if title is not None:
            self.title = title
            changed.append("title")
        if content is not None:
            self.content = content
            changed.append("content")
        return changed
