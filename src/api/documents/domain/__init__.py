"""Documents domain module."""

from documents.domain.aggregates import Document

__all__ = ["Document"]
