"""Content presentation layer (HTTP routes)."""

from content.presentation.routes import router

__all__ = ["router"]
