"""Documents presentation layer."""

from documents.presentation.routes import router

__all__ = ["router"]
