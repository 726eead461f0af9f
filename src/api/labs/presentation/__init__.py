"""Labs presentation layer (HTTP routes)."""

from labs.presentation.routes import router

__all__ = ["router"]
