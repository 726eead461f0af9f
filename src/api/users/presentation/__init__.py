"""Users presentation layer (HTTP routes)."""

from users.presentation.routes import router

__all__ = ["router"]
