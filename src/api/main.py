"""Main FastAPI application entry point."""

from contextlib import asynccontextmanager
from typing import Annotated

import structlog
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from content.dependencies import get_backing_store
from content.infrastructure.postgres_store import PostgresBackingStore
from content.presentation import routes as content_routes
from documents.presentation import routes as document_routes
from infrastructure.database.dependencies import close_database_connections
from infrastructure.dependencies import close_connection_pool
from infrastructure.logging import configure_logging
from infrastructure.settings import get_settings
from infrastructure.version import __version__
from labs.presentation import routes as lab_routes
from users.presentation import routes as user_routes

settings = get_settings()
configure_logging(settings.log_level)

logger = structlog.get_logger()


@asynccontextmanager
async def labdocs_lifespan(app: FastAPI):
    """Application lifespan context.

    Manages:
    - Connection pool lifecycle (created lazily, closed on shutdown)
    - Registry engine disposal on shutdown
    """
    logger.info("application_starting", version=__version__)

    yield

    close_connection_pool()
    await close_database_connections()
    logger.info("application_stopped")


app = FastAPI(
    title=settings.app_name,
    description="Multi-tenant lab onboarding, user accounts and document API",
    version=__version__,
    debug=settings.debug,
    lifespan=labdocs_lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include bounded context routes
app.include_router(lab_routes.router)
app.include_router(content_routes.router)
app.include_router(user_routes.router)
app.include_router(document_routes.router)


@app.get("/health")
def health():
    """Basic health check endpoint."""
    return {"status": "ok"}


@app.get("/health/db")
def health_db(
    store: Annotated[PostgresBackingStore, Depends(get_backing_store)],
) -> dict:
    """Check database connection health."""
    try:
        is_healthy = store.verify_connection()

        return {
            "status": "ok" if is_healthy else "unhealthy",
            "connected": is_healthy,
        }
    except Exception as e:
        return {
            "status": "error",
            "connected": False,
            "error": str(e),
        }
