"""
Tally API - FastAPI application entry point.

This module initializes the FastAPI application and configures
middleware, routers, and lifecycle events.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tally_core import get_logger, init_logging

from .config import settings
from .routers import feeds, unread

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifecycle manager.

    Handles startup and shutdown events for the application.

    Args:
        app: The FastAPI application instance.

    Yields:
        None during application runtime.
    """
    from tally_database.session import close_database, init_database

    init_logging(settings.log_level)
    logger.info("Starting %s v%s", settings.app_name, settings.version)
    init_database(settings.database_url, echo=settings.database_echo)

    yield

    await close_database()
    logger.info("Shutting down %s", settings.app_name)


def create_app() -> FastAPI:
    """
    Build the FastAPI application.

    Returns:
        Configured application instance.
    """
    app = FastAPI(
        title=settings.app_name,
        description="Tally - unread statistics API",
        version=settings.version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    # Configure CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register API routers
    app.include_router(unread.router, prefix="/api/unread", tags=["Unread"])
    app.include_router(feeds.router, prefix="/api/feeds", tags=["Feeds"])

    @app.get("/api/health")
    async def health_check() -> dict[str, str]:
        """
        Health check endpoint.

        Returns:
            Dictionary containing service status and version.
        """
        return {"status": "healthy", "version": settings.version}

    return app


app = create_app()
