"""
FastAPI application with assembled routers.

Initializes FastAPI app with the session routers and configures uvicorn server.

Dependencies: fastapi, area_sessions.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from area_sessions import __version__
from area_sessions.api.deps.dependencies import get_service_cache
from area_sessions.configs import get_settings
from area_sessions.observability.logger import configure_logging

from .routers import health_router, sessions_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events.
    """
    logger = logging.getLogger("uvicorn")

    # Startup
    cache = get_service_cache()
    _ = cache.blob_store
    logger.info("Blob store ready")

    yield

    # Shutdown
    cache.clear()
    logger.info("Service cache cleared")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Area Sessions API",
        description="Per-user storage of recorded area measurement sessions",
        version=__version__,
        lifespan=lifespan,
    )

    app.include_router(health_router)
    app.include_router(sessions_router)

    return app


app = create_app()


if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "area_sessions.api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=False,
    )
