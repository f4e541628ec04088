"""FastAPI application entry point."""

from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..core.config import Settings, get_settings
from ..core.log import configure_logging
from ..storage.backend import ProjectStorage
from ..storage.factory import create_storage
from .routes import metrics_router, projects_router

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    storage: ProjectStorage = app.state.storage

    # Startup
    configure_logging(app.state.settings.log_level)
    await storage.initialize()
    logger.info("ProjectStore started", backend=storage.name)

    yield

    # Shutdown
    await storage.shutdown()
    logger.info("ProjectStore stopped", backend=storage.name)


def create_app(
    storage: ProjectStorage | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """
    Build the API application around a storage backend.

    Args:
        storage: Backend to serve; built from settings when omitted
        settings: Configuration; the cached settings when omitted

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="""
        ProjectStore - Embedded Project Record Store

        Manage project records (name, area, cost):
        - **Records**: Add, view, update and delete projects by name
        - **Queries**: List all, filter above a cost, count by area and cost
        - **Backends**: In-memory or flat-file directory storage
        """,
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.storage = storage if storage is not None else create_storage(settings)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(projects_router, prefix="/api/v1")
    app.include_router(metrics_router, prefix="/api/v1")

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "name": f"{settings.app_name} API",
            "version": __version__,
            "description": "Embedded Project Record Store",
        }

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        stats = await app.state.storage.get_stats()
        return {
            "status": "healthy",
            "backend": app.state.storage.name,
            "total_records": stats["total_records"],
        }

    return app


app = create_app()


def run():
    """Run the API server."""
    settings = get_settings()
    uvicorn.run(
        "projectstore.api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
