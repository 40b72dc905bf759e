# src/dopameter/main.py
"""Main entry point for the Dopameter application."""

from __future__ import annotations

import logging
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.staticfiles import StaticFiles

from dopameter.api import (
    auth_router,
    chart_router,
    content_router,
    favorites_router,
    leaderboard_router,
)
from dopameter.api.errors import register_exception_handlers
from dopameter.core.settings import Settings
from dopameter.core.settings import settings as default_settings
from dopameter.services import ChartService, ContentService
from dopameter.services.seed import seed_demo_data
from dopameter.services.uploads import UPLOAD_URL_PREFIX
from dopameter.storage import Storage, build_storage

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Configure the root logger once per process."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(settings: Settings | None = None, storage: Storage | None = None) -> FastAPI:
    """Build the FastAPI application around ``storage``.

    Args:
        settings: Configuration; defaults to the environment-derived settings.
        storage: Backend to serve from; built from ``settings`` when omitted.
            The application closes it on shutdown.
    """
    settings = settings or default_settings
    configure_logging(settings.log_level)

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Rate content with emoji reactions and see what hits hardest",
        version=settings.app_version,
        debug=settings.debug,
    )
    app.state.settings = settings
    app.state.storage = storage if storage is not None else build_storage(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )
    app.add_middleware(GZipMiddleware)
    register_exception_handlers(app)

    app.include_router(auth_router, prefix="/api")
    app.include_router(content_router, prefix="/api")
    app.include_router(favorites_router, prefix="/api")
    app.include_router(leaderboard_router, prefix="/api")
    app.include_router(chart_router, prefix="/api")

    upload_dir = Path(settings.upload_dir)
    app.mount(
        UPLOAD_URL_PREFIX,
        StaticFiles(directory=upload_dir, check_dir=False),
        name="uploads",
    )

    @app.on_event("startup")
    async def on_startup() -> None:
        upload_dir.mkdir(parents=True, exist_ok=True)
        if settings.seed_demo_data:
            storage_backend: Storage = app.state.storage
            seed_demo_data(ContentService(storage_backend), ChartService(storage_backend))
        logger.info("%s started with %s", settings.app_name, type(app.state.storage).__name__)

    @app.on_event("shutdown")
    async def on_shutdown() -> None:
        app.state.storage.close()

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint to verify the service is running."""
        return {"status": "ok"}

    @app.get("/")
    async def root() -> dict[str, str]:
        """Root endpoint with basic information about the API."""
        return {
            "name": f"{settings.app_name} API",
            "version": settings.app_version,
            "docs": "/docs",
            "redoc": "/redoc",
        }

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("dopameter.main:app", host="0.0.0.0", port=8000, reload=default_settings.debug)
