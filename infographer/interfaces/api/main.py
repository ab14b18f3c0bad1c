"""
FastAPI Main Application - Unified API entry point.

Run with: uvicorn infographer.interfaces.api.main:app --reload
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from infographer import __version__
from infographer.config import ErrorCode, InfographerError, Settings, get_settings

from .deps import AppServices, build_services
from .middleware import (
    ErrorHandlerMiddleware,
    LatencyMiddleware,
    RequestIDMiddleware,
    validation_error_handler,
)
from .routes import auth, generation, health

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    settings: Settings = app.state.services.settings
    logger.info("Starting Infographer API...")
    logger.info("  Environment: %s", settings.environment)
    logger.info("  Allowed domain: @%s", app.state.services.gate.allowed_domain)

    for warning in settings.config_warnings():
        logger.warning("  Misconfiguration: %s", warning)

    yield

    logger.info("Shutting down Infographer API...")


def create_app(
    settings: Settings | None = None,
    services: AppServices | None = None,
) -> FastAPI:
    """
    Create FastAPI application.

    Args:
        settings: Configuration (loaded from the environment if None)
        services: Prebuilt services (built from settings if None)
    """
    settings = settings or (services.settings if services else get_settings())

    app = FastAPI(
        title="Infographer API",
        description="Authenticated gateway for AI-generated infographics",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.services = services or build_services(settings)

    # Last added = outermost
    app.add_middleware(
        ErrorHandlerMiddleware, session_cookie_name=settings.session_cookie_name
    )
    app.add_middleware(LatencyMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    # Include routers
    app.include_router(health.router, tags=["Health"])
    app.include_router(auth.router, tags=["Auth"])
    app.include_router(generation.router, prefix="/api", tags=["Generation"])

    @app.api_route(
        "/api/{path:path}",
        methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
        include_in_schema=False,
    )
    async def api_not_found(path: str) -> None:
        """Unknown API paths are 404 for every method."""
        raise InfographerError(ErrorCode.NOT_FOUND, "Not found")

    _mount_client_app(app, settings.static_dir)

    return app


def _mount_client_app(app: FastAPI, static_dir: Path) -> None:
    """Serve the bundled client with index.html as the fallback for client-side routes."""
    static_root = static_dir.resolve()
    index_file = static_root / "index.html"
    if not index_file.is_file():
        logger.info("Client bundle not found at %s; static serving disabled", static_root)
        return

    assets_dir = static_root / "assets"
    if assets_dir.is_dir():
        app.mount("/assets", StaticFiles(directory=assets_dir), name="assets")

    @app.get("/{path:path}", include_in_schema=False)
    async def serve_client_app(path: str = "") -> FileResponse:
        """Serve a bundled file if it exists, otherwise the SPA entry point."""
        if path == "api" or path.startswith("api/"):
            raise InfographerError(ErrorCode.NOT_FOUND, "Not found")

        candidate = (static_root / path).resolve()
        if path and candidate.is_file() and candidate.is_relative_to(static_root):
            return FileResponse(candidate)
        return FileResponse(index_file)


# Create app instance
app = create_app()
