"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
configures static assets, exception handlers, and lifespan events.

There is no module-level instance; serve it with the bootstrap or with
``uvicorn --factory src.api.main:create_app``.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from src.api.models import ErrorResponse, HealthResponse
from src.api.pages import router as pages_router
from src.config.settings import Settings, get_settings
from src.views import ViewError, ViewResolver

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "pages",
        "description": "Server-rendered HTML pages",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """FastAPI lifespan context manager; logs startup and shutdown."""
    logger.info("Starting application...")
    logger.info("Application startup complete")

    yield

    logger.info("Shutting down application...")


async def view_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log an unresolvable view and answer with a generic 500."""
    logger.error("View resolution failed for %s: %s", request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(detail="View not found").model_dump(),
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the application.

    Wires the page router, the health check, static assets and the view
    resolver used by page routes.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Minimal web application serving a static homepage",
        version="0.1.0",
        openapi_tags=tags_metadata,
        lifespan=lifespan,
    )

    templates = Jinja2Templates(directory=settings.templates_dir)
    templates.env.globals["static_url"] = settings.static_url.rstrip("/")
    # Store resolver in app state for dependency injection
    app.state.views = ViewResolver(templates)

    app.add_exception_handler(ViewError, view_error_handler)
    app.include_router(pages_router)

    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health_check() -> HealthResponse:
        """Health check endpoint; 200 OK once the app is serving."""
        return HealthResponse(status="healthy")

    if settings.static_dir.is_dir():
        app.mount(settings.static_url, StaticFiles(directory=settings.static_dir), name="static")
    else:
        logger.warning("Static directory %s not found, skipping mount", settings.static_dir)

    return app

