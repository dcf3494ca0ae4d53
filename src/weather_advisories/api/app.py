"""HTTP API for condition cards.

``create_app()`` builds the FastAPI application serving the condition routes
under ``/api/conditions`` plus a ``/health`` probe. Serve it with uvicorn,
or run ``weather-advisories serve``.

Settings (CORS origins, debug docs, default preferences) come from
``weather_advisories.config``.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from weather_advisories.config import Settings, get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    settings = get_settings()
    logger.info(
        f"{settings.app_name} v{settings.app_version} ready "
        f"({settings.environment}, refresh every {settings.refresh_interval_minutes} min)"
    )
    if settings.disabled_categories:
        logger.info(f"Categories disabled by default: {settings.disabled_categories}")

    yield

    logger.info(f"{settings.app_name} stopped")


def _docs_urls(settings: Settings) -> dict[str, str | None]:
    """OpenAPI docs are only published in debug mode."""
    if not settings.debug:
        return {"docs_url": None, "redoc_url": None, "openapi_url": None}
    return {"docs_url": "/docs", "redoc_url": "/redoc", "openapi_url": "/openapi.json"}


def create_app() -> FastAPI:
    """Build the advisory API.

    Returns:
        FastAPI application with the condition routes mounted
    """
    from weather_advisories.api.routes import conditions

    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Prioritized weather advisory cards for a current-weather snapshot",
        lifespan=lifespan,
        **_docs_urls(settings),
    )

    # Clients only read cards and post snapshots
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type"],
    )

    app.include_router(conditions.router, prefix="/api/conditions", tags=["Conditions"])

    @app.get("/health", tags=["Health"])
    async def health():
        return {
            "status": "healthy",
            "version": settings.app_version,
            "environment": settings.environment,
        }

    return app
