"""
Application factory for FastAPI.

This module provides a factory function for creating FastAPI application instances.
The factory pattern allows for:
- Easy testing with custom settings and an in-memory store
- Multiple app instances with different configurations
- Clear separation of app creation from route definitions

Usage:
    from backend.main import create_app
    from backend.settings import Settings

    # Default app (uses get_settings())
    app = create_app()

    # Test app with custom settings
    test_settings = Settings(environment="test", _env_file=None)
    test_app = create_app(settings=test_settings)
"""

import asyncio
import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

import sentry_sdk
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.container import Container
from backend.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, store=None) -> FastAPI:
    """
    Create and configure a FastAPI application instance.

    Args:
        settings: Optional Settings instance. If not provided, uses get_settings()
                  which loads from environment variables.
        store: Optional KeyValueStore replacing the file-backed store.

    Returns:
        Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    _init_sentry(settings)

    app = FastAPI(
        title="HevySpotter API",
        description="Hevy workout sync, analytics and AI coaching",
        version="1.0.0",
        lifespan=_lifespan,
    )
    app.state.container = Container(settings, store=store)

    _configure_cors(app)
    _include_routers(app)

    return app


@asynccontextmanager
async def _lifespan(app: FastAPI):
    """Mount the coordinator for the configured credential without blocking startup."""
    coordinator = app.state.container.coordinator()
    task = None
    if coordinator.credential:
        logger.info("Loading workouts for configured Hevy credential")
        task = asyncio.create_task(coordinator.load())
    else:
        logger.info("No Hevy API key configured, skipping initial load")
    try:
        yield
    finally:
        if task is not None and not task.done():
            task.cancel()


def _init_sentry(settings: Settings) -> None:
    """Initialize Sentry SDK if DSN is configured."""
    if settings.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.environment,
            traces_sample_rate=0.1,
        )
        logger.info("Sentry initialized for hevy-spotter")


def _configure_cors(app: FastAPI) -> None:
    """Configure CORS middleware for the local dashboard."""
    trusted_origins = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]
    extra_origins = os.environ.get("CORS_ALLOWED_ORIGINS", "").split(",")
    trusted_origins.extend([origin.strip() for origin in extra_origins if origin.strip()])

    app.add_middleware(
        CORSMiddleware,
        allow_origins=trusted_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def _include_routers(app: FastAPI) -> None:
    """Include all API routers in the application."""
    from api.routers import (
        analytics_router,
        coach_router,
        health_router,
        settings_router,
        workouts_router,
    )

    # Health router (no prefix - /health at root)
    app.include_router(health_router)

    app.include_router(settings_router)
    app.include_router(workouts_router)
    app.include_router(analytics_router)
    app.include_router(coach_router)


# Default app instance for uvicorn
# This allows: uvicorn backend.main:app --reload
app = create_app()
