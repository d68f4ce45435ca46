# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""FastAPI Application Factory.

This module provides the main application factory for the Enrollment
Registry API. Each application owns one Registry instance.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src import __version__
from src.api.errors import register_exception_handlers
from src.api.middleware import RequestContextMiddleware
from src.api.routes import courses, health, students
from src.core.config import Settings, get_settings
from src.domains.registry import Registry, seed
from src.utils.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Args:
        app: The FastAPI application instance.

    Yields:
        None during application runtime.
    """
    settings: Settings = app.state.settings
    logger.info(
        "Starting Enrollment Registry API: environment=%s, debug=%s",
        settings.environment,
        settings.debug,
    )

    yield

    logger.info("Shutting down Enrollment Registry API")


def create_app(
    settings: Settings | None = None,
    registry: Registry | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Settings to use. Defaults to the cached get_settings().
        registry: Registry to serve. Defaults to a new registry built from
            the settings, seeded when ``registry.seed_on_startup`` is set.

    Returns:
        Configured FastAPI application instance.
    """
    settings = settings or get_settings()
    setup_logging(settings)

    if registry is None:
        registry = Registry(capacity=settings.registry.course_capacity)
        if settings.registry.seed_on_startup:
            seed(registry)

    app = FastAPI(
        title="Enrollment Registry API",
        description="In-memory students, courses and enrollments",
        version=__version__,
        docs_url=settings.api.docs_url,
        redoc_url=None,
        openapi_url="/openapi.json",
        lifespan=lifespan,
        redirect_slashes=False,
    )

    # =========================================================================
    # State
    # =========================================================================
    app.state.settings = settings
    app.state.registry = registry

    # =========================================================================
    # Exception handlers
    # =========================================================================
    register_exception_handlers(app)

    # =========================================================================
    # Middleware (order matters - last added is first executed)
    # =========================================================================
    app.add_middleware(RequestContextMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.origins_list,
        allow_credentials=settings.cors.allow_credentials,
        allow_methods=settings.cors.allow_methods,
        allow_headers=settings.cors.allow_headers,
    )

    # =========================================================================
    # Routes
    # =========================================================================
    app.include_router(health.router, tags=["Health"])
    app.include_router(students.router, prefix="/students", tags=["Students"])
    app.include_router(courses.router, prefix="/courses", tags=["Courses"])

    return app
