# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Health check endpoints.

This module provides health and readiness endpoints for the API.
"""

import logging
from datetime import datetime

from fastapi import APIRouter
from pydantic import BaseModel, Field

from src import __version__
from src.api.dependencies import RegistryDep, SettingsDep
from src.domains.registry import Collection
from src.utils.datetime import seconds_to_human, time_since, utc_now

logger = logging.getLogger(__name__)

router = APIRouter()

# Track server start time for uptime calculation
_server_start_time = utc_now()


class RegistryStats(BaseModel):
    """Current registry sizes."""
    students: int = Field(description="Number of students")
    courses: int = Field(description="Number of courses")
    enrollments: int = Field(description="Number of enrollments")
    course_capacity: int = Field(description="Maximum enrollments per course")


class HealthResponse(BaseModel):
    """Health check response model."""
    status: str = Field(description="Overall health status")
    timestamp: datetime = Field(description="Current server timestamp")
    version: str = Field(description="API version")
    environment: str = Field(description="Deployment environment")
    uptime_seconds: int = Field(description="Server uptime in seconds")
    uptime: str = Field(description="Server uptime, human readable")
    registry: RegistryStats


@router.get("/health", response_model=HealthResponse)
async def health_check(registry: RegistryDep, settings: SettingsDep) -> HealthResponse:
    """Check if the API is healthy.

    Returns:
        HealthResponse with uptime and registry sizes.
    """
    uptime = int(time_since(_server_start_time).total_seconds())

    return HealthResponse(
        status="healthy",
        timestamp=utc_now(),
        version=__version__,
        environment=settings.environment,
        uptime_seconds=uptime,
        uptime=seconds_to_human(uptime),
        registry=RegistryStats(
            students=len(registry.list(Collection.STUDENTS)),
            courses=len(registry.list(Collection.COURSES)),
            enrollments=len(registry.enrollments),
            course_capacity=registry.capacity,
        ),
    )
