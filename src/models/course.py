# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Course API schemas."""

from pydantic import BaseModel, ConfigDict, Field


class CourseCreateRequest(BaseModel):
    """Request body for creating a course."""

    title: str | None = Field(default=None, description="Course title, unique among courses")
    teacher: str | None = Field(default=None, description="Teacher name")


class CourseUpdateRequest(BaseModel):
    """Request body for updating a course. Only sent fields are applied."""

    title: str | None = Field(default=None, description="New title")
    teacher: str | None = Field(default=None, description="New teacher")


class CourseResponse(BaseModel):
    """Course as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str | None = None
    teacher: str | None = None


class CourseListResponse(BaseModel):
    """Response for course listing."""

    courses: list[CourseResponse]
