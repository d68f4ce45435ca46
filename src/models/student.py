# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Student API schemas."""

from pydantic import BaseModel, ConfigDict, Field


class StudentCreateRequest(BaseModel):
    """Request body for creating a student.

    Both fields are optional at the schema level so that a missing field
    produces the API's own 400 message instead of a validation error.
    """

    name: str | None = Field(default=None, description="Student full name")
    email: str | None = Field(default=None, description="Email, unique among students")


class StudentUpdateRequest(BaseModel):
    """Request body for updating a student. Only sent fields are applied."""

    name: str | None = Field(default=None, description="New name")
    email: str | None = Field(default=None, description="New email")


class StudentResponse(BaseModel):
    """Student as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str | None = None
    email: str | None = None


class StudentListResponse(BaseModel):
    """Response for student listing."""

    students: list[StudentResponse]
