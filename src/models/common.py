# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Schemas shared across endpoints."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error body returned for every 4xx/5xx response."""

    error: str = Field(description="Human-readable error message")


class SuccessResponse(BaseModel):
    """Acknowledgement for operations without a resource payload."""

    success: bool = Field(default=True)
