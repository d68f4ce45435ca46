# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""FastAPI dependency injection definitions.

The registry is owned by the application (``app.state.registry``) rather
than held as module state, so every app instance, and every test, gets
its own store.

Example:
    @router.get("/students")
    async def list_students(registry: RegistryDep):
        ...
"""

from typing import Annotated

from fastapi import Depends, Request

from src.core.config import Settings
from src.domains.registry import Registry


def get_registry(request: Request) -> Registry:
    """Get the registry owned by the running application."""
    return request.app.state.registry


def get_app_settings(request: Request) -> Settings:
    """Get the settings the application was created with."""
    return request.app.state.settings


RegistryDep = Annotated[Registry, Depends(get_registry)]
SettingsDep = Annotated[Settings, Depends(get_app_settings)]
