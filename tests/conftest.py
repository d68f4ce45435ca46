# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Pytest configuration and shared fixtures.

This module provides fixtures used across all test types:
- Unit tests (registry, settings, logging)
- Integration tests (HTTP API through TestClient)

Every test gets its own Registry and application, so no state leaks
between tests.
"""

from collections.abc import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.api.app import create_app
from src.core.config import RegistrySettings, Settings, clear_settings_cache
from src.domains.registry import Registry, seed


# =============================================================================
# Environment Fixtures
# =============================================================================


@pytest.fixture
def test_settings() -> Settings:
    """Provide settings for an isolated test application."""
    return Settings(
        environment="test",
        debug=False,
        log_level="WARNING",
        registry=RegistrySettings(course_capacity=3, seed_on_startup=True),
    )


@pytest.fixture(autouse=True)
def _reset_settings_cache() -> Generator[None, None, None]:
    """Make sure cached settings never leak between tests."""
    clear_settings_cache()
    yield
    clear_settings_cache()


# =============================================================================
# Registry Fixtures
# =============================================================================


@pytest.fixture
def registry() -> Registry:
    """Provide an empty registry."""
    return Registry()


@pytest.fixture
def seeded_registry() -> Registry:
    """Provide a registry holding the demo students and courses.

    Students: 1 Alice, 2 Bob, 3 Charlie.
    Courses: 1 Math, 2 Physics, 3 History.
    """
    registry = Registry()
    seed(registry)
    return registry


# =============================================================================
# API Fixtures
# =============================================================================


@pytest.fixture
def app(test_settings: Settings, seeded_registry: Registry) -> FastAPI:
    """Create a test application serving the seeded registry."""
    return create_app(settings=test_settings, registry=seeded_registry)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create test client."""
    return TestClient(app)


# =============================================================================
# Marker Configuration
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test (HTTP API)"
    )
