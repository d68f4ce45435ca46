# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for application settings."""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from src.core.config.settings import (
    APISettings,
    CORSSettings,
    RegistrySettings,
    Settings,
    clear_settings_cache,
    get_settings,
)

pytestmark = pytest.mark.unit


class TestAPISettings:
    """Tests for APISettings."""

    def test_default_values(self) -> None:
        """Test default configuration values."""
        settings = APISettings()

        assert settings.host == "0.0.0.0"
        assert settings.port == 3000
        assert settings.reload is False
        assert settings.docs_url == "/api-docs"

    def test_env_prefix(self) -> None:
        """Test values are read from API_* variables."""
        with patch.dict(os.environ, {"API_PORT": "8080"}):
            settings = APISettings()

        assert settings.port == 8080


class TestRegistrySettings:
    """Tests for RegistrySettings."""

    def test_default_values(self) -> None:
        """Test default configuration values."""
        settings = RegistrySettings()

        assert settings.course_capacity == 3
        assert settings.seed_on_startup is True

    def test_from_environment(self) -> None:
        """Test values are read from REGISTRY_* variables."""
        with patch.dict(
            os.environ,
            {"REGISTRY_COURSE_CAPACITY": "5", "REGISTRY_SEED_ON_STARTUP": "false"},
        ):
            settings = RegistrySettings()

        assert settings.course_capacity == 5
        assert settings.seed_on_startup is False

    def test_capacity_must_be_positive(self) -> None:
        """Test a zero capacity is rejected."""
        with pytest.raises(ValidationError):
            RegistrySettings(course_capacity=0)


class TestCORSSettings:
    """Tests for CORSSettings."""

    def test_origins_list(self) -> None:
        """Test origins string is split and trimmed."""
        settings = CORSSettings(origins="http://a.test, http://b.test,")

        assert settings.origins_list == ["http://a.test", "http://b.test"]


class TestSettings:
    """Tests for the main Settings class."""

    def test_environment_helpers(self) -> None:
        """Test is_development / is_production properties."""
        assert Settings(environment="development").is_development is True
        assert Settings(environment="production").is_production is True
        assert Settings(environment="test").is_development is False

    def test_log_level_is_normalized(self) -> None:
        """Test lowercase log levels are accepted."""
        assert Settings(log_level="warning").log_level == "WARNING"

    def test_invalid_environment(self) -> None:
        """Test unknown environments are rejected."""
        with pytest.raises(ValidationError):
            Settings(environment="qa")

    def test_get_settings_is_cached(self) -> None:
        """Test get_settings returns the same instance until cleared."""
        first = get_settings()

        assert get_settings() is first

        clear_settings_cache()

        assert get_settings() is not first
