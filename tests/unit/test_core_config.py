"""
Unit tests for configuration management (flat Settings).

Tests cover:
- Settings loading from FALLIBLE_* environment variables
- Environment detection
- log_level validation and normalisation
- JSON log selection per environment and explicit override
- Cached singleton behavior
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from fallible.core.config import Settings, get_settings
from fallible.core.enums import Environment


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestEnvironmentEnum:
    """Test Environment enum."""

    def test_environment_values(self):
        """Test that all expected environments are defined."""
        assert Environment.DEVELOPMENT == "development"
        assert Environment.TESTING == "testing"
        assert Environment.CI == "ci"
        assert Environment.PRODUCTION == "production"


class TestSettingsDefaults:
    """Test default values."""

    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = get_settings()

        assert settings.environment == Environment.DEVELOPMENT
        assert settings.log_level == "INFO"
        assert settings.log_json is None
        assert settings.is_development is True


class TestSettingsValidation:
    """Test Settings field validation."""

    def test_log_level_is_normalised(self):
        with patch.dict(os.environ, {"FALLIBLE_LOG_LEVEL": " debug "}, clear=True):
            assert get_settings().log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        with patch.dict(os.environ, {"FALLIBLE_LOG_LEVEL": "VERBOSE"}, clear=True):
            with pytest.raises(ValidationError) as exc_info:
                get_settings()

        assert "log_level must be one of" in str(exc_info.value)

    def test_invalid_environment_rejected(self):
        with pytest.raises(ValidationError):
            Settings(environment="staging")

    def test_unprefixed_variables_ignored(self):
        with patch.dict(os.environ, {"LOG_LEVEL": "ERROR"}, clear=True):
            assert get_settings().log_level == "INFO"


class TestJsonLogSelection:
    """Test use_json_logs resolution."""

    @pytest.mark.parametrize(
        ("environment", "expected"),
        [
            ("development", False),
            ("testing", True),
            ("ci", True),
            ("production", True),
        ],
    )
    def test_per_environment_default(self, environment, expected):
        with patch.dict(os.environ, {"FALLIBLE_ENVIRONMENT": environment}, clear=True):
            assert get_settings().use_json_logs is expected

    def test_explicit_override(self):
        env_values = {"FALLIBLE_ENVIRONMENT": "production", "FALLIBLE_LOG_JSON": "false"}
        with patch.dict(os.environ, env_values, clear=True):
            assert get_settings().use_json_logs is False


class TestGetSettings:
    """Test cached singleton behavior."""

    def test_returns_same_instance(self):
        assert get_settings() is get_settings()
