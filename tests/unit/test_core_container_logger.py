"""Unit tests for get_logger() container function.

Tests cover:
- Adapter configuration derived from settings
- Singleton pattern (same instance returned)
- Protocol compliance

Architecture:
- Unit tests with mocked settings and adapters
"""

from unittest.mock import MagicMock, patch

import pytest

from fallible.core.container import get_logger
from fallible.infrastructure.logging.console_adapter import ConsoleAdapter
from fallible.protocols.logger_protocol import LoggerProtocol


@pytest.mark.unit
class TestGetLoggerContainer:
    """Test get_logger() container function."""

    def test_get_logger_uses_json_when_settings_say_so(self):
        with patch("fallible.core.container.settings") as mock_settings:
            mock_settings.use_json_logs = True
            mock_settings.log_level = "WARNING"

            get_logger.cache_clear()

            with patch(
                "fallible.infrastructure.logging.console_adapter.ConsoleAdapter"
            ) as mock_console:
                mock_adapter = MagicMock()
                mock_console.return_value = mock_adapter

                logger = get_logger()

                mock_console.assert_called_once_with(use_json=True, level="WARNING")
                assert logger == mock_adapter

    def test_get_logger_uses_console_renderer_in_development(self):
        with patch("fallible.core.container.settings") as mock_settings:
            mock_settings.use_json_logs = False
            mock_settings.log_level = "INFO"

            get_logger.cache_clear()

            with patch(
                "fallible.infrastructure.logging.console_adapter.ConsoleAdapter"
            ) as mock_console:
                get_logger()

                mock_console.assert_called_once_with(use_json=False, level="INFO")

    def test_get_logger_returns_singleton(self):
        assert get_logger() is get_logger()

    def test_get_logger_returns_protocol_compliant_adapter(self):
        logger = get_logger()

        assert isinstance(logger, ConsoleAdapter)
        for method in ("debug", "info", "warning", "error", "critical", "bind"):
            assert callable(getattr(logger, method))

        typed: LoggerProtocol = logger
        assert typed.bind(component="test") is not logger
