"""Pytest configuration and shared fixtures.

This configuration ensures:
1. Settings load in the testing environment (JSON logs)
2. The cached container logger is rebuilt between tests
3. A recording logger test double is available for observer tests
"""

import os

# Must be set before fallible.core.config builds its module-level settings
os.environ.setdefault("FALLIBLE_ENVIRONMENT", "testing")

from dataclasses import dataclass, field  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402

from fallible.core.container import get_logger  # noqa: E402


# =============================================================================
# Test Doubles
# =============================================================================


@dataclass
class RecordingLogger:
    """LoggerProtocol test double.

    Captures every call as ``(level, message, fields)``. Loggers returned by
    ``bind`` share the same record list and merge the bound fields into each
    entry, so tests can assert on request-scoped context.
    """

    records: list[tuple[str, str, dict[str, Any]]] = field(default_factory=list)
    bound: dict[str, Any] = field(default_factory=dict)

    def _record(self, level: str, message: str, context: dict[str, Any]) -> None:
        self.records.append((level, message, {**self.bound, **context}))

    def debug(self, message: str, /, **context: Any) -> None:
        self._record("debug", message, context)

    def info(self, message: str, /, **context: Any) -> None:
        self._record("info", message, context)

    def warning(self, message: str, /, **context: Any) -> None:
        self._record("warning", message, context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        if error is not None:
            context["error_type"] = type(error).__name__
            context["error_message"] = str(error)
        self._record("error", message, context)

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        if error is not None:
            context["error_type"] = type(error).__name__
            context["error_message"] = str(error)
        self._record("critical", message, context)

    def bind(self, **context: Any) -> "RecordingLogger":
        return RecordingLogger(records=self.records, bound={**self.bound, **context})

    def with_context(self, **context: Any) -> "RecordingLogger":
        return self.bind(**context)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def recording_logger() -> RecordingLogger:
    """Fresh recording logger per test."""
    return RecordingLogger()


@pytest.fixture(autouse=True)
def _reset_logger_cache():
    """Rebuild the container logger around each test."""
    get_logger.cache_clear()
    yield
    get_logger.cache_clear()


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
