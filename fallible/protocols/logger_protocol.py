"""LoggerProtocol definition for structured logging.

The result algebra logs through this protocol, and a bound logger is the
typical context value of a ContextResult: every step of a pipeline receives
it and can log against the same request-scoped fields.

Log Levels (standard 5-level hierarchy):
    - DEBUG: Boundary crossings of the algebra (captured / raised errors)
    - INFO: Normal operational events
    - WARNING: Degraded behaviour
    - ERROR: Operation failed, caller continues
    - CRITICAL: Unrecoverable failure

Usage:
    from fallible.core.container import get_logger
    from fallible.core import context_ok

    logger = get_logger().bind(request_id=request_id)
    context_ok(logger, payload).on_ok(lambda log, data: log.info("Loaded"))
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    All logging calls are structured: message + key-value context.
    Implementations need not inherit from this class (PEP 544).
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message.

        Args:
            message: Human-readable message (avoid f-strings; use context).
            **context: Structured key-value context fields.
        """
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Human-readable message (avoid f-strings; use context).
            error: Optional exception instance; implementation may include
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message with optional exception details."""
        ...

    def bind(self, **context: Any) -> "LoggerProtocol":
        """Return new logger with permanently bound context.

        The original logger instance remains unchanged, which makes a bound
        logger safe to carry as an immutable ContextResult context.

        Args:
            **context: Context to bind to all future logs.

        Returns:
            New logger instance with bound context.
        """
        ...

    def with_context(self, **context: Any) -> "LoggerProtocol":
        """Alias for bind()."""
        ...
