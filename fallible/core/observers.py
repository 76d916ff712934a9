"""Ready-made logging observers for ``on_ok`` / ``on_error``.

Observers log without altering the value flowing through a pipeline.

- ``log_ok`` / ``log_error``: one-argument observers for Result, logging
  through the given logger (the container logger by default).
- ``log_context_ok`` / ``log_context_error``: two-argument observers for
  ContextResult whose context is itself a LoggerProtocol, typically a
  request-scoped bound logger.

Usage:
    fetch(url).on_ok(log_ok("Fetched", url=url)).on_error(log_error("Fetch failed"))

    context_ok(logger.bind(request_id=rid), payload).on_ok(log_context_ok("Accepted"))
"""

from collections.abc import Callable
from typing import Any

from fallible.core.container import get_logger
from fallible.protocols.logger_protocol import LoggerProtocol


def _log_error(
    logger: LoggerProtocol, message: str, err: Any, fields: dict[str, Any]
) -> None:
    if isinstance(err, Exception):
        logger.error(message, error=err, **fields)
    else:
        logger.error(message, error_value=repr(err), **fields)


def log_ok(
    message: str, *, logger: LoggerProtocol | None = None, **fields: Any
) -> Callable[[Any], None]:
    """Build an observer logging success payloads at info level.

    Args:
        message: Log message.
        logger: Target logger; defaults to ``get_logger()`` at call time.
        **fields: Extra structured fields added to every entry.

    Returns:
        Callable suitable for ``Result.on_ok``.
    """

    def observer(data: Any) -> None:
        (logger or get_logger()).info(message, data=repr(data), **fields)

    return observer


def log_error(
    message: str, *, logger: LoggerProtocol | None = None, **fields: Any
) -> Callable[[Any], None]:
    """Build an observer logging error payloads at error level.

    Exception payloads go through the logger's ``error=`` keyword so the
    adapter records ``error_type`` and ``error_message``; any other payload
    is logged as ``error_value``.
    """

    def observer(err: Any) -> None:
        _log_error(logger or get_logger(), message, err, fields)

    return observer


def log_context_ok(
    message: str, **fields: Any
) -> Callable[[LoggerProtocol, Any], None]:
    """Build an observer for ``ContextResult.on_ok`` logging through the context."""

    def observer(context: LoggerProtocol, data: Any) -> None:
        context.info(message, data=repr(data), **fields)

    return observer


def log_context_error(
    message: str, **fields: Any
) -> Callable[[LoggerProtocol, Any], None]:
    """Build an observer for ``ContextResult.on_error`` logging through the context."""

    def observer(context: LoggerProtocol, err: Any) -> None:
        _log_error(context, message, err, fields)

    return observer


__all__ = ["log_context_error", "log_context_ok", "log_error", "log_ok"]
