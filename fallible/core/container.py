"""Logger composition root.

Adapter selection is centralized here so the algebra never constructs a
logger itself. Modules import ``get_logger`` and call it lazily at the point
where they log.

Usage:
    from fallible.core.container import get_logger

    logger = get_logger()
    logger.debug("result_exception_caught", error_type="KeyError")
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from fallible.core.config import settings

if TYPE_CHECKING:
    from fallible.protocols.logger_protocol import LoggerProtocol


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the process-wide logger singleton.

    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    ``FALLIBLE_LOG_JSON`` overrides the per-environment choice.

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from fallible.infrastructure.logging.console_adapter import ConsoleAdapter

    return ConsoleAdapter(use_json=settings.use_json_logs, level=settings.log_level)
