"""Logging adapters implementing LoggerProtocol."""

from fallible.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
