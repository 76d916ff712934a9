"""Structural protocols used at the library's seams."""

from fallible.protocols.logger_protocol import LoggerProtocol

__all__ = ["LoggerProtocol"]
