"""Core enums package.

Exports all core-level enums for convenient importing.

Usage:
    from fallible.core.enums import ErrorCode, Environment
"""

from fallible.core.enums.environment import Environment
from fallible.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
