"""Core errors package.

Exports the exceptions the result algebra itself can produce.

Usage:
    from fallible.core.errors import NotFoundError, UnwrapError
"""

from fallible.core.errors.result_error import (
    BlockReturnedError,
    NotFoundError,
    ResultError,
    UnwrapError,
)

__all__ = [
    "ResultError",
    "NotFoundError",
    "UnwrapError",
    "BlockReturnedError",
]
