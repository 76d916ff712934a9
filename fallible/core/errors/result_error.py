"""Exceptions produced by the result algebra.

The algebra never invents failure kinds for caller code: the error type of a
Result is whatever the caller puts in it. These exceptions only appear at the
few places where the library itself has to produce a failure object.

Error Hierarchy:
    ResultError (base, inherits from Exception)
    ├── NotFoundError (absent value promoted into the error channel)
    ├── UnwrapError (non-raisable error payload crossed ok_or_raise)
    └── BlockReturnedError (ok_or_block callback returned instead of diverging)

Each subclass also inherits from the closest builtin exception so callers
can catch it without importing this module.
"""

from typing import Any

from fallible.core.enums import ErrorCode


class ResultError(Exception):
    """Base exception for the result algebra.

    Attributes:
        code: Machine-readable error code (enum).
        message: Human-readable error message.
        details: Optional context for debugging.
    """

    code: ErrorCode

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class NotFoundError(ResultError, LookupError):
    """A required value was absent.

    Produced as an ``Error`` payload by ``wrap_ok_not_none``; never raised by
    the library itself.
    """

    code = ErrorCode.NOT_FOUND


class UnwrapError(ResultError, ValueError):
    """``ok_or_raise`` met an error payload that is not an exception.

    Attributes:
        error: The original error payload.
    """

    code = ErrorCode.UNWRAP_FAILED

    def __init__(self, error: Any) -> None:
        super().__init__(
            f"Called ok_or_raise on Error: {error!r}",
            details={"error_type": type(error).__name__},
        )
        self.error = error


class BlockReturnedError(ResultError, RuntimeError):
    """An ``ok_or_block`` callback returned instead of aborting the flow.

    Attributes:
        error: The error payload the callback was given.
        returned: The value the callback returned.
    """

    code = ErrorCode.BLOCK_RETURNED

    def __init__(self, error: Any, returned: Any) -> None:
        super().__init__(
            "ok_or_block callback must not return",
            details={"error_type": type(error).__name__},
        )
        self.error = error
        self.returned = returned
