"""Result types for railway-oriented programming.

This module implements the Result pattern to handle operations that can fail
without using exceptions as control flow. A Result is exactly one of two
immutable variants:

- ``Ok(data)``: the computation succeeded with ``data``.
- ``Error(error)``: the computation failed with ``error``.

Combinators (``map_ok``, ``chain_ok``, ``chain_error``, ``fold``...) compose
fallible steps without branching on the variant at every step; ``catch``
absorbs a raised exception into the error channel and ``ok_or_raise`` /
``ok_or_block`` hand an unresolved error back to exception-based code.

Usage:
    def parse_port(raw: str) -> Result[int, str]:
        if not raw.isdigit():
            return Error(f"not a number: {raw}")
        return Ok(int(raw))

    port = (
        parse_port(raw)
        .chain_ok(check_range)
        .on_error(log_error("Invalid port"))
        .get_or_default(lambda _: 8000)
    )

    match parse_port(raw):
        case Ok(value):
            print(f"Port: {value}")
        case Error(reason):
            print(f"Error: {reason}")
"""

from __future__ import annotations

from collections.abc import Callable
from contextlib import suppress
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, NoReturn, TypeVar

from fallible.core.constants import (
    LOG_EVENT_BLOCKED,
    LOG_EVENT_CAUGHT,
    LOG_EVENT_RAISED,
    NOT_FOUND_MESSAGE,
)
from fallible.core.container import get_logger
from fallible.core.errors import BlockReturnedError, NotFoundError, UnwrapError

if TYPE_CHECKING:
    from fallible.core.context_result import ContextError, ContextOk

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type
R = TypeVar("R")  # Mapped type
C = TypeVar("C")  # Context type


@dataclass(frozen=True, slots=True)
class Ok(Generic[T, E]):
    """Represents a successful operation result.

    Attributes:
        data: The successful result value.
    """

    data: T

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    def is_ok(self) -> bool:
        return True

    def is_error(self) -> bool:
        return False

    def as_ok(self) -> Ok[T, E] | None:
        """Narrow to ``Ok``; ``None`` when this is an ``Error``."""
        return self

    def as_error(self) -> Error[T, E] | None:
        """Narrow to ``Error``; ``None`` when this is an ``Ok``."""
        return None

    def get_ok(self) -> T | None:
        return self.data

    def get_error(self) -> E | None:
        return None

    def get(self) -> Any:
        """Return whichever payload is present, success or error."""
        return self.data

    # ------------------------------------------------------------------
    # Transformation
    # ------------------------------------------------------------------

    def map_ok(self, f: Callable[[T], R]) -> Result[R, E]:
        """Replace the success payload with ``f(data)``.

        Args:
            f: Transformation applied to the success payload.

        Returns:
            ``Ok(f(data))``; an ``Error`` passes through unchanged.
        """
        return Ok(f(self.data))

    def map_error(self, f: Callable[[E], R]) -> Result[T, R]:
        """Replace the error payload with ``f(error)``; ``Ok`` passes through."""
        return Ok(self.data)

    def map_error_to_ok(self, f: Callable[[E], T]) -> Result[T, E]:
        """Recover any ``Error`` into ``Ok(f(error))``.

        Every error is treated as recoverable; use ``chain_error`` when only
        some errors can be recovered.
        """
        return self

    def chain_ok(self, f: Callable[[T], Result[R, E]]) -> Result[R, E]:
        """Bind the next fallible step on the success channel.

        Args:
            f: Step receiving the success payload and returning a new Result.

        Returns:
            Whatever ``f`` returns; an ``Error`` short-circuits and ``f`` is
            never called.
        """
        return f(self.data)

    def chain_error(self, f: Callable[[E], Result[T, E]]) -> Result[T, E]:
        """Bind a recovery step on the error channel; never called on ``Ok``."""
        return self

    def fold(self, ok_fn: Callable[[T], R], err_fn: Callable[[E], R]) -> R:
        """Eliminate into a single value with one handler per variant.

        Args:
            ok_fn: Applied to the success payload.
            err_fn: Applied to the error payload.

        Returns:
            The output of whichever handler matched the present variant.
        """
        return self.map_error(err_fn).map_ok(ok_fn).merge()

    def merge(self: Ok[R, R]) -> R:
        """Return the held value of a Result whose two payload types coincide."""
        return self.data

    def map_merge(self: Ok[T, T], f: Callable[[T], R]) -> R:
        """Return ``f(self.merge())``."""
        return f(self.merge())

    def on_ok(self, f: Callable[[T], Any]) -> Result[T, E]:
        """Call ``f(data)`` for its side effect and return ``self`` unchanged."""
        f(self.data)
        return self

    def on_error(self, f: Callable[[E], Any]) -> Result[T, E]:
        """Call ``f(error)`` for its side effect on ``Error``; return ``self``."""
        return self

    def on_ok_not_none(self, f: Callable[[T], Any]) -> Result[T, E]:
        """Like ``on_ok`` but skipped when the success payload is ``None``."""
        if self.data is not None:
            f(self.data)
        return self

    # ------------------------------------------------------------------
    # Elimination (boundary operations)
    # ------------------------------------------------------------------

    def ok_or_block(self, f: Callable[[E], NoReturn]) -> T:
        """Return the success payload or hand the error to a diverging callback.

        Args:
            f: Called with the error payload; must raise or otherwise abort.

        Returns:
            The success payload.

        Raises:
            BlockReturnedError: If ``f`` returns instead of diverging.
        """
        return self.data

    def ok_or_raise(self, factory: Callable[[], BaseException] | None = None) -> T:
        """Return the success payload or raise.

        Args:
            factory: Optional zero-argument callable producing the exception
                to raise. Without it the error payload itself is raised.

        Returns:
            The success payload.

        Raises:
            BaseException: The error payload, or ``factory()``.
            UnwrapError: If the error payload is not an exception and no
                factory was given.
        """
        return self.data

    def get_or_default(self, f: Callable[[E], T]) -> T:
        """Return the success payload, or a fallback computed from the error."""
        return self.data

    def ok_and(self, predicate: Callable[[T], bool]) -> bool:
        """``predicate(data)`` on ``Ok``; ``False`` on ``Error``."""
        return predicate(self.data)

    def error_and(self, predicate: Callable[[E], bool]) -> bool:
        """``predicate(error)`` on ``Error``; ``False`` on ``Ok``."""
        return False

    # ------------------------------------------------------------------
    # Retyping
    # ------------------------------------------------------------------

    def none_to_error(self: Ok[T | None, E], f: Callable[[], E]) -> Result[T, E]:
        """Turn ``Ok(None)`` into ``Error(f())``; unwrap any other ``Ok``."""
        if self.data is None:
            return Error(f())
        return Ok(self.data)

    def error_to_any(self) -> ResultAny[T]:
        return Ok(self.data)

    def error_to_unit(self) -> ResultUnit[T]:
        """Erase the error payload to ``None``."""
        return Ok(self.data)

    def with_context(self, context: C) -> ContextOk[C, T, E]:
        """Attach ``context`` and promote to a ContextResult."""
        from fallible.core.bridge import with_context

        return with_context(self, context)


@dataclass(frozen=True, slots=True)
class Error(Generic[T, E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E

    def is_ok(self) -> bool:
        return False

    def is_error(self) -> bool:
        return True

    def as_ok(self) -> Ok[T, E] | None:
        return None

    def as_error(self) -> Error[T, E] | None:
        return self

    def get_ok(self) -> T | None:
        return None

    def get_error(self) -> E | None:
        return self.error

    def get(self) -> Any:
        return self.error

    def map_ok(self, f: Callable[[T], R]) -> Result[R, E]:
        return Error(self.error)

    def map_error(self, f: Callable[[E], R]) -> Result[T, R]:
        return Error(f(self.error))

    def map_error_to_ok(self, f: Callable[[E], T]) -> Result[T, E]:
        return Ok(f(self.error))

    def chain_ok(self, f: Callable[[T], Result[R, E]]) -> Result[R, E]:
        return Error(self.error)

    def chain_error(self, f: Callable[[E], Result[T, E]]) -> Result[T, E]:
        return f(self.error)

    def fold(self, ok_fn: Callable[[T], R], err_fn: Callable[[E], R]) -> R:
        return self.map_error(err_fn).map_ok(ok_fn).merge()

    def merge(self: Error[R, R]) -> R:
        return self.error

    def map_merge(self: Error[T, T], f: Callable[[T], R]) -> R:
        return f(self.merge())

    def on_ok(self, f: Callable[[T], Any]) -> Result[T, E]:
        return self

    def on_error(self, f: Callable[[E], Any]) -> Result[T, E]:
        f(self.error)
        return self

    def on_ok_not_none(self, f: Callable[[T], Any]) -> Result[T, E]:
        return self

    def ok_or_block(self, f: Callable[[E], NoReturn]) -> T:
        get_logger().debug(LOG_EVENT_BLOCKED, error_type=type(self.error).__name__)
        returned = f(self.error)
        raise BlockReturnedError(self.error, returned)

    def ok_or_raise(self, factory: Callable[[], BaseException] | None = None) -> T:
        get_logger().debug(LOG_EVENT_RAISED, error_type=type(self.error).__name__)
        cause = self.error if isinstance(self.error, BaseException) else None
        if factory is not None:
            raise factory() from cause
        if cause is not None:
            raise cause.with_traceback(None)
        raise UnwrapError(self.error)

    def get_or_default(self, f: Callable[[E], T]) -> T:
        return f(self.error)

    def ok_and(self, predicate: Callable[[T], bool]) -> bool:
        return False

    def error_and(self, predicate: Callable[[E], bool]) -> bool:
        return predicate(self.error)

    def none_to_error(self: Error[T | None, E], f: Callable[[], E]) -> Result[T, E]:
        return Error(self.error)

    def error_to_any(self) -> ResultAny[T]:
        return Error(self.error)

    def error_to_unit(self) -> ResultUnit[T]:
        return Error(None)

    def with_context(self, context: C) -> ContextError[C, T, E]:
        from fallible.core.bridge import with_context

        return with_context(self, context)


# Type alias for Result union
type Result[T, E] = Ok[T, E] | Error[T, E]

# Result of catch(): the error channel holds the captured exception
type CatchResult[T] = Result[T, Exception]

type ResultAny[T] = Result[T, Any]
type ResultUnit[T] = Result[T, None]


# =============================================================================
# Construction
# =============================================================================


def ok(data: T) -> Ok[T, Any]:
    """Wrap ``data`` as a success."""
    return Ok(data)


def error(err: E) -> Error[Any, E]:
    """Wrap ``err`` as a failure."""
    return Error(err)


def catch(block: Callable[[], T]) -> CatchResult[T]:
    """Run ``block`` under a failure boundary.

    Args:
        block: Zero-argument computation.

    Returns:
        ``Ok`` with the return value, or ``Error`` with the exception the
        block raised. Only ``Exception`` subclasses are captured;
        ``KeyboardInterrupt`` and ``SystemExit`` propagate.
    """
    try:
        return Ok(block())
    except Exception as exc:
        captured: CatchResult[T] = Error(exc)
        _log_caught(exc)
        return captured


def _log_caught(exc: Exception) -> None:
    # Logging must not turn a captured failure into a raised one.
    with suppress(Exception):
        get_logger().debug(LOG_EVENT_CAUGHT, error_type=type(exc).__name__)


# =============================================================================
# Wrapping sugar
# =============================================================================


def wrap_ok(value: T) -> Ok[T, Any]:
    return Ok(value)


def wrap_error(value: E) -> Error[Any, E]:
    return Error(value)


def _not_found_message() -> str:
    return NOT_FOUND_MESSAGE


def wrap_ok_not_none(
    value: T | None, msg: Callable[[], str] = _not_found_message
) -> CatchResult[T]:
    """Wrap a present value as ``Ok`` and an absent one as ``Error``.

    Args:
        value: Possibly-``None`` value.
        msg: Produces the message of the NotFoundError used for ``None``.

    Returns:
        ``Ok(value)``, or ``Error(NotFoundError(msg()))`` when value is None.
    """
    if value is None:
        return Error(NotFoundError(msg()))
    return Ok(value)


__all__ = [
    "CatchResult",
    "Error",
    "Ok",
    "Result",
    "ResultAny",
    "ResultUnit",
    "catch",
    "error",
    "ok",
    "wrap_error",
    "wrap_ok",
    "wrap_ok_not_none",
]
