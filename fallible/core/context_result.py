"""Result types that carry a context value on both variants.

A ContextResult is exactly one of:

- ``ContextOk(context, data)``
- ``ContextError(context, error)``

The context (typically a request-scoped bound logger, see
``fallible.protocols.logger_protocol``) survives whichever branch a pipeline
takes. Every callback that receives a payload also receives the context as
its leading argument, so each step can use it, but only ``map_context`` and
``chain_ok`` / ``chain_error`` (whose callback builds the next instance) can
change it.

Usage:
    def load_user(log: LoggerProtocol, user_id: str) -> ContextResult[...]:
        log.info("Loading user", user_id=user_id)
        return context_catch(log, lambda: repository.get(user_id))

    user = (
        context_ok(logger.bind(request_id=rid), user_id)
        .chain_ok(load_user)
        .on_error(log_context_error("User lookup failed"))
        .ok_or_raise()
    )
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from functools import partial
from typing import Any, Generic, NoReturn, TypeVar

from fallible.core.result import Error, Ok, catch

C = TypeVar("C")  # Context type
T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type
R = TypeVar("R")  # Mapped type


@dataclass(frozen=True, slots=True)
class ContextOk(Generic[C, T, E]):
    """Successful result with its context.

    Attributes:
        context: Value threaded alongside the result.
        data: The successful result value.
    """

    context: C
    data: T

    def is_ok(self) -> bool:
        return True

    def is_error(self) -> bool:
        return False

    def as_ok(self) -> ContextOk[C, T, E] | None:
        return self

    def as_error(self) -> ContextError[C, T, E] | None:
        return None

    def get_ok(self) -> T | None:
        return self.data

    def get_error(self) -> E | None:
        return None

    def get(self) -> Any:
        """Return whichever payload is present, success or error."""
        return self.data

    def map_context(self, f: Callable[[C], R]) -> ContextResult[R, T, E]:
        """Replace the context with ``f(context)``; the payload is untouched.

        Args:
            f: Computes the new context from the current one.

        Returns:
            Same variant and payload with the new context.
        """
        return ContextOk(f(self.context), self.data)

    def map_ok(self, f: Callable[[C, T], R]) -> ContextResult[C, R, E]:
        """Replace the success payload with ``f(context, data)``.

        The context is propagated unchanged.
        """
        return ContextOk(self.context, f(self.context, self.data))

    def map_error(self, f: Callable[[C, E], R]) -> ContextResult[C, T, R]:
        return ContextOk(self.context, self.data)

    def map_error_to_ok(self, f: Callable[[C, E], T]) -> ContextResult[C, T, E]:
        return self

    def chain_ok(
        self, f: Callable[[C, T], ContextResult[C, R, E]]
    ) -> ContextResult[C, R, E]:
        """Bind the next step; ``f(context, data)`` returns the next instance.

        The returned instance carries whichever context ``f`` put in it.
        """
        return f(self.context, self.data)

    def chain_error(
        self, f: Callable[[C, E], ContextResult[C, T, E]]
    ) -> ContextResult[C, T, E]:
        return self

    def fold(self, ok_fn: Callable[[C, T], R], err_fn: Callable[[C, E], R]) -> R:
        """Eliminate into one value; both handlers receive the context."""
        return self.map_error(err_fn).map_ok(ok_fn).merge()

    def merge(self: ContextOk[C, R, R]) -> R:
        return self.data

    def map_merge(self: ContextOk[C, T, T], f: Callable[[C, T], R]) -> R:
        """Return ``f(context, self.merge())``."""
        return f(self.context, self.merge())

    def on_ok(self, f: Callable[[C, T], Any]) -> ContextResult[C, T, E]:
        f(self.context, self.data)
        return self

    def on_error(self, f: Callable[[C, E], Any]) -> ContextResult[C, T, E]:
        return self

    def on_ok_not_none(self, f: Callable[[C, T], Any]) -> ContextResult[C, T, E]:
        if self.data is not None:
            f(self.context, self.data)
        return self

    def ok_or_block(self, f: Callable[[C, E], NoReturn]) -> T:
        return self.data

    def ok_or_raise(self, factory: Callable[[], BaseException] | None = None) -> T:
        return self.data

    def get_or_default(self, f: Callable[[C, E], T]) -> T:
        return self.data

    def ok_and(self, predicate: Callable[[C, T], bool]) -> bool:
        return predicate(self.context, self.data)

    def error_and(self, predicate: Callable[[C, E], bool]) -> bool:
        return False

    def none_to_error(
        self: ContextOk[C, T | None, E], f: Callable[[], E]
    ) -> ContextResult[C, T, E]:
        """Turn ``data is None`` into ``ContextError(context, f())``."""
        if self.data is None:
            return ContextError(self.context, f())
        return ContextOk(self.context, self.data)

    def error_to_any(self) -> ContextResult[C, T, Any]:
        return ContextOk(self.context, self.data)

    def error_to_unit(self) -> ContextResult[C, T, None]:
        return ContextOk(self.context, self.data)

    def to_res(self) -> Ok[T, E]:
        """Drop the context, keeping the variant and payload."""
        from fallible.core.bridge import to_res

        return to_res(self)


@dataclass(frozen=True, slots=True)
class ContextError(Generic[C, T, E]):
    """Failed result with its context.

    Attributes:
        context: Value threaded alongside the result.
        error: The error that occurred.
    """

    context: C
    error: E

    def is_ok(self) -> bool:
        return False

    def is_error(self) -> bool:
        return True

    def as_ok(self) -> ContextOk[C, T, E] | None:
        return None

    def as_error(self) -> ContextError[C, T, E] | None:
        return self

    def get_ok(self) -> T | None:
        return None

    def get_error(self) -> E | None:
        return self.error

    def get(self) -> Any:
        return self.error

    def map_context(self, f: Callable[[C], R]) -> ContextResult[R, T, E]:
        return ContextError(f(self.context), self.error)

    def map_ok(self, f: Callable[[C, T], R]) -> ContextResult[C, R, E]:
        return ContextError(self.context, self.error)

    def map_error(self, f: Callable[[C, E], R]) -> ContextResult[C, T, R]:
        return ContextError(self.context, f(self.context, self.error))

    def map_error_to_ok(self, f: Callable[[C, E], T]) -> ContextResult[C, T, E]:
        return ContextOk(self.context, f(self.context, self.error))

    def chain_ok(
        self, f: Callable[[C, T], ContextResult[C, R, E]]
    ) -> ContextResult[C, R, E]:
        return ContextError(self.context, self.error)

    def chain_error(
        self, f: Callable[[C, E], ContextResult[C, T, E]]
    ) -> ContextResult[C, T, E]:
        return f(self.context, self.error)

    def fold(self, ok_fn: Callable[[C, T], R], err_fn: Callable[[C, E], R]) -> R:
        return self.map_error(err_fn).map_ok(ok_fn).merge()

    def merge(self: ContextError[C, R, R]) -> R:
        return self.error

    def map_merge(self: ContextError[C, T, T], f: Callable[[C, T], R]) -> R:
        return f(self.context, self.merge())

    def on_ok(self, f: Callable[[C, T], Any]) -> ContextResult[C, T, E]:
        return self

    def on_error(self, f: Callable[[C, E], Any]) -> ContextResult[C, T, E]:
        f(self.context, self.error)
        return self

    def on_ok_not_none(self, f: Callable[[C, T], Any]) -> ContextResult[C, T, E]:
        return self

    def ok_or_block(self, f: Callable[[C, E], NoReturn]) -> T:
        return Error(self.error).ok_or_block(partial(f, self.context))

    def ok_or_raise(self, factory: Callable[[], BaseException] | None = None) -> T:
        return Error(self.error).ok_or_raise(factory)

    def get_or_default(self, f: Callable[[C, E], T]) -> T:
        return f(self.context, self.error)

    def ok_and(self, predicate: Callable[[C, T], bool]) -> bool:
        return False

    def error_and(self, predicate: Callable[[C, E], bool]) -> bool:
        return predicate(self.context, self.error)

    def none_to_error(
        self: ContextError[C, T | None, E], f: Callable[[], E]
    ) -> ContextResult[C, T, E]:
        return ContextError(self.context, self.error)

    def error_to_any(self) -> ContextResult[C, T, Any]:
        return ContextError(self.context, self.error)

    def error_to_unit(self) -> ContextResult[C, T, None]:
        return ContextError(self.context, None)

    def to_res(self) -> Error[T, E]:
        from fallible.core.bridge import to_res

        return to_res(self)


# Type alias for ContextResult union
type ContextResult[C, T, E] = ContextOk[C, T, E] | ContextError[C, T, E]

# Result of context_catch(): the error channel holds the captured exception
type ContextCatchResult[C, T] = ContextResult[C, T, Exception]


# =============================================================================
# Construction
# =============================================================================


def context_ok(context: C, data: T) -> ContextOk[C, T, Any]:
    return ContextOk(context, data)


def context_error(context: C, err: E) -> ContextError[C, Any, E]:
    return ContextError(context, err)


def context_catch(context: C, block: Callable[[], T]) -> ContextCatchResult[C, T]:
    """Run ``block`` under a failure boundary and attach ``context``.

    Same capture rules as ``fallible.core.result.catch``.
    """
    return catch(block).with_context(context)


def wrap_context_ok(value: T, context: C) -> ContextOk[C, T, Any]:
    return ContextOk(context, value)


def wrap_context_error(value: E, context: C) -> ContextError[C, Any, E]:
    return ContextError(context, value)


__all__ = [
    "ContextCatchResult",
    "ContextError",
    "ContextOk",
    "ContextResult",
    "context_catch",
    "context_error",
    "context_ok",
    "wrap_context_error",
    "wrap_context_ok",
]
