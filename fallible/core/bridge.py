"""Conversions between Result and ContextResult.

These are the only two conversions between the algebras:

- ``to_res``: ContextResult -> Result, dropping the context.
- ``with_context``: Result -> ContextResult, attaching a context.

Both preserve the variant and the payload, so
``with_context(r, ctx).to_res() == r`` for every Result ``r``.
"""

from __future__ import annotations

from typing import TypeVar

from fallible.core.context_result import ContextError, ContextOk, ContextResult
from fallible.core.result import Error, Ok, Result

C = TypeVar("C")
T = TypeVar("T")
E = TypeVar("E")


def to_res(cr: ContextResult[C, T, E]) -> Result[T, E]:
    match cr:
        case ContextOk(data=data):
            return Ok(data)
        case ContextError(error=err):
            return Error(err)
    raise TypeError(f"Expected ContextOk or ContextError, got {type(cr).__name__}")


def with_context(r: Result[T, E], context: C) -> ContextResult[C, T, E]:
    match r:
        case Ok(data=data):
            return ContextOk(context, data)
        case Error(error=err):
            return ContextError(context, err)
    raise TypeError(f"Expected Ok or Error, got {type(r).__name__}")


__all__ = ["to_res", "with_context"]
