"""Core result algebra.

This module provides:
- Result types (Ok / Error) and their combinators
- ContextResult types (ContextOk / ContextError) threading a context value
- Bridging between the two algebras
- Collection helpers and logging observers
- The exceptions the algebra itself can produce

The core algebra has NO dependencies outside this package apart from the
logging and settings stack.
"""

from fallible.core.bridge import to_res, with_context
from fallible.core.context_result import (
    ContextCatchResult,
    ContextError,
    ContextOk,
    ContextResult,
    context_catch,
    context_error,
    context_ok,
    wrap_context_error,
    wrap_context_ok,
)
from fallible.core.enums import ErrorCode
from fallible.core.errors import (
    BlockReturnedError,
    NotFoundError,
    ResultError,
    UnwrapError,
)
from fallible.core.observers import (
    log_context_error,
    log_context_ok,
    log_error,
    log_ok,
)
from fallible.core.result import (
    CatchResult,
    Error,
    Ok,
    Result,
    ResultAny,
    ResultUnit,
    catch,
    error,
    ok,
    wrap_error,
    wrap_ok,
    wrap_ok_not_none,
)
from fallible.core.sequences import (
    filter_error,
    filter_ok,
    map_res_error,
    map_res_ok,
    on_each_res_error,
    on_each_res_ok,
)

__all__ = [
    # Result
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
    # ContextResult
    "ContextCatchResult",
    "ContextError",
    "ContextOk",
    "ContextResult",
    "context_catch",
    "context_error",
    "context_ok",
    "wrap_context_error",
    "wrap_context_ok",
    # Bridging
    "to_res",
    "with_context",
    # Collections
    "filter_error",
    "filter_ok",
    "map_res_error",
    "map_res_ok",
    "on_each_res_error",
    "on_each_res_ok",
    # Observers
    "log_context_error",
    "log_context_ok",
    "log_error",
    "log_ok",
    # Errors
    "BlockReturnedError",
    "ErrorCode",
    "NotFoundError",
    "ResultError",
    "UnwrapError",
]
