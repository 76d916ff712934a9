"""Collection helpers over ordered sequences of results.

The helpers only call instance methods (``map_ok``, ``on_ok``, ``as_ok``...),
so they accept ContextResult elements as well; callbacks then take the
context as their leading argument, exactly as on a single instance.

Usage:
    results = [parse(line) for line in lines]
    parsed = [r.data for r in filter_ok(results)]
    on_each_res_error(results, log_error("Unparseable line"))
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from fallible.core.result import Error, Ok, Result

T = TypeVar("T")
E = TypeVar("E")
R = TypeVar("R")
S = TypeVar("S", bound=Iterable[Any])


def map_res_ok(
    results: Iterable[Result[T, E]], f: Callable[[T], R]
) -> list[Result[R, E]]:
    """Map the success payload of every ``Ok``; order and length preserved."""
    return [r.map_ok(f) for r in results]


def map_res_error(
    results: Iterable[Result[T, E]], f: Callable[[E], R]
) -> list[Result[T, R]]:
    """Map the error payload of every ``Error``; order and length preserved."""
    return [r.map_error(f) for r in results]


def on_each_res_ok(results: S, f: Callable[..., Any]) -> S:
    """Call ``f`` on every success payload and return ``results`` itself.

    ``results`` is iterated once, so pass a re-iterable sequence when the
    return value is used.
    """
    for r in results:
        r.on_ok(f)
    return results


def on_each_res_error(results: S, f: Callable[..., Any]) -> S:
    """Call ``f`` on every error payload and return ``results`` itself."""
    for r in results:
        r.on_error(f)
    return results


def filter_ok(results: Iterable[Result[T, E]]) -> list[Ok[T, E]]:
    """Keep only the ``Ok`` elements, preserving their relative order."""
    return [ok for r in results if (ok := r.as_ok()) is not None]


def filter_error(results: Iterable[Result[T, E]]) -> list[Error[T, E]]:
    """Keep only the ``Error`` elements, preserving their relative order."""
    return [err for r in results if (err := r.as_error()) is not None]


__all__ = [
    "filter_error",
    "filter_ok",
    "map_res_error",
    "map_res_ok",
    "on_each_res_error",
    "on_each_res_ok",
]
