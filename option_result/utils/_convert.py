from __future__ import annotations

from typing import (
    Callable,
    Iterable,
    Optional,
    TypeGuard,
    TypeVar,
)

from option_result.core._logging import get_logger, safe_log
from option_result.option import NONE, Nothing, Option, Some
from option_result.result import Err, Ok, Result

__all__: list[str] = [
    "is_some",
    "is_nothing",
    "is_ok",
    "is_err",
    "option_to_result",
    "result_to_option",
    "from_optional_result",
    "try_",
    "try_call_",
    "try_with_",
    "collect",
    "collect_options",
    "partition",
    "partition_with_key",
    "flatten",
    "transpose",
]

T = TypeVar("T")   # success type
E = TypeVar("E")   # error type
K = TypeVar("K")   # key type


def is_some(opt: Option[T]) -> TypeGuard[Some[T]]:
    return isinstance(opt, Some)

def is_nothing(opt: Option[T]) -> TypeGuard[Nothing]:
    return isinstance(opt, Nothing)

def is_ok(r: Result[T, E]) -> TypeGuard[Ok[T]]:
    return isinstance(r, Ok)

def is_err(r: Result[T, E]) -> TypeGuard[Err[E]]:
    return isinstance(r, Err)


def option_to_result(opt: Option[T], error: E) -> Result[T, E]:
    """Convert Option to Result, using error if NONE."""
    return opt.ok_or(error)

def result_to_option(r: Result[T, E]) -> Option[T]:
    """Convert Result to Option, discarding error info."""
    return r.ok()

def from_optional_result(value: Optional[T], error: E) -> Result[T, E]:
    """Convert a nullable value to Result, using error if None."""
    return Ok(value) if value is not None else Err(error)


def try_(fn: Callable[[], T]) -> Result[T, Exception]:
    """
    Wrap a function call, catching exceptions as Err.

    Only exceptions raised by ``fn`` are captured. A None return is not a
    failure of ``fn``, so the InvalidConstruction from ``Ok`` propagates.
    """
    try:
        value: T = fn()
    except Exception as e:
        safe_log(get_logger(), 'debug', f"try_ caught {type(e).__name__}: {e}")
        return Err(e)
    return Ok(value)

def try_call_(fn: Callable[..., T], *args, **kwargs) -> Result[T, Exception]:
    """Call fn with args/kwargs, catching exceptions as Err."""
    return try_(lambda: fn(*args, **kwargs))

def try_with_(
    fn: Callable[[], T],
    exc_types: tuple[type[Exception], ...] = (Exception,)
) -> Result[T, Exception]:
    """Wrap a function call, catching only the given exception types as Err."""
    try:
        value: T = fn()
    except exc_types as e:
        safe_log(get_logger(), 'debug', f"try_with_ caught {type(e).__name__}: {e}")
        return Err(e)
    return Ok(value)


def collect(results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """Convert Results to a Result of list. Stops at first Err."""
    values: list[T] = []
    for r in results:
        if r.is_err():
            return r
        values.append(r.unwrap())
    return Ok(values)

def collect_options(options: Iterable[Option[T]]) -> Option[list[T]]:
    """Convert Options to an Option of list. Stops at first NONE."""
    values: list[T] = []
    for opt in options:
        if opt.is_none():
            return NONE
        values.append(opt.unwrap())
    return Some(values)

def partition(results: Iterable[Result[T, E]]) -> tuple[list[T], list[E]]:
    """Split results into (ok_values, err_values)."""
    oks: list[T] = []
    errs: list[E] = []
    for r in results:
        r.match(ok=oks.append, err=errs.append)
    return oks, errs

def partition_with_key(
    items: Iterable[tuple[K, Result[T, E]]]
) -> tuple[list[tuple[K, T]], list[tuple[K, E]]]:
    """Split (key, Result) pairs into successes and failures, preserving keys."""
    oks: list[tuple[K, T]] = []
    errs: list[tuple[K, E]] = []
    for key, r in items:
        r.match(
            ok=lambda value: oks.append((key, value)),
            err=lambda error: errs.append((key, error)),
        )
    return oks, errs


def flatten(opt: Option[Option[T]]) -> Option[T]:
    """Remove one level of Option nesting."""
    return opt.and_then(lambda inner: inner)

def transpose(opt: Option[Result[T, E]]) -> Result[Option[T], E]:
    """
    Swap an Option of Result into a Result of Option.

    NONE becomes ``Ok(NONE)``, ``Some(Ok(v))`` becomes ``Ok(Some(v))`` and
    ``Some(Err(e))`` becomes ``Err(e)``. Pairs with ``maybe_ok``/``maybe_err``.
    """
    return opt.match(
        some=lambda r: r.map(Some),
        none=lambda: Ok(NONE),
    )
