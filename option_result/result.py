from __future__ import annotations

from dataclasses import dataclass
from typing import (
    Any,
    Callable,
    Generic,
    Optional,
    TypeAlias,
    TypeVar,
    Union,
)

from option_result.core._enums import ResultTag
from option_result.core._logging import get_logger, safe_log
from option_result.core.exceptions import UnwrapOnErr, UnwrapOnOk
from option_result.i_result import IResult
from option_result.option import NONE, Option, Some
from option_result.utils._utils import _require_arms, _require_present, type_name


__all__: list[str] = [
    "Ok",
    "Err",
    "Result",
    "ok",
    "err",
    "maybe_ok",
    "maybe_err",
]

T = TypeVar("T")   # success type
U = TypeVar("U")   # success type after transform
E = TypeVar("E")   # error type
F = TypeVar("F")   # error type after transform
R = TypeVar("R")   # match return type


@dataclass(frozen=True, slots=True)
class Ok(IResult[T, Any], Generic[T]):
    """
    Success variant of a Result.

    Example:
        >>> Ok(5).match(ok=lambda x: x, err=lambda _: -1)
        5
    """
    value: T

    def __post_init__(self) -> None:
        _require_present(self.value, "Ok")

    @property
    def tag(self) -> ResultTag:
        return ResultTag.OK

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def match(self, *, ok: Callable[[T], R], err: Callable[[Any], R]) -> R:
        _require_arms("Result", {"ok": ok, "err": err})
        return ok(self.value)

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> Any:
        safe_log(get_logger(), 'debug', f"called unwrap_err() on Ok: {self.value!r}")
        raise UnwrapOnOk(self.value)

    def expect(self, message: str) -> T:
        return self.value

    def expect_err(self, message: str) -> Any:
        safe_log(get_logger(), 'debug', f"called expect_err() on Ok: {message}")
        raise UnwrapOnOk(self.value, message)

    def unwrap_or(self, default: T) -> T:
        return self.value

    def unwrap_or_else(self, fn: Callable[[Any], T]) -> T:
        return self.value

    def contains(self, value: Any) -> bool:
        return self.value == value

    def contains_err(self, error: Any) -> bool:
        return False

    def and_(self, other: Result[U, E]) -> Result[U, E]:
        return other

    def or_(self, other: Result[T, F]) -> Result[T, F]:
        return self

    def map(self, fn: Callable[[T], U]) -> Result[U, Any]:
        return Ok(fn(self.value))

    def map_err(self, fn: Callable[[Any], F]) -> Result[T, F]:
        return self

    def and_then(self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return fn(self.value)

    def or_else(self, fn: Callable[[Any], Result[T, F]]) -> Result[T, F]:
        return self

    def tap(self, fn: Callable[[T], None]) -> Result[T, Any]:
        fn(self.value)
        return self

    def tap_err(self, fn: Callable[[Any], None]) -> Result[T, Any]:
        return self

    def ok(self) -> Option[T]:
        return Some(self.value)

    def err(self) -> Option[Any]:
        return NONE

    def __bool__(self) -> bool:
        return True

    def __str__(self) -> str:
        return f"Result<Ok,{type_name(self.value)}>({self.value})"


@dataclass(frozen=True, slots=True)
class Err(IResult[Any, E], Generic[E]):
    """
    Failure variant of a Result.

    Example:
        >>> Err("boom").match(ok=lambda x: x, err=lambda _: -1)
        -1
    """
    error: E

    def __post_init__(self) -> None:
        _require_present(self.error, "Err")

    @property
    def tag(self) -> ResultTag:
        return ResultTag.ERR

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def match(self, *, ok: Callable[[Any], R], err: Callable[[E], R]) -> R:
        _require_arms("Result", {"ok": ok, "err": err})
        return err(self.error)

    def unwrap(self) -> Any:
        safe_log(get_logger(), 'debug', f"called unwrap() on Err: {self.error!r}")
        raise UnwrapOnErr(self.error)

    def unwrap_err(self) -> E:
        return self.error

    def expect(self, message: str) -> Any:
        safe_log(get_logger(), 'debug', f"called expect() on Err: {message}")
        raise UnwrapOnErr(self.error, message)

    def expect_err(self, message: str) -> E:
        return self.error

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_or_else(self, fn: Callable[[E], T]) -> T:
        return fn(self.error)

    def contains(self, value: Any) -> bool:
        return False

    def contains_err(self, error: Any) -> bool:
        return self.error == error

    def and_(self, other: Result[U, E]) -> Result[U, E]:
        return self

    def or_(self, other: Result[T, F]) -> Result[T, F]:
        return other

    def map(self, fn: Callable[[Any], U]) -> Result[U, E]:
        return self

    def map_err(self, fn: Callable[[E], F]) -> Result[Any, F]:
        return Err(fn(self.error))

    def and_then(self, fn: Callable[[Any], Result[U, E]]) -> Result[U, E]:
        return self

    def or_else(self, fn: Callable[[E], Result[T, F]]) -> Result[T, F]:
        return fn(self.error)

    def tap(self, fn: Callable[[Any], None]) -> Result[Any, E]:
        return self

    def tap_err(self, fn: Callable[[E], None]) -> Result[Any, E]:
        fn(self.error)
        return self

    def ok(self) -> Option[Any]:
        return NONE

    def err(self) -> Option[E]:
        return Some(self.error)

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return f"Result<Err,{type_name(self.error)}>({self.error})"


Result: TypeAlias = Union[Ok[T], Err[E]]


def ok(value: T) -> Ok[T]:
    """Build a success Result, raising InvalidConstruction if ``value`` is None."""
    return Ok(value)


def err(error: E) -> Err[E]:
    """Build a failure Result, raising InvalidConstruction if ``error`` is None."""
    return Err(error)


def maybe_ok(value: Optional[T]) -> Option[Result[T, Any]]:
    """
    Build ``Some(Ok(value))``, or NONE when ``value`` is None.

    Unlike ``ok``, absence is not an error here: the caller gets an empty
    Option back instead of a malformed Ok.

    Example:
        >>> maybe_ok(3)
        Some(value=Ok(value=3))
        >>> maybe_ok(None) is NONE
        True
    """
    if value is None:
        return NONE
    return Some(Ok(value))


def maybe_err(error: Optional[E]) -> Option[Result[Any, E]]:
    """Build ``Some(Err(error))``, or NONE when ``error`` is None."""
    if error is None:
        return NONE
    return Some(Err(error))
