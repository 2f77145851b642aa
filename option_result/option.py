from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Iterator, Optional, TypeAlias, TypeVar, Union

from option_result.core._enums import OptionTag
from option_result.core._logging import get_logger, safe_log
from option_result.core.exceptions import EmptyUnwrap
from option_result.i_option import IOption
from option_result.utils._utils import (
    SingletonABCMeta,
    _require_arms,
    _require_present,
    type_name,
)

if TYPE_CHECKING:
    from option_result.result import Result


__all__: list[str] = [
    "Some",
    "Nothing",
    "Option",
    "NONE",
    "some",
    "none",
    "from_optional",
]

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
R = TypeVar("R")


@dataclass(frozen=True, slots=True)
class Some(IOption[T]):
    """
    An Option holding exactly one present value.

    ``None`` is never a valid payload: ``Some(None)`` raises
    ``InvalidConstruction``. Use ``from_optional`` to turn a nullable value
    into an Option.

    Example:
        >>> Some(5).unwrap_or(0)
        5
        >>> match Some(5):
        ...     case Some(v): print(v)
        5
    """
    value: T

    def __post_init__(self) -> None:
        _require_present(self.value, "Some")

    @property
    def tag(self) -> OptionTag:
        return OptionTag.SOME

    def is_some(self) -> bool:
        return True

    def is_none(self) -> bool:
        return False

    def match(self, *, some: Callable[[T], R], none: Callable[[], R]) -> R:
        _require_arms("Option", {"some": some, "none": none})
        return some(self.value)

    def unwrap(self) -> T:
        return self.value

    def expect(self, message: str) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def unwrap_or_else(self, default_fn: Callable[[], T]) -> T:
        return self.value

    def contains(self, value: Any) -> bool:
        return self.value == value

    def and_(self, other: Option[U]) -> Option[U]:
        return other if other.is_some() else NONE

    def or_(self, other: Option[T]) -> Option[T]:
        return self

    def map(self, fn: Callable[[T], U]) -> Option[U]:
        return from_optional(fn(self.value))

    def and_then(self, fn: Callable[[T], Option[U]]) -> Option[U]:
        return fn(self.value)

    def or_else(self, fn: Callable[[], Option[T]]) -> Option[T]:
        return self

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        return self if predicate(self.value) else NONE

    def ok_or(self, error: E) -> Result[Any, E]:
        from option_result.result import Ok

        return Ok(self.value)

    def ok_or_else(self, error_fn: Callable[[], E]) -> Result[Any, E]:
        from option_result.result import Ok

        return Ok(self.value)

    def __iter__(self) -> Iterator[T]:
        yield self.value

    def __bool__(self) -> bool:
        return True

    def __str__(self) -> str:
        return f"Option<{type_name(self.value)}>({self.value})"


@dataclass(frozen=True, slots=True)
class Nothing(IOption[Any], metaclass=SingletonABCMeta):
    """
    The empty Option.

    There is a single process-wide instance, exported as ``NONE``;
    ``Nothing()`` always returns it.
    """

    @property
    def tag(self) -> OptionTag:
        return OptionTag.NONE

    def is_some(self) -> bool:
        return False

    def is_none(self) -> bool:
        return True

    def match(self, *, some: Callable[[Any], R], none: Callable[[], R]) -> R:
        _require_arms("Option", {"some": some, "none": none})
        return none()

    def unwrap(self) -> Any:
        safe_log(get_logger(), 'debug', "called unwrap() on Nothing")
        raise EmptyUnwrap()

    def expect(self, message: str) -> Any:
        safe_log(get_logger(), 'debug', f"called expect() on Nothing: {message}")
        raise EmptyUnwrap(message)

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_or_else(self, default_fn: Callable[[], T]) -> T:
        return default_fn()

    def contains(self, value: Any) -> bool:
        return False

    def and_(self, other: Option[U]) -> Option[U]:
        return self

    def or_(self, other: Option[T]) -> Option[T]:
        return other

    def map(self, fn: Callable[[Any], U]) -> Option[U]:
        return self

    def and_then(self, fn: Callable[[Any], Option[U]]) -> Option[U]:
        return self

    def or_else(self, fn: Callable[[], Option[T]]) -> Option[T]:
        return fn()

    def filter(self, predicate: Callable[[Any], bool]) -> Option[Any]:
        return self

    def ok_or(self, error: E) -> Result[Any, E]:
        from option_result.result import Err

        return Err(error)

    def ok_or_else(self, error_fn: Callable[[], E]) -> Result[Any, E]:
        from option_result.result import Err

        return Err(error_fn())

    def __iter__(self) -> Iterator[Any]:
        return iter(())

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return "Option<None>"

    def __reduce__(self) -> tuple[type[Nothing], tuple[()]]:
        # copy/pickle go back through Nothing() so the singleton survives
        return (Nothing, ())


Option: TypeAlias = Union[Some[T], Nothing]

NONE: Nothing = Nothing()


def some(value: T) -> Some[T]:
    """Build a Some, raising InvalidConstruction if ``value`` is None."""
    return Some(value)


def none() -> Nothing:
    """Return the shared empty Option."""
    return NONE


def from_optional(value: Optional[T]) -> Option[T]:
    """Convert a nullable value: None becomes NONE, anything else Some(value)."""
    return NONE if value is None else Some(value)
