from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Generic, Iterator, TypeVar

from option_result.core._enums import OptionTag

if TYPE_CHECKING:
    from option_result.option import Option
    from option_result.result import Result

__all__: list[str] = [
    "IOption",
]

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
R = TypeVar("R")


class IOption(ABC, Generic[T]):
    """
    Interface shared by the two Option variants, ``Some`` and ``Nothing``.

    Every operation is total except the debugging accessors ``unwrap`` and
    ``expect``, which raise ``EmptyUnwrap`` on an empty Option. Prefer
    ``match`` or the ``unwrap_or`` family in production code.
    """

    __slots__ = ()

    @property
    @abstractmethod
    def tag(self) -> OptionTag:
        """Discriminant of this instance."""
        pass

    @abstractmethod
    def is_some(self) -> bool:
        """True if this Option holds a value."""
        pass

    @abstractmethod
    def is_none(self) -> bool:
        """True if this Option is empty."""
        pass

    @abstractmethod
    def match(self, *, some: Callable[[T], R], none: Callable[[], R]) -> R:
        """Call exactly one handler based on the tag and return its result."""
        pass

    @abstractmethod
    def unwrap(self) -> T:
        """Return the held value or raise EmptyUnwrap. Debugging and tests only."""
        pass

    @abstractmethod
    def expect(self, message: str) -> T:
        """Like unwrap, raising EmptyUnwrap with ``message``."""
        pass

    @abstractmethod
    def unwrap_or(self, default: T) -> T:
        """Return the held value, or ``default`` when empty."""
        pass

    @abstractmethod
    def unwrap_or_else(self, default_fn: Callable[[], T]) -> T:
        """Return the held value, or call ``default_fn`` only when empty."""
        pass

    @abstractmethod
    def contains(self, value: Any) -> bool:
        """True if this Option holds a value equal (``==``) to ``value``."""
        pass

    @abstractmethod
    def and_(self, other: Option[U]) -> Option[U]:
        """Return ``other`` if both are Some, otherwise NONE."""
        pass

    @abstractmethod
    def or_(self, other: Option[T]) -> Option[T]:
        """Return self if Some, otherwise ``other``."""
        pass

    @abstractmethod
    def map(self, fn: Callable[[T], U]) -> Option[U]:
        """Transform the held value; a None return yields NONE."""
        pass

    @abstractmethod
    def and_then(self, fn: Callable[[T], Option[U]]) -> Option[U]:
        """Chain a computation that may itself produce no value."""
        pass

    @abstractmethod
    def or_else(self, fn: Callable[[], Option[T]]) -> Option[T]:
        """Return self if Some, otherwise the Option built by ``fn``."""
        pass

    @abstractmethod
    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Keep the value only if ``predicate`` accepts it."""
        pass

    @abstractmethod
    def ok_or(self, error: E) -> Result[T, E]:
        """Convert to Ok(value), or Err(error) when empty."""
        pass

    @abstractmethod
    def ok_or_else(self, error_fn: Callable[[], E]) -> Result[T, E]:
        """Convert to Ok(value), or Err(error_fn()) when empty."""
        pass

    @abstractmethod
    def __iter__(self) -> Iterator[T]:
        pass

    @abstractmethod
    def __bool__(self) -> bool:
        pass
