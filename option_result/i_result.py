from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar

from option_result.core._enums import ResultTag

if TYPE_CHECKING:
    from option_result.option import Option
    from option_result.result import Result

__all__: list[str] = [
    "IResult",
]

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")
R = TypeVar("R")


class IResult(ABC, Generic[T, E]):
    """
    Interface shared by the two Result variants, ``Ok`` and ``Err``.

    Truth tables of the combinators:

        ==========  ==========  =============  =============
        self        other       self.and_(o)   self.or_(o)
        ==========  ==========  =============  =============
        Ok          Ok          other          self
        Ok          Err         other          self
        Err         Ok          self           other
        Err         Err         self           other
        ==========  ==========  =============  =============

    ``unwrap``, ``unwrap_err``, ``expect`` and ``expect_err`` are escape
    hatches for tests and debugging; they raise ``UnwrapOnErr`` /
    ``UnwrapOnOk`` when the tag does not match.
    """

    __slots__ = ()

    @property
    @abstractmethod
    def tag(self) -> ResultTag:
        """Discriminant of this instance."""
        pass

    @abstractmethod
    def is_ok(self) -> bool:
        pass

    @abstractmethod
    def is_err(self) -> bool:
        pass

    @abstractmethod
    def match(self, *, ok: Callable[[T], R], err: Callable[[E], R]) -> R:
        """Call exactly one handler based on the tag and return its result."""
        pass

    @abstractmethod
    def unwrap(self) -> T:
        """Return the success value or raise UnwrapOnErr."""
        pass

    @abstractmethod
    def unwrap_err(self) -> E:
        """Return the error value or raise UnwrapOnOk."""
        pass

    @abstractmethod
    def expect(self, message: str) -> T:
        pass

    @abstractmethod
    def expect_err(self, message: str) -> E:
        pass

    @abstractmethod
    def unwrap_or(self, default: T) -> T:
        pass

    @abstractmethod
    def unwrap_or_else(self, fn: Callable[[E], T]) -> T:
        """Return the success value, or call ``fn(error)`` only on Err."""
        pass

    @abstractmethod
    def contains(self, value: Any) -> bool:
        pass

    @abstractmethod
    def contains_err(self, error: Any) -> bool:
        pass

    @abstractmethod
    def and_(self, other: Result[U, E]) -> Result[U, E]:
        """Return self if Err, else ``other``."""
        pass

    @abstractmethod
    def or_(self, other: Result[T, F]) -> Result[T, F]:
        """Return self if Ok, else ``other``."""
        pass

    @abstractmethod
    def map(self, fn: Callable[[T], U]) -> Result[U, E]:
        """Transform the Ok value; pass Err through unchanged."""
        pass

    @abstractmethod
    def map_err(self, fn: Callable[[E], F]) -> Result[T, F]:
        """Transform the Err value; pass Ok through unchanged."""
        pass

    @abstractmethod
    def and_then(self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Chain computations that may fail (aka bind/flatMap)."""
        pass

    @abstractmethod
    def or_else(self, fn: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """Handle error with a fallback that may also fail."""
        pass

    @abstractmethod
    def tap(self, fn: Callable[[T], None]) -> Result[T, E]:
        """Run side effect on Ok, return original Result unchanged."""
        pass

    @abstractmethod
    def tap_err(self, fn: Callable[[E], None]) -> Result[T, E]:
        """Run side effect on Err, return original Result unchanged."""
        pass

    @abstractmethod
    def ok(self) -> Option[T]:
        """Convert Ok to Some, Err to NONE."""
        pass

    @abstractmethod
    def err(self) -> Option[E]:
        """Convert Err to Some, Ok to NONE."""
        pass

    @abstractmethod
    def __bool__(self) -> bool:
        pass
