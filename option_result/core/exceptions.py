from __future__ import annotations

from typing import Any


__all__: list[str] = [
    "OptionResultError",
    "InvalidConstruction",
    "UnwrapError",
    "EmptyUnwrap",
    "UnwrapOnErr",
    "UnwrapOnOk",
    "IncompleteMatch",
]


class OptionResultError(Exception):
    """Base class for every error raised by option_result."""


class InvalidConstruction(OptionResultError, ValueError):
    """
    Raised when a constructor that requires a present value receives ``None``.

    Example:
        >>> some(None)
        Traceback (most recent call last):
        ...
        InvalidConstruction: Some() requires a value, got None
    """

    def __init__(self, constructor: str) -> None:
        self.constructor: str = constructor
        super().__init__(f"{constructor}() requires a value, got None")


class UnwrapError(OptionResultError, RuntimeError):
    """Base class for failed ``unwrap``/``expect`` style accessors."""


class EmptyUnwrap(UnwrapError):
    """Raised when unwrapping an empty Option."""

    def __init__(self, message: str = "called unwrap() on Nothing") -> None:
        super().__init__(message)


class UnwrapOnErr(UnwrapError):
    """
    Raised when unwrapping the value of an Err result.

    The held error is kept on ``.error`` so callers can inspect it.
    """

    def __init__(self, error: Any, message: str = "called unwrap() on Err") -> None:
        self.error: Any = error
        super().__init__(f"{message}: {error!r}")


class UnwrapOnOk(UnwrapError):
    """Raised when unwrapping the error of an Ok result. The held value is kept on ``.value``."""

    def __init__(self, value: Any, message: str = "called unwrap_err() on Ok") -> None:
        self.value: Any = value
        super().__init__(f"{message}: {value!r}")


class IncompleteMatch(OptionResultError, TypeError):
    """Raised when ``match`` is called without a handler for every variant."""

    def __init__(self, type_name: str, missing: list[str]) -> None:
        self.missing: list[str] = missing
        super().__init__(
            f"{type_name}.match() requires a handler for every variant, "
            f"missing: {', '.join(missing)}"
        )
