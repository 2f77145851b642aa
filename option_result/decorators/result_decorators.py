from __future__ import annotations

from functools import wraps
from typing import Callable, Optional, TypeVar
from logging import Logger

from option_result.core._logging import get_logger, safe_log
from option_result.option import Option, from_optional
from option_result.result import Err, Ok, Result

logger: Logger = get_logger()

T = TypeVar("T")


__all__ = [
    "as_result",
    "as_option",
]


def as_result(
    *exc_types: type[Exception],
    logger: Optional[Logger] = logger,
) -> Callable[[Callable[..., T]], Callable[..., Result[T, Exception]]]:
    """
    Turn a raising function into one that returns a Result.

    Parameters:
        exc_types: Exception types to capture as Err. Defaults to Exception;
            anything else propagates.
        logger: Logger receiving a debug record for each captured exception.
            Anything with a ``debug`` or ``log`` method is accepted.

    The wrapped function must not return None, since Ok cannot hold it;
    such a call raises InvalidConstruction. Combine with ``as_option`` for
    nullable returns.

    Example:
        >>> @as_result(ValueError)
        ... def parse(text: str) -> int:
        ...     return int(text)
        >>> parse("12")
        Ok(value=12)
        >>> parse("x").is_err()
        True
    """
    catch: tuple[type[Exception], ...] = exc_types or (Exception,)

    def decorator(func: Callable[..., T]) -> Callable[..., Result[T, Exception]]:
        @wraps(func)
        def wrapper(*args, **kwargs) -> Result[T, Exception]:
            try:
                value: T = func(*args, **kwargs)
            except catch as exc:
                safe_log(
                    logger, 'debug',
                    f"@as_result: {func.__qualname__} raised {type(exc).__name__}: {exc}"
                )
                return Err(exc)
            return Ok(value)

        return wrapper
    return decorator


def as_option(func: Callable[..., Optional[T]]) -> Callable[..., Option[T]]:
    """
    Turn a function returning a nullable value into one returning an Option.

    A ``None`` return becomes NONE; any other value is wrapped in Some.
    """
    @wraps(func)
    def wrapper(*args, **kwargs) -> Option[T]:
        return from_optional(func(*args, **kwargs))

    return wrapper
