from __future__ import annotations

import threading
from _thread import LockType
from abc import ABCMeta
from collections.abc import Callable, Mapping
from typing import Any, Optional

from option_result.core._logging import get_logger, safe_log
from option_result.core.exceptions import IncompleteMatch, InvalidConstruction


__all__: list[str] = [
    "SingletonMeta",
    "SingletonABCMeta",
    "type_name",
    "_require_present",
    "_require_arms",
]


class SingletonMeta(type):
    _instances: dict[Any, Any] = {}

    _lock: LockType = threading.Lock()

    def __call__(cls, *args, **kwargs):
        with cls._lock:
            if cls not in cls._instances:
                instance = super().__call__(*args, **kwargs)
                cls._instances[cls] = instance
        return cls._instances[cls]


class SingletonABCMeta(ABCMeta, SingletonMeta):
    pass


def type_name(value: Any) -> str:
    """Name of the runtime type of ``value``, as shown in ``Option<int>(5)``."""
    return type(value).__name__


def _require_present(value: Any, constructor: str) -> None:
    """Raise InvalidConstruction when ``value`` is None."""
    if value is None:
        safe_log(get_logger(), 'debug', f"{constructor}() rejected a None payload")
        raise InvalidConstruction(constructor)


def _require_arms(
    type_label: str,
    arms: Mapping[str, Optional[Callable[..., Any]]],
) -> None:
    """Check that every match arm is callable before dispatching to one of them."""
    missing: list[str] = [name for name, fn in arms.items() if not callable(fn)]
    if missing:
        raise IncompleteMatch(type_label, missing)
