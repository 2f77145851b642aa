"""
Pytest configuration and shared fixtures for tests.
"""

import logging
from typing import Any, Callable

import pytest

from option_result import NONE, Err, Ok, Some


class CallRecorder:
    """Callable that counts invocations and returns a fixed value."""

    def __init__(self, returns: Any = None) -> None:
        self.returns: Any = returns
        self.calls: list[tuple[Any, ...]] = []

    def __call__(self, *args: Any) -> Any:
        self.calls.append(args)
        return self.returns

    @property
    def count(self) -> int:
        return len(self.calls)


@pytest.fixture(scope="function")
def recorder() -> Callable[[Any], CallRecorder]:
    """Factory for fresh CallRecorder instances."""
    def make(returns: Any = None) -> CallRecorder:
        return CallRecorder(returns)
    return make


@pytest.fixture(scope="function")
def option_pairs():
    """All four tag combinations of two Options, labelled for readability."""
    return {
        ("some", "some"): (Some(1), Some(2)),
        ("some", "none"): (Some(1), NONE),
        ("none", "some"): (NONE, Some(2)),
        ("none", "none"): (NONE, NONE),
    }


@pytest.fixture(scope="function")
def result_pairs():
    """All four tag combinations of two Results."""
    return {
        ("ok", "ok"): (Ok(10), Ok(20)),
        ("ok", "err"): (Ok(10), Err("y")),
        ("err", "ok"): (Err("x"), Ok(20)),
        ("err", "err"): (Err("x"), Err("y")),
    }


@pytest.fixture(scope="function")
def debug_logs(caplog):
    """Capture option_result debug records."""
    caplog.set_level(logging.DEBUG, logger="option_result")
    return caplog
