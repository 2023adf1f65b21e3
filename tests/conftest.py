"""Pytest configuration and fixtures shared across all test modules.

Environment defaults are set before any lodash_compat import so the global
settings object is built from them instead of a developer's local .env file.
"""

import os

os.environ["LODASH_COMPAT_ENV"] = "testing"
os.environ.setdefault("TIMING_SCHEDULER", "threading")
os.environ.setdefault("TIMING_DEFAULT_WAIT", "0")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

from typing import Any

import pytest

from lodash_compat.adapters.timers.manual import ManualTimerScheduler


class CallRecorder:
    """Callable that records every invocation and returns a running count."""

    def __init__(self) -> None:
        self.calls: list[tuple[tuple[Any, ...], dict[str, Any]]] = []

    def __call__(self, *args: Any, **kwargs: Any) -> int:
        self.calls.append((args, kwargs))
        return len(self.calls)

    @property
    def count(self) -> int:
        return len(self.calls)

    @property
    def last_args(self) -> tuple[Any, ...] | None:
        return self.calls[-1][0] if self.calls else None


@pytest.fixture
def scheduler() -> ManualTimerScheduler:
    return ManualTimerScheduler()


@pytest.fixture
def recorder() -> CallRecorder:
    return CallRecorder()
