"""Timer scheduler interfaces.

Wrappers depend on this abstraction (not a concrete timer) so the backend can
be swapped without touching the debounce/throttle logic.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

TimerCallback = Callable[[], object]


class TimerHandle(ABC):
    """A scheduled callback that may still be cancelled."""

    @abstractmethod
    def cancel(self) -> None:
        """Prevent the callback from running. Safe to call more than once."""
        raise NotImplementedError


class TimerScheduler(ABC):
    """Interface for one-shot timer backends."""

    name: str = "abstract"

    @abstractmethod
    def now(self) -> float:
        """Return the backend's monotonic time in seconds."""
        raise NotImplementedError

    @abstractmethod
    def call_later(self, delay: float, callback: TimerCallback) -> TimerHandle:
        """Run ``callback`` once after ``delay`` seconds.

        Args:
            delay: Seconds to wait; values below zero are treated as zero.
            callback: Zero-argument callable to run.

        Returns:
            TimerHandle that cancels the pending callback.
        """
        raise NotImplementedError
