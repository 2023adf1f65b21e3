"""Manually advanced timer backend.

Time only moves when advance() is called, which makes timing behavior fully
deterministic. Callbacks run synchronously inside advance(), in deadline
order, with the clock set to each callback's deadline while it runs.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from dataclasses import dataclass, field

from lodash_compat.adapters.timers.base import TimerCallback, TimerHandle, TimerScheduler
from lodash_compat.core.errors import ValidationAppError

logger = logging.getLogger(__name__)


@dataclass(order=True)
class _ScheduledCall:
    deadline: float
    seq: int
    callback: TimerCallback = field(compare=False)
    cancelled: bool = field(default=False, compare=False)


class ManualTimerHandle(TimerHandle):
    def __init__(self, entry: _ScheduledCall) -> None:
        self._entry = entry

    def cancel(self) -> None:
        self._entry.cancelled = True


class ManualTimerScheduler(TimerScheduler):
    """Virtual clock with an explicit advance() step.

    Attributes:
        start: Initial clock value in seconds.
    """

    name = "manual"

    def __init__(self, start: float = 0.0) -> None:
        self._now = start
        self._queue: list[_ScheduledCall] = []
        self._seq = itertools.count()

    def __repr__(self) -> str:  # pragma: no cover - representation only
        return f"ManualTimerScheduler(now={self._now}, pending={self.pending_count})"

    @property
    def pending_count(self) -> int:
        """Number of scheduled callbacks that have not run or been cancelled."""
        return sum(1 for entry in self._queue if not entry.cancelled)

    def now(self) -> float:
        return self._now

    def call_later(self, delay: float, callback: TimerCallback) -> TimerHandle:
        entry = _ScheduledCall(self._now + max(0.0, delay), next(self._seq), callback)
        heapq.heappush(self._queue, entry)
        return ManualTimerHandle(entry)

    def advance(self, seconds: float) -> int:
        """Move the clock forward, running every callback that becomes due.

        Args:
            seconds: Non-negative amount of time to advance.

        Returns:
            Number of callbacks that ran.

        Raises:
            ValidationAppError: If seconds is negative.
        """

        if seconds < 0:
            raise ValidationAppError(
                code="negative_advance",
                message="ManualTimerScheduler cannot move time backwards",
                details={"scheduler": self.name, "actual_value": seconds},
            )

        target = self._now + seconds
        ran = 0
        while self._queue and self._queue[0].deadline <= target:
            entry = heapq.heappop(self._queue)
            if entry.cancelled:
                continue
            self._now = entry.deadline
            ran += 1
            try:
                entry.callback()
            except Exception:
                logger.exception(
                    "timer.callback_failed",
                    extra={"scheduler": self.name, "deadline": entry.deadline},
                )
                raise
        self._now = target
        return ran

    def advance_to(self, when: float) -> int:
        """Advance the clock to an absolute time (no-op when already past it)."""
        return self.advance(max(0.0, when - self._now))
