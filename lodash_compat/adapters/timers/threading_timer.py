"""Worker-thread timer backend built on ``threading.Timer``.

Notes:
- Each scheduled callback gets its own daemon timer thread.
- Callbacks therefore run off the caller's thread; wrappers must guard their
  own state.
- Delays are capped at ``threading.TIMEOUT_MAX``; an infinite delay waits
  that long instead of failing inside the timer thread.
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Callable

from lodash_compat.adapters.timers.base import TimerCallback, TimerHandle, TimerScheduler

logger = logging.getLogger(__name__)


class ThreadingTimerHandle(TimerHandle):
    def __init__(self, timer: threading.Timer) -> None:
        self._timer = timer

    def cancel(self) -> None:
        self._timer.cancel()


class ThreadingTimerScheduler(TimerScheduler):
    """Schedule callbacks on daemon ``threading.Timer`` threads."""

    name = "threading"

    def __init__(self, *, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock

    def now(self) -> float:
        return self._clock()

    def call_later(self, delay: float, callback: TimerCallback) -> TimerHandle:
        delay = min(max(0.0, delay), threading.TIMEOUT_MAX)
        timer = threading.Timer(delay, self._run, args=(callback,))
        timer.daemon = True
        timer.start()
        return ThreadingTimerHandle(timer)

    @staticmethod
    def _run(callback: TimerCallback) -> None:
        try:
            callback()
        except Exception:
            logger.exception(
                "timer.callback_failed",
                extra={"scheduler": "threading", "callback": getattr(callback, "__qualname__", repr(callback))},
            )
            raise
