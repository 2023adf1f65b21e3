"""Event-loop timer backend built on ``loop.call_later``.

The scheduler binds to the loop that is running when it is first used, so
wrappers built on it must be called from inside that loop.
"""

from __future__ import annotations

import asyncio
import logging

from lodash_compat.adapters.timers.base import TimerCallback, TimerHandle, TimerScheduler
from lodash_compat.core.errors import TimerAppError

logger = logging.getLogger(__name__)


class AsyncioTimerHandle(TimerHandle):
    def __init__(self, handle: asyncio.TimerHandle) -> None:
        self._handle = handle

    def cancel(self) -> None:
        self._handle.cancel()


class AsyncioTimerScheduler(TimerScheduler):
    """Schedule callbacks on an asyncio event loop.

    Attributes:
        loop: Loop to schedule on; resolved from the running loop when omitted.
    """

    name = "asyncio"

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            try:
                self._loop = asyncio.get_running_loop()
            except RuntimeError as exc:
                raise TimerAppError(
                    code="no_running_loop",
                    message="AsyncioTimerScheduler requires a running event loop",
                    details={
                        "scheduler": self.name,
                        "hint": "Call the wrapper from a coroutine or pass loop= explicitly",
                    },
                ) from exc
        return self._loop

    def now(self) -> float:
        return self.loop.time()

    def call_later(self, delay: float, callback: TimerCallback) -> TimerHandle:
        handle = self.loop.call_later(max(0.0, delay), self._run, callback)
        return AsyncioTimerHandle(handle)

    @staticmethod
    def _run(callback: TimerCallback) -> None:
        try:
            callback()
        except Exception:
            logger.exception(
                "timer.callback_failed",
                extra={"scheduler": "asyncio", "callback": getattr(callback, "__qualname__", repr(callback))},
            )
            raise
