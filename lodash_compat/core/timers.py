"""Default timer backend resolution.

This module wires the timer adapters to configuration.

- Wrappers built without an explicit scheduler ask get_default_scheduler().
- The threading scheduler is stateless, so one instance is shared
  process-wide and rebuilt only when configuration changes (primarily tests).
- Asyncio schedulers bind to a loop, so each wrapper gets its own.
"""

from __future__ import annotations

import logging

from lodash_compat.adapters.timers.asyncio_timer import AsyncioTimerScheduler
from lodash_compat.adapters.timers.base import TimerScheduler
from lodash_compat.adapters.timers.threading_timer import ThreadingTimerScheduler
from lodash_compat.core.config import settings
from lodash_compat.core.errors import ValidationAppError

logger = logging.getLogger(__name__)

_shared: TimerScheduler | None = None
_shared_kind: str | None = None


def get_default_scheduler() -> TimerScheduler:
    """Return a scheduler for the configured backend.

    Returns:
        TimerScheduler: Threading (shared) or asyncio (fresh) scheduler.

    Raises:
        ValidationAppError: If the configured backend name is unknown.
    """

    global _shared, _shared_kind

    kind = settings.timing.scheduler
    if kind == "asyncio":
        return AsyncioTimerScheduler()
    if kind != "threading":
        raise ValidationAppError(
            code="unknown_scheduler",
            message=f"Unknown timer scheduler: {kind!r}",
            details={"scheduler": str(kind), "hint": "Use 'threading' or 'asyncio'"},
        )

    if _shared is None or _shared_kind != kind:
        _shared = ThreadingTimerScheduler()
        _shared_kind = kind
        logger.debug("timer.scheduler_created", extra={"scheduler": kind})
    return _shared


def get_default_wait() -> float:
    """Wait applied when a wrapper is created without one."""
    return settings.timing.default_wait
