"""Debounce and throttle wrappers with lodash-compatible options.

Debounced implements the debounce mode; Throttled reuses its state and
controls but invokes at most once per fixed window.

Timers come from a pluggable scheduler (see lodash_compat.adapters.timers).
With the default threading scheduler the trailing call runs on a timer
thread, so each wrapper guards its state with its own re-entrant lock. The
wrapped function itself always runs with the lock released: a slow call on
the timer thread never blocks callers on other threads, and a call taken
from the wrapper just before cancel() may still complete.
"""

from __future__ import annotations

import functools
import logging
import math
import threading
import types
from typing import Any, Callable, Generic, NamedTuple, ParamSpec, TypeVar, overload

from lodash_compat.adapters.timers.base import TimerHandle, TimerScheduler
from lodash_compat.core.timers import get_default_scheduler, get_default_wait
from lodash_compat.schemas.options import DebounceOptions, ThrottleOptions, clamp_seconds

logger = logging.getLogger(__name__)

P = ParamSpec("P")
R = TypeVar("R")

# Float clock tolerance; keeps a timer that fires exactly on its deadline from
# re-arming for a rounding-error remainder.
_TIME_EPSILON = 1e-9


class _Invocation(NamedTuple):
    args: tuple[Any, ...]
    kwargs: dict[str, Any]
    edge: str
    at: float


class Debounced(Generic[P, R]):
    """Callable wrapper that coalesces calls to ``func`` over time.

    Calling the wrapper records the arguments and returns the result of the
    most recent invocation of ``func`` (``None`` until the first one).

    Attributes:
        options: Immutable invocation policy.
        wait: Quiet period in seconds.
    """

    def __init__(
        self,
        func: Callable[P, R],
        wait: float | None = None,
        options: DebounceOptions | None = None,
        *,
        scheduler: TimerScheduler | None = None,
    ) -> None:
        functools.update_wrapper(self, func)
        self._func = func
        self._name = getattr(func, "__qualname__", repr(func))
        self.wait = clamp_seconds(get_default_wait() if wait is None else wait)
        self.options = options or DebounceOptions()
        self._maxing = self.options.max_wait is not None
        self._max_wait = max(self.options.max_wait or 0.0, self.wait)
        self._scheduler = scheduler or get_default_scheduler()
        self._lock = threading.RLock()

        self._last_args: tuple[tuple[Any, ...], dict[str, Any]] | None = None
        self._last_call_time: float | None = None
        self._last_invoke_time = 0.0
        self._timer: TimerHandle | None = None
        self._timer_token: object | None = None
        self._result: R | None = None

    def __repr__(self) -> str:  # pragma: no cover - representation only
        return (
            f"{type(self).__name__}({self._name!r}, wait={self.wait}, "
            f"leading={self.options.leading}, trailing={self.options.trailing}, "
            f"max_wait={self.options.max_wait}, pending={self.pending()})"
        )

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        # State is per wrapper, so every instance of the owning class shares it.
        if instance is None:
            return self
        return types.MethodType(self, instance)

    def __call__(self, *args: P.args, **kwargs: P.kwargs) -> R | None:
        with self._lock:
            invocation = self._record_call(self._scheduler.now(), args, kwargs)
            if invocation is None:
                return self._result
        return self._run(invocation)

    def cancel(self) -> None:
        """Drop any pending trailing call and reset the timing state."""

        with self._lock:
            had_pending = self._timer is not None
            self._clear_timer()
            self._last_invoke_time = 0.0
            self._last_args = None
            self._last_call_time = None
            logger.debug(
                "debounce.cancel",
                extra={"function": self._name, "had_pending": had_pending},
            )

    def flush(self) -> R | None:
        """Run a pending trailing call now.

        Returns:
            Result of the latest invocation (unchanged when nothing was pending).
        """

        with self._lock:
            if self._timer is None:
                return self._result
            invocation = self._trailing_edge(self._scheduler.now(), "flush")
            if invocation is None:
                return self._result
        return self._run(invocation)

    def pending(self) -> bool:
        """Return True while a timer is armed."""
        with self._lock:
            return self._timer is not None

    def _record_call(
        self, time: float, args: tuple[Any, ...], kwargs: dict[str, Any]
    ) -> _Invocation | None:
        is_invoking = self._should_invoke(time)
        self._last_args = (args, kwargs)
        self._last_call_time = time

        if is_invoking:
            if self._timer is None:
                return self._leading_edge(time)
            if self._maxing:
                # Deferred too long while calls keep arriving.
                self._clear_timer()
                self._start_timer(self.wait)
                return self._take_invocation(time, "max_wait")
        if self._timer is None:
            self._start_timer(self.wait)
        return None

    def _should_invoke(self, time: float) -> bool:
        if self._last_call_time is None:
            return True
        since_last_call = time - self._last_call_time
        since_last_invoke = time - self._last_invoke_time
        return (
            since_last_call >= self.wait - _TIME_EPSILON
            or since_last_call < 0
            or (self._maxing and since_last_invoke >= self._max_wait - _TIME_EPSILON)
        )

    def _remaining_wait(self, time: float) -> float:
        if self._last_call_time is None:
            return self.wait
        waiting = self.wait - (time - self._last_call_time)
        if self._maxing:
            return min(waiting, self._max_wait - (time - self._last_invoke_time))
        return waiting

    def _start_timer(self, delay: float) -> None:
        token = object()
        self._timer_token = token
        self._timer = self._scheduler.call_later(delay, functools.partial(self._timer_expired, token))

    def _clear_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
        self._timer = None
        self._timer_token = None

    def _timer_expired(self, token: object) -> None:
        with self._lock:
            if token is not self._timer_token:
                # Cancelled, flushed or re-armed after this timer was started.
                return
            time = self._scheduler.now()
            if not self._should_invoke(time):
                self._start_timer(self._remaining_wait(time))
                return
            invocation = self._trailing_edge(time, "trailing")
        if invocation is not None:
            self._run(invocation)

    def _leading_edge(self, time: float) -> _Invocation | None:
        self._last_invoke_time = time
        self._start_timer(self.wait)
        if self.options.leading:
            return self._take_invocation(time, "leading")
        return None

    def _trailing_edge(self, time: float, edge: str) -> _Invocation | None:
        self._clear_timer()
        if self.options.trailing:
            return self._take_invocation(time, edge)
        self._last_args = None
        return None

    def _take_invocation(self, time: float, edge: str) -> _Invocation | None:
        """Consume the buffered call; None when the leading edge already used it."""
        if self._last_args is None:
            return None
        args, kwargs = self._last_args
        self._last_args = None
        self._last_invoke_time = time
        return _Invocation(args, kwargs, edge, time)

    def _run(self, invocation: _Invocation) -> R:
        logger.debug(
            "debounce.invoke",
            extra={"function": self._name, "edge": invocation.edge, "at": invocation.at},
        )
        result = self._func(*invocation.args, **invocation.kwargs)
        with self._lock:
            self._result = result
        return result


class Throttled(Debounced[P, R]):
    """Wrapper that invokes ``func`` at most once per ``wait``-second window.

    Windows are laid end to end from the first call (or the first call after
    cancel()) and keep running whether or not calls arrive. A call in a window
    that has not invoked yet runs at once when ``leading`` is set; later calls
    are buffered and the last one runs when that window closes. That trailing
    run counts as the invocation of the window it opens.

    Built by throttle() for a positive ``wait``.
    """

    def __init__(
        self,
        func: Callable[P, R],
        wait: float | None = None,
        options: DebounceOptions | None = None,
        *,
        scheduler: TimerScheduler | None = None,
    ) -> None:
        super().__init__(func, wait, options, scheduler=scheduler)
        self._window_origin: float | None = None
        self._invoked_window: int | None = None

    def cancel(self) -> None:
        """Drop any pending trailing call and start windows afresh."""

        with self._lock:
            super().cancel()
            self._window_origin = None
            self._invoked_window = None

    def _window_at(self, time: float) -> int:
        # The first call anchors the window grid.
        if self._window_origin is None:
            self._window_origin = time
        return math.floor((time - self._window_origin) / self.wait + _TIME_EPSILON)

    def _window_end(self, window: int) -> float:
        origin = self._window_origin if self._window_origin is not None else 0.0
        return origin + (window + 1) * self.wait

    def _record_call(
        self, time: float, args: tuple[Any, ...], kwargs: dict[str, Any]
    ) -> _Invocation | None:
        window = self._window_at(time)
        self._last_args = (args, kwargs)
        self._last_call_time = time

        if self._timer is not None:
            return None
        if self.options.leading and self._invoked_window != window:
            return self._take_invocation(time, "leading")
        self._start_timer(max(0.0, self._window_end(window) - time))
        return None

    def _timer_expired(self, token: object) -> None:
        with self._lock:
            if token is not self._timer_token:
                return
            invocation = self._trailing_edge(self._scheduler.now(), "trailing")
        if invocation is not None:
            self._run(invocation)

    def _take_invocation(self, time: float, edge: str) -> _Invocation | None:
        invocation = super()._take_invocation(time, edge)
        if invocation is not None:
            self._invoked_window = self._window_at(time)
        return invocation


@overload
def debounce(
    func: Callable[P, R],
    wait: float | None = None,
    *,
    leading: bool = False,
    trailing: bool | None = None,
    max_wait: float | None = None,
    scheduler: TimerScheduler | None = None,
) -> Debounced[P, R]: ...
@overload
def debounce(
    func: None = None,
    wait: float | None = None,
    *,
    leading: bool = False,
    trailing: bool | None = None,
    max_wait: float | None = None,
    scheduler: TimerScheduler | None = None,
) -> Callable[[Callable[P, R]], Debounced[P, R]]: ...
def debounce(
    func: Callable[P, R] | None = None,
    wait: float | None = None,
    *,
    leading: bool = False,
    trailing: bool | None = None,
    max_wait: float | None = None,
    scheduler: TimerScheduler | None = None,
) -> Debounced[P, R] | Callable[[Callable[P, R]], Debounced[P, R]]:
    """Delay calls to ``func`` until ``wait`` seconds pass without a new call.

    ``trailing`` defaults to ``not leading``: a leading-edge debounce fires
    only at the start of a burst unless trailing is requested explicitly.
    Without ``func`` this returns a decorator, e.g. ``@debounce(wait=0.2)``.

    Args:
        func: Function to wrap.
        wait: Quiet period in seconds (configured default when omitted).
        leading: Invoke on the first call of a burst.
        trailing: Invoke with the latest arguments after the burst settles.
        max_wait: Longest time a call may be deferred.
        scheduler: Timer backend (configured default when omitted).

    Returns:
        Debounced wrapper exposing cancel(), flush() and pending().
    """

    options = DebounceOptions(leading=leading, trailing=trailing, max_wait=max_wait)

    def decorator(fn: Callable[P, R]) -> Debounced[P, R]:
        return Debounced(fn, wait, options, scheduler=scheduler)

    if func is None:
        return decorator
    return decorator(func)


@overload
def throttle(
    func: Callable[P, R],
    wait: float | None = None,
    *,
    leading: bool = True,
    trailing: bool = True,
    scheduler: TimerScheduler | None = None,
) -> Debounced[P, R]: ...
@overload
def throttle(
    func: None = None,
    wait: float | None = None,
    *,
    leading: bool = True,
    trailing: bool = True,
    scheduler: TimerScheduler | None = None,
) -> Callable[[Callable[P, R]], Debounced[P, R]]: ...
def throttle(
    func: Callable[P, R] | None = None,
    wait: float | None = None,
    *,
    leading: bool = True,
    trailing: bool = True,
    scheduler: TimerScheduler | None = None,
) -> Debounced[P, R] | Callable[[Callable[P, R]], Debounced[P, R]]:
    """Invoke ``func`` at most once per ``wait``-second window.

    A zero-length window throttles nothing, so the wrapper falls back to the
    plain debounce path with ``max_wait`` of 0.

    Args:
        func: Function to wrap.
        wait: Window length in seconds (configured default when omitted).
        leading: Invoke on the first call of a window.
        trailing: Invoke with the last suppressed arguments when the window closes.
        scheduler: Timer backend (configured default when omitted).

    Returns:
        Debounced wrapper exposing cancel(), flush() and pending().
    """

    def decorator(fn: Callable[P, R]) -> Debounced[P, R]:
        window = clamp_seconds(get_default_wait() if wait is None else wait)
        options = ThrottleOptions(leading=leading, trailing=trailing).as_debounce(window)
        if window == 0:
            return Debounced(fn, window, options, scheduler=scheduler)
        return Throttled(fn, window, options, scheduler=scheduler)

    if func is None:
        return decorator
    return decorator(func)
