"""lodash-compatible helpers for Python.

Rate-limited wrappers:

    from lodash_compat import debounce, throttle

    save = debounce(write_draft, 0.5)
    save(doc)          # runs write_draft(doc) 0.5 s after the last call
    save.flush()       # or right now

    @throttle(wait=1.0)
    def report(progress): ...

Plus the small stateless helpers (predicates, array and object utilities)
under their lodash names; names that would shadow builtins carry a trailing
underscore (``filter_``, ``map_``, ``min_``, ``range_``).
"""

from lodash_compat.adapters.timers.asyncio_timer import AsyncioTimerScheduler
from lodash_compat.adapters.timers.base import TimerHandle, TimerScheduler
from lodash_compat.adapters.timers.manual import ManualTimerScheduler
from lodash_compat.adapters.timers.threading_timer import ThreadingTimerScheduler
from lodash_compat.schemas.options import DebounceOptions, ThrottleOptions
from lodash_compat.utils.arrays import (
    drop_right,
    filter_,
    find_index,
    first,
    flatten,
    group_by,
    in_range,
    includes,
    map_,
    min_,
    range_,
    some,
    sort_by,
    times,
)
from lodash_compat.utils.debounce import Debounced, debounce, throttle
from lodash_compat.utils.objects import get, is_equal, noop, omit, pick_by
from lodash_compat.utils.predicates import (
    is_date,
    is_empty,
    is_function,
    is_number,
    is_string,
    is_undefined,
)

__all__ = [
    "AsyncioTimerScheduler",
    "DebounceOptions",
    "Debounced",
    "ManualTimerScheduler",
    "ThreadingTimerScheduler",
    "ThrottleOptions",
    "TimerHandle",
    "TimerScheduler",
    "debounce",
    "drop_right",
    "filter_",
    "find_index",
    "first",
    "flatten",
    "get",
    "group_by",
    "in_range",
    "includes",
    "is_date",
    "is_empty",
    "is_equal",
    "is_function",
    "is_number",
    "is_string",
    "is_undefined",
    "map_",
    "min_",
    "noop",
    "omit",
    "pick_by",
    "range_",
    "some",
    "sort_by",
    "throttle",
    "times",
]

__version__ = "0.1.0"
