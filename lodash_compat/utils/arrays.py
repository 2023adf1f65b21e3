"""Array helpers with lodash-compatible call shapes.

Iteratees follow lodash's ``(value, index, collection)`` convention, but a
callback is only given as many positional arguments as it accepts, so plain
one-argument functions (and builtins such as ``bool``) work unchanged.
"""

from __future__ import annotations

import inspect
import math
from collections.abc import Iterable, Sequence
from typing import Any, Callable, TypeVar

from lodash_compat.utils.objects import PathLike, property_of

T = TypeVar("T")
U = TypeVar("U")

Iteratee = Callable[..., Any]


def _arity(fn: Callable[..., Any], limit: int = 3) -> int:
    try:
        params = inspect.signature(fn).parameters.values()
    except (TypeError, ValueError):
        return 1
    count = 0
    for param in params:
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            return limit
        if param.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD):
            count += 1
    return min(count, limit)


def _bind_iteratee(fn: Callable[..., Any]) -> Callable[[Any, int, Sequence[Any]], Any]:
    arity = _arity(fn)
    return lambda value, index, seq: fn(*(value, index, seq)[:arity])


def _resolve_key(key: Callable[[Any], Any] | PathLike) -> Callable[[Any], Any]:
    return key if callable(key) else property_of(key)


def first(seq: Sequence[T] | None) -> T | None:
    return seq[0] if seq else None


def in_range(value: float, start: float, end: float | None = None) -> bool:
    """Check ``start <= value < end``; the one-bound form means ``[0, start)``.

    Bounds given in reverse order are swapped.
    """

    if end is None:
        start, end = 0, start
    return min(start, end) <= value < max(start, end)


def times(n: int, iteratee: Callable[[int], T]) -> list[T]:
    return [iteratee(i) for i in range(max(0, n))]


def flatten(seq: Iterable[T | Sequence[T]]) -> list[T]:
    """Flatten one level of nested lists and tuples."""
    result: list[Any] = []
    for item in seq:
        if isinstance(item, (list, tuple)):
            result.extend(item)
        else:
            result.append(item)
    return result


def drop_right(seq: Sequence[T], n: int = 1) -> list[T]:
    if n <= 0:
        return list(seq)
    if n >= len(seq):
        return []
    return list(seq[:-n])


def find_index(seq: Sequence[T], predicate: Iteratee) -> int:
    call = _bind_iteratee(predicate)
    for index, value in enumerate(seq):
        if call(value, index, seq):
            return index
    return -1


def filter_(seq: Sequence[T], predicate: Iteratee) -> list[T]:
    call = _bind_iteratee(predicate)
    return [value for index, value in enumerate(seq) if call(value, index, seq)]


def map_(seq: Sequence[T], iteratee: Iteratee) -> list[Any]:
    call = _bind_iteratee(iteratee)
    return [call(value, index, seq) for index, value in enumerate(seq)]


def some(seq: Sequence[T], predicate: Iteratee) -> bool:
    call = _bind_iteratee(predicate)
    return any(call(value, index, seq) for index, value in enumerate(seq))


def includes(seq: Iterable[T], value: T) -> bool:
    return value in seq


def min_(seq: Iterable[float]) -> float | None:
    values = list(seq)
    return min(values) if values else None


def range_(start: float, end: float | None = None, step: float | None = None) -> list[float]:
    """Build a list of numbers progressing from ``start`` up to, not including, ``end``.

    Mirrors lodash: a single argument is the end, the step defaults to ``-1``
    when ``end < start``, and a zero step repeats ``start`` for the length of
    the range. Float bounds and steps are supported.

    Args:
        start: First value (or the end when ``end`` is omitted).
        end: Exclusive end.
        step: Increment between values.

    Returns:
        list of values.
    """

    if end is None:
        start, end = 0, start
    if step is None:
        step = 1 if start < end else -1
    if step == 0:
        length = max(math.ceil(end - start), 0)
        return [start] * length

    length = max(math.ceil((end - start) / step), 0)
    return [start + i * step for i in range(length)]


def group_by(seq: Iterable[T], key: Callable[[T], U] | PathLike) -> dict[Any, list[T]]:
    """Group items by the value of ``key`` (a callable or a property path)."""
    resolve = _resolve_key(key)
    groups: dict[Any, list[T]] = {}
    for item in seq:
        groups.setdefault(resolve(item), []).append(item)
    return groups


def sort_by(seq: Iterable[T], *keys: Callable[[T], Any] | PathLike) -> list[T]:
    """Stable sort by one or more keys; with no key, items sort by themselves.

    Items whose key resolves to ``None`` sort after every other item.
    """
    resolvers = [_resolve_key(key) for key in keys] or [lambda item: item]

    def sort_key(item: T) -> tuple[tuple[bool, Any], ...]:
        values = (resolve(item) for resolve in resolvers)
        return tuple((value is None, 0 if value is None else value) for value in values)

    return sorted(seq, key=sort_key)
