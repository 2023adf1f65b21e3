"""Object helpers: path lookup, filtering and deep equality."""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Callable, TypeVar

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")

PathLike = str | int | Sequence[str | int]

_MISSING: Any = object()


def to_path(path: PathLike) -> list[str | int]:
    """Split a dotted path into segments; sequences are taken as-is."""
    if isinstance(path, str):
        return list(path.split("."))
    if isinstance(path, int):
        return [path]
    return list(path)


def _as_index(key: str | int) -> int | None:
    if isinstance(key, bool):
        return None
    if isinstance(key, int):
        return key
    if isinstance(key, str) and key.isdigit():
        return int(key)
    return None


def _get_segment(obj: Any, key: str | int) -> Any:
    if isinstance(obj, Mapping):
        try:
            if key in obj:
                return obj[key]
        except TypeError:
            return _MISSING
        index = _as_index(key)
        if index is not None and index in obj:
            return obj[index]
        return _MISSING
    if isinstance(obj, Sequence):
        index = _as_index(key)
        if index is not None and 0 <= index < len(obj):
            return obj[index]
        return _MISSING
    if isinstance(key, str):
        return getattr(obj, key, _MISSING)
    return _MISSING


def get(obj: Any, path: PathLike, default: T | None = None) -> Any | T | None:
    """Read a nested value by path.

    Mappings are read by key, sequences by integer index and any other object
    by attribute. A missing segment, or a resolved value of ``None``, yields
    ``default``.

    Args:
        obj: Root value to read from.
        path: Dotted string (``"a.b.0"``) or a sequence of segments.
        default: Value returned when the path does not resolve.

    Returns:
        The resolved value or ``default``.
    """

    result = obj
    for key in to_path(path):
        if result is None:
            return default
        result = _get_segment(result, key)
        if result is _MISSING:
            return default
    return default if result is None else result


def property_of(path: PathLike) -> Callable[[Any], Any]:
    """Return a function reading ``path`` from its argument."""
    segments = to_path(path)
    return lambda obj: get(obj, segments)


def pick_by(mapping: Mapping[K, V], predicate: Callable[[V, K], bool]) -> dict[K, V]:
    """Keep the entries for which ``predicate(value, key)`` is truthy."""
    return {key: value for key, value in mapping.items() if predicate(value, key)}


def omit(mapping: Mapping[K, V], keys: Iterable[K] | str) -> dict[K, V]:
    """Copy ``mapping`` without ``keys`` (a single string is one key)."""
    dropped = {keys} if isinstance(keys, str) else set(keys)
    return {key: value for key, value in mapping.items() if key not in dropped}


def is_equal(a: Any, b: Any) -> bool:
    """Deep structural equality.

    NaN equals NaN, mappings compare by keys and values regardless of order,
    lists and tuples compare element-wise (but a list never equals a tuple),
    and plain objects of the same type compare by instance attributes.
    """

    if a is b:
        return True
    if isinstance(a, float) and isinstance(b, float) and math.isnan(a) and math.isnan(b):
        return True
    if isinstance(a, Mapping) and isinstance(b, Mapping):
        if a.keys() != b.keys():
            return False
        return all(is_equal(a[key], b[key]) for key in a)
    if isinstance(a, (list, tuple)) or isinstance(b, (list, tuple)):
        if type(a) is not type(b) or len(a) != len(b):
            return False
        return all(is_equal(x, y) for x, y in zip(a, b))
    if (
        type(a) is type(b)
        and type(a).__eq__ is object.__eq__
        and hasattr(a, "__dict__")
    ):
        return is_equal(vars(a), vars(b))
    return bool(a == b)


def noop(*args: Any, **kwargs: Any) -> None:
    return None
