"""Type predicates with lodash-compatible names."""

from __future__ import annotations

import math
from collections.abc import Sized
from datetime import date
from typing import Any


def is_function(value: Any) -> bool:
    return callable(value)


def is_number(value: Any) -> bool:
    """True for ints and floats, excluding bools and NaN."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not (isinstance(value, float) and math.isnan(value))


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_undefined(value: Any) -> bool:
    return value is None


def is_date(value: Any) -> bool:
    """True for ``datetime.date`` and ``datetime.datetime`` instances."""
    return isinstance(value, date)


def is_empty(value: Any) -> bool:
    """Check whether a value holds nothing.

    - ``None`` is empty.
    - Anything with a length (strings, bytes, sequences, mappings, sets and
      user containers defining ``__len__``) is empty when its length is 0.
    - Other objects carrying instance attributes are empty when they have none.
    - Numbers, bools, callables and everything else are never empty.

    Args:
        value: Value to inspect.

    Returns:
        bool: True when the value is considered empty.
    """

    if value is None:
        return True
    if isinstance(value, Sized):
        return len(value) == 0
    if isinstance(value, (int, float, complex)) or callable(value):
        return False
    attrs = getattr(value, "__dict__", None)
    if isinstance(attrs, dict) and not isinstance(value, type):
        return not attrs
    return False
