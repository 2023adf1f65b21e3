"""Pydantic schemas for rate-limited wrapper options."""

from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


def clamp_seconds(value: float | None) -> float:
    """Coerce a duration to a non-negative number of seconds (None/NaN -> 0).

    Infinity is kept and means the timer never fires in practice.
    """
    if value is None or math.isnan(value) or value < 0:
        return 0.0
    return float(value)


class DebounceOptions(BaseModel):
    """Invocation policy for a debounced or throttled function.

    Immutable once built; a wrapper keeps the instance it was created with.
    """

    model_config = ConfigDict(frozen=True)

    leading: bool = Field(
        False,
        description="Invoke on the first call of a burst.",
    )
    trailing: bool = Field(
        True,
        description=(
            "Invoke once the burst settles, with the latest arguments. "
            "Defaults to the opposite of `leading` when omitted."
        ),
    )
    max_wait: float | None = Field(
        default=None,
        description="Longest time a call may be deferred since the last invocation.",
    )

    @model_validator(mode="before")
    @classmethod
    def _default_trailing(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("trailing") is None:
            data = {**data, "trailing": not data.get("leading", False)}
        return data

    @field_validator("max_wait")
    @classmethod
    def _clamp_max_wait(cls, value: float | None) -> float | None:
        return None if value is None else clamp_seconds(value)


class ThrottleOptions(BaseModel):
    """Invocation policy for a throttled function. Both edges default on."""

    model_config = ConfigDict(frozen=True)

    leading: bool = Field(True, description="Invoke on the first call of a window.")
    trailing: bool = Field(
        True,
        description="Invoke once the window closes if calls were suppressed.",
    )

    def as_debounce(self, wait: float) -> DebounceOptions:
        """Express this policy as debounce options capped at one window."""
        return DebounceOptions(leading=self.leading, trailing=self.trailing, max_wait=wait)
