"""Library-level exception types.

The helpers and rate-limited wrappers never raise for their typed input
domain; these errors belong to the configuration and timer layers, where a
misconfigured backend must fail loudly instead of silently dropping calls.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, NotRequired, TypedDict


class ErrorDetails(TypedDict, total=False):
    """Structured error context for logs and callers."""

    code: str
    message: str
    hint: str
    scheduler: str
    actual_value: float
    context: NotRequired[dict[str, Any]]


@dataclass
class AppError(Exception):
    """Base error for library failures.

    Attributes:
        code: Stable, machine-readable error code.
        message: Human-readable error message.
        details: Optional structured details for debugging.
    """

    code: str
    message: str
    details: ErrorDetails | None = None

    def __post_init__(self) -> None:
        super().__init__(self.message)


class ValidationAppError(AppError):
    """Raised when configuration or scheduler arguments are invalid."""


class TimerAppError(AppError):
    """Raised when a timer backend cannot schedule work."""
