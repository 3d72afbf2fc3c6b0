"""Shared type aliases and errors for tick-interval."""
from __future__ import annotations

from typing import Callable

TimeSource = Callable[[], float]


class InvalidDurationError(ValueError):
    """Raised when a timer is constructed with a non-positive duration."""

    def __init__(self, duration: float, message: str) -> None:
        self.duration = duration
        super().__init__(message)
