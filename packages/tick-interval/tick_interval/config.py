"""Timer configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TimerConfig:
    """Immutable settings for building a Timer.

    Attributes:
        duration: Interval length in seconds. Validated when the Timer is built.
        start_immediately: Start the timer as soon as it is constructed.
    """

    duration: float
    start_immediately: bool = False
