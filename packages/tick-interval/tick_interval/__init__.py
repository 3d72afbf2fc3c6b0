"""tick-interval - Monotonic interval timer for polling loops."""
from __future__ import annotations

from tick_interval.clock import ManualClock
from tick_interval.config import TimerConfig
from tick_interval.timer import Timer
from tick_interval.types import InvalidDurationError, TimeSource

__all__ = [
    "InvalidDurationError",
    "ManualClock",
    "TimeSource",
    "Timer",
    "TimerConfig",
]
