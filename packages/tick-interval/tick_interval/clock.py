"""ManualClock - a time source that only moves when advanced."""
from __future__ import annotations


class ManualClock:
    """Deterministic monotonic callable, usable anywhere a TimeSource is."""

    def __init__(self, start: float = 0.0) -> None:
        self._now = float(start)

    def __call__(self) -> float:
        return self._now

    @property
    def now(self) -> float:
        return self._now

    def advance(self, seconds: float) -> float:
        if seconds < 0:
            raise ValueError("seconds must be non-negative")
        self._now += float(seconds)
        return self._now

    def reset(self, now: float = 0.0) -> None:
        self._now = float(now)
