"""Timer - fixed-duration interval measured against a monotonic time source."""
from __future__ import annotations

import logging
import time

from tick_interval.config import TimerConfig
from tick_interval.types import InvalidDurationError, TimeSource

logger = logging.getLogger(__name__)


class Timer:
    """Tracks whether `duration` seconds have passed since the last start().

    A timer is created stopped unless `start_immediately` is set. Once started it
    stays running; calling start() again re-arms it from the current instant.
    Expiry is computed on every query, never stored.

    Typical polling loop::

        timer = Timer(3.0, start_immediately=True)
        while not timer.time_up():
            print(f"{timer.get_remaining_time():.1f}s left")
            time.sleep(0.1)

    Changing the duration while running can move get_percent_complete() and
    get_remaining_time() backward. Callers must tolerate that.
    """

    def __init__(
        self,
        duration_seconds: float,
        start_immediately: bool = False,
        *,
        clock: TimeSource = time.monotonic,
    ) -> None:
        if not duration_seconds > 0.0:
            raise InvalidDurationError(
                duration_seconds, "Timer duration must be positive"
            )
        self._duration = float(duration_seconds)
        self._clock = clock
        self._start_time = 0.0
        self._running = False

        if start_immediately:
            self.start()

    @classmethod
    def from_config(
        cls, config: TimerConfig, *, clock: TimeSource = time.monotonic
    ) -> Timer:
        return cls(config.duration, config.start_immediately, clock=clock)

    @property
    def duration(self) -> float:
        return self._duration

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> None:
        """Start or restart the timer from the current instant."""
        self._start_time = self._clock()
        self._running = True

    def _elapsed(self) -> float:
        return self._clock() - self._start_time

    def time_up(self) -> bool:
        """Return True once the timer is running and elapsed >= duration."""
        if not self._running:
            return False
        return self._elapsed() >= self._duration

    def time_up_and_try_to_restart(self) -> bool:
        """Like time_up(), but re-arms the timer when it reports expiry."""
        time_is_up = self.time_up()
        if time_is_up:
            self.start()
        return time_is_up

    def get_remaining_time(self) -> float:
        """Seconds left before expiry.

        The full duration before the first start(), 0.0 once expired.
        """
        if not self._running:
            return self._duration
        remaining = self._duration - self._elapsed()
        return remaining if remaining > 0.0 else 0.0

    def get_percent_complete(self) -> float:
        """Fraction of the duration elapsed, in [0.0, 1.0]."""
        if not self._running:
            return 0.0
        progress = self._elapsed() / self._duration
        return progress if progress < 1.0 else 1.0

    def change_duration(self, duration_seconds: float) -> None:
        """Replace the duration. Non-positive values are ignored."""
        if not duration_seconds > 0.0:
            logger.debug(
                "ignoring non-positive duration %r, keeping %r",
                duration_seconds,
                self._duration,
            )
            return
        self._duration = float(duration_seconds)

    def __repr__(self) -> str:
        return f"Timer(duration={self._duration!r}, running={self._running!r})"
