"""Countdown -- polling a Timer from a plain loop.

Demonstrates:
- Creating a timer without starting it, then starting it manually
- Polling time_up() and printing the remaining time
- Repeating rounds with time_up_and_try_to_restart()

Run: python -m examples.countdown --duration 3 --repeat 2
"""
from __future__ import annotations

import argparse
import logging
import sys
import time

from tick_interval import Timer


def run(duration: float, interval: float, repeat: int) -> int:
    timer = Timer(duration)
    print(f"Preparing a {duration:.1f}s timer...")
    timer.start()

    rounds = 0
    while rounds < repeat:
        if timer.time_up_and_try_to_restart():
            rounds += 1
            print(f"\nRound {rounds} finished!")
            continue
        print(f"  remaining {timer.get_remaining_time():5.2f}s  "
              f"({timer.get_percent_complete():4.0%})", end="\r", flush=True)
        time.sleep(interval)
    return rounds


def main() -> None:
    parser = argparse.ArgumentParser(description="Interval timer countdown demo")
    parser.add_argument("--duration", type=float, default=3.0,
                        help="Seconds per round (default: 3.0)")
    parser.add_argument("--interval", type=float, default=0.1,
                        help="Polling interval in seconds (default: 0.1)")
    parser.add_argument("--repeat", type=int, default=1,
                        help="Number of rounds to run (default: 1)")
    parser.add_argument("--verbose", action="store_true",
                        help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        run(args.duration, args.interval, args.repeat)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(2)
    except KeyboardInterrupt:
        print("\nInterrupted.")


if __name__ == "__main__":
    main()
