"""Event rate meter.

Counts events and, when at least ``interval`` seconds of caller time have
passed, publishes ``count / elapsed`` as events per second. Between window
closes the published rate is stable, so a caller may poll ``rate()`` as often
as it likes.

The window restarts at the ``now`` of the closing update, not at
``window_start + interval``: a caller that updates late gets a rate computed
over the time that actually elapsed.
"""

from __future__ import annotations

import logging
from typing import Any

from opmeter.errors import NonPositiveIntervalError
from opmeter.numeric import round_f32
from opmeter.settings import get_settings
from opmeter.timebase import elapsed_seconds_f32

logger = logging.getLogger("opmeter.rate")


class RateMeter:
    """How many times something happens per second."""

    def __init__(self, now: Any, interval: float | None = None) -> None:
        if interval is None:
            interval = get_settings().rate_interval_seconds
        interval_f32 = round_f32(float(interval))
        if not interval_f32 > 0:
            raise NonPositiveIntervalError(f"interval must be positive, got {interval}")

        self._count = 0
        self._window_start = now
        self._rate = 0.0
        self._interval = interval_f32

    @classmethod
    def with_interval(cls, now: Any, interval_seconds: float) -> RateMeter:
        """Create a meter that publishes at most once per ``interval_seconds``."""
        return cls(now, interval=interval_seconds)

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def count(self) -> int:
        """Events counted in the current, still open window."""
        return self._count

    @property
    def window_start(self) -> Any:
        return self._window_start

    def increment(self) -> None:
        """Count a single event."""
        self._count += 1

    def add(self, count: int) -> None:
        """Count ``count`` events at once."""
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        self._count += count

    def update(self, now: Any) -> None:
        """Close the window and publish a new rate if enough time has passed.

        Returns without side effects while less than ``interval`` seconds have
        elapsed since the window started. A repeated call with the same ``now``
        therefore never divides by zero.
        """
        seconds = elapsed_seconds_f32(self._window_start, now)
        if seconds < self._interval:
            return

        rate = round_f32(round_f32(float(self._count)) / seconds)
        logger.debug(
            "Rate window closed: %d events over %.3fs = %s/s", self._count, seconds, rate
        )

        self._count = 0
        self._window_start = now
        self._rate = rate

    def rate(self) -> float:
        """Events per second over the last closed window, 0.0 before the first."""
        return self._rate

    def __repr__(self) -> str:
        return (
            f"RateMeter(count={self._count}, window_start={self._window_start!r}, "
            f"rate={self._rate}, interval={self._interval})"
        )
