"""Caller-supplied time values.

The meters never read a clock. They subtract time values handed in by the
caller and need the difference as fractional seconds. Supported values:
  - whenever.Instant (difference is a whenever.TimeDelta)
  - datetime.datetime (difference is a datetime.timedelta)
"""

from __future__ import annotations

from datetime import timedelta
from typing import Any

from whenever import TimeDelta

from opmeter.numeric import round_f32


def elapsed_seconds(start: Any, now: Any) -> float:
    """Return ``now - start`` as fractional seconds.

    Raises TypeError when the difference is not a duration.
    """
    delta = now - start
    if isinstance(delta, TimeDelta):
        delta = delta.py_timedelta()
    if isinstance(delta, timedelta):
        return delta.total_seconds()
    raise TypeError(
        f"Time values must subtract to a duration, got {type(delta).__name__}"
    )


def elapsed_seconds_f32(start: Any, now: Any) -> float:
    return round_f32(elapsed_seconds(start, now))
