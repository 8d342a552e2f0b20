"""opmeter - in-process rate and aggregate meters for long-running services.

Quick Start:
    from whenever import Instant
    from opmeter import INT32, AggregateMeter, RateMeter

    # Events per second, published at most every 0.5s
    rate = RateMeter(Instant.now())
    rate.increment()
    rate.update(Instant.now())
    print(rate.rate())

    # Min/avg/max over batches of 10 samples
    latency = AggregateMeter(10, element=INT32).with_unit("ms")
    latency.add(12)
    if (report := latency.values()) is not None:
        print(report)  # min:3ms, avg:8.5ms, max:12ms
"""

from opmeter.aggregate import AggregateMeter
from opmeter.errors import InvalidThresholdError, NonPositiveIntervalError, OpmeterError
from opmeter.numeric import (
    FLOAT32,
    FLOAT64,
    INT8,
    INT16,
    INT32,
    INT64,
    UINT8,
    UINT16,
    UINT32,
    UINT64,
    Element,
    get_element,
    to_f32,
)
from opmeter.rate import RateMeter
from opmeter.report import Report
from opmeter.settings import MeterSettings, get_settings
from opmeter.timebase import elapsed_seconds

__version__ = "0.1.0"

__all__ = [
    "FLOAT32",
    "FLOAT64",
    "INT8",
    "INT16",
    "INT32",
    "INT64",
    "UINT8",
    "UINT16",
    "UINT32",
    "UINT64",
    "AggregateMeter",
    "Element",
    "InvalidThresholdError",
    "MeterSettings",
    "NonPositiveIntervalError",
    "OpmeterError",
    "RateMeter",
    "Report",
    "elapsed_seconds",
    "get_element",
    "get_settings",
    "to_f32",
]
