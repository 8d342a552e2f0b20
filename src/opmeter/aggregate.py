"""Min/avg/max over fixed-size batches of samples.

Samples accumulate into a pending batch. When ``threshold`` samples have been
added the batch closes: its mean (single precision) and extremes become the
published report and the pending state resets. Readers always see the last
closed batch, never a half-filled one, so one batch's outlier cannot leak into
the next report.

Pending extremes are seeded to the element's opposite bounds so the first
sample of a batch replaces both.
"""

from __future__ import annotations

import logging
from typing import Generic, TypeVar

from opmeter.errors import InvalidThresholdError
from opmeter.numeric import FLOAT64, Element, round_f32
from opmeter.report import Report
from opmeter.settings import get_settings

logger = logging.getLogger("opmeter.aggregate")

T = TypeVar("T", int, float)

MAX_THRESHOLD = 255


def _is_integral(value: object) -> bool:
    if isinstance(value, bool):
        return False
    try:
        return int(value) == value
    except (TypeError, ValueError, OverflowError):
        return False


class AggregateMeter(Generic[T]):
    """Tracks minimum, maximum and mean of numeric samples in batches."""

    def __init__(
        self,
        threshold: int,
        element: Element = FLOAT64,
        unit: str | None = None,
    ) -> None:
        if threshold == 0:
            raise InvalidThresholdError("threshold can not be zero")
        if not _is_integral(threshold):
            raise InvalidThresholdError(f"threshold must be an integer, got {threshold!r}")
        if not 0 < threshold <= MAX_THRESHOLD:
            raise InvalidThresholdError(
                f"threshold must be between 1 and {MAX_THRESHOLD}, got {threshold}"
            )

        self._threshold = int(threshold)
        self._element = element
        self._unit = get_settings().default_unit if unit is None else unit

        self._count = 0
        self._sum: T = element.zero
        self._pending_min: T = element.max_value
        self._pending_max: T = element.min_value

        self._min: T = element.zero
        self._max: T = element.zero
        self._avg = 0.0
        self._has_report = False

    def with_unit(self, unit: str) -> AggregateMeter[T]:
        """Attach a display unit, returning the meter for inline use."""
        self._unit = unit
        return self

    @property
    def threshold(self) -> int:
        return self._threshold

    @property
    def element(self) -> Element:
        return self._element

    @property
    def unit(self) -> str:
        return self._unit

    @property
    def count(self) -> int:
        """Samples in the pending batch."""
        return self._count

    @property
    def has_report(self) -> bool:
        return self._has_report

    def add(self, value: T) -> None:
        """Add a sample, closing the batch when it reaches ``threshold``.

        NaN samples never update the extremes; callers should not pass them.
        """
        value = self._element.coerce(value)
        self._sum = self._element.add(self._sum, value)
        self._count += 1

        if value > self._pending_max:
            self._pending_max = value
        if value < self._pending_min:
            self._pending_min = value

        if self._count >= self._threshold:
            self._close_batch()

    def _close_batch(self) -> None:
        sum_f32 = self._element.to_f32(self._sum)
        if sum_f32 is None:
            logger.warning(
                "Batch sum %r of %s does not fit in single precision, reporting mean 0.0",
                self._sum,
                self._element,
            )
            sum_f32 = 0.0

        self._avg = round_f32(sum_f32 / round_f32(float(self._count)))
        self._min = self._pending_min
        self._max = self._pending_max
        self._has_report = True

        self._pending_min = self._element.max_value
        self._pending_max = self._element.min_value
        self._count = 0
        self._sum = self._element.zero

        logger.debug(
            "Batch of %d closed: min=%r avg=%s max=%r", self._threshold, self._min, self._avg, self._max
        )

    def average(self) -> float | None:
        """Mean of the last closed batch, ``None`` before the first one closes."""
        if self._has_report:
            return self._avg
        return None

    def values(self) -> Report[T] | None:
        """Min, mean and max of the last closed batch, if any."""
        if self._has_report:
            return Report(self._min, self._avg, self._max, self._unit)
        return None

    def __repr__(self) -> str:
        return (
            f"AggregateMeter(threshold={self._threshold}, element={self._element!r}, "
            f"count={self._count}, has_report={self._has_report}, unit={self._unit!r})"
        )
