"""Min/avg/max summary of a closed aggregate batch."""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict

from opmeter.numeric import format_float

T = TypeVar("T", int, float)


class Report(BaseModel, Generic[T]):
    """Immutable ``(min, avg, max, unit)`` value.

    ``str(report)`` renders ``min:2ms, avg:5.0ms, max:8ms``: extremes use their
    natural text form, the single-precision average its shortest form.
    """

    model_config = ConfigDict(frozen=True)

    min: T
    avg: float
    max: T
    unit: str = ""

    def __init__(self, min: T, avg: float, max: T, unit: str = "", **data) -> None:
        super().__init__(min=min, avg=avg, max=max, unit=unit, **data)

    def with_unit(self, unit: str) -> Report[T]:
        return self.model_copy(update={"unit": unit})

    def __str__(self) -> str:
        u = self.unit
        return f"min:{self.min}{u}, avg:{format_float(self.avg, single=True)}{u}, max:{self.max}{u}"
