"""Numeric element types and single-precision helpers.

An aggregate meter is generic over its element type. Python numbers are
unbounded, so the capabilities the meter needs from an element (saturating
bounds, a zero value, addition and a lossy conversion to 32-bit float) are
carried by an explicit ``Element`` descriptor.

Provided elements:
  - INT8 / INT16 / INT32 / INT64, UINT8 / UINT16 / UINT32 / UINT64
  - FLOAT32: samples and partial sums rounded to single precision
  - FLOAT64: plain Python floats
"""

from __future__ import annotations

import math
import struct
import sys
from dataclasses import dataclass
from decimal import Decimal

F32_MAX = 3.4028234663852886e38

_F32 = struct.Struct("<f")


def round_f32(value: float) -> float:
    """Round a float to the nearest single-precision value.

    Finite values beyond the f32 range become infinite, as a cast would.
    """
    if math.isnan(value) or math.isinf(value):
        return value
    try:
        return _F32.unpack(_F32.pack(value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def to_f32(value: int | float) -> float | None:
    """Convert a number to single precision, or ``None`` if it does not fit.

    Infinities and NaN pass through. Finite numbers whose magnitude exceeds
    the f32 range are not representable.
    """
    try:
        as_float = float(value)
    except OverflowError:
        return None
    if math.isnan(as_float) or math.isinf(as_float):
        return as_float
    if abs(as_float) > F32_MAX:
        return None
    return round_f32(as_float)


def format_float(value: float, *, single: bool = False) -> str:
    """Shortest text that round-trips at the given precision, e.g. ``5.0``, ``0.1``."""
    if math.isnan(value) or math.isinf(value):
        return repr(value)
    text = repr(value)
    if single:
        for digits in range(1, 10):
            candidate = f"{value:.{digits}g}"
            if round_f32(float(candidate)) == value:
                text = candidate
                break
    # positional, never exponent notation: 1e+05 -> 100000.0
    text = f"{Decimal(text):f}"
    if "." not in text:
        text += ".0"
    return text


@dataclass(frozen=True)
class Element:
    """Capability set of an aggregate element type."""

    name: str
    min_value: int | float
    max_value: int | float
    integral: bool
    single: bool = False

    @property
    def zero(self) -> int | float:
        return 0 if self.integral else 0.0

    def coerce(self, value: int | float) -> int | float:
        """Bring a sample into this element's domain.

        Integer elements round float samples to the nearest integer (ties to
        even) and then saturate at the bounds, infinities included. Float
        elements round to the element precision.
        """
        if self.integral:
            if isinstance(value, float) and math.isinf(value):
                return self.max_value if value > 0 else self.min_value
            as_int = round(value)
            if as_int > self.max_value:
                return self.max_value
            if as_int < self.min_value:
                return self.min_value
            return as_int
        as_float = float(value)
        return round_f32(as_float) if self.single else as_float

    def add(self, a: int | float, b: int | float) -> int | float:
        total = a + b
        return round_f32(total) if self.single else total

    def to_f32(self, value: int | float) -> float | None:
        return to_f32(value)

    def __repr__(self) -> str:
        return self.name


def _signed(bits: int) -> Element:
    return Element(
        name=f"INT{bits}", min_value=-(2 ** (bits - 1)), max_value=2 ** (bits - 1) - 1, integral=True
    )


def _unsigned(bits: int) -> Element:
    return Element(name=f"UINT{bits}", min_value=0, max_value=2**bits - 1, integral=True)


INT8 = _signed(8)
INT16 = _signed(16)
INT32 = _signed(32)
INT64 = _signed(64)
UINT8 = _unsigned(8)
UINT16 = _unsigned(16)
UINT32 = _unsigned(32)
UINT64 = _unsigned(64)
FLOAT32 = Element(
    name="FLOAT32", min_value=-F32_MAX, max_value=F32_MAX, integral=False, single=True
)
FLOAT64 = Element(
    name="FLOAT64",
    min_value=-sys.float_info.max,
    max_value=sys.float_info.max,
    integral=False,
)

ELEMENTS: dict[str, Element] = {
    e.name: e
    for e in (INT8, INT16, INT32, INT64, UINT8, UINT16, UINT32, UINT64, FLOAT32, FLOAT64)
}


def get_element(name: str) -> Element:
    """Look up an element by name (case-insensitive), e.g. ``"int32"``."""
    try:
        return ELEMENTS[name.upper()]
    except KeyError:
        raise ValueError(f"Unknown element type: {name!r}") from None

