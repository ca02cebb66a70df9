"""Scalar helpers shared by every geometry type.

Two tolerances are used throughout the package: values closer than
``ZERO_EPSILON`` to zero are treated as zero (and snapped to it at
construction time), and two values whose relative difference is below
``EQUAL_EPSILON`` compare equal.
"""

from __future__ import annotations

import math
import sys
from typing import Iterable, Optional

from .types import NonRealValueError

ZERO_EPSILON = 1e-9
EQUAL_EPSILON = 1e-5

# smallest normal float32, matches the threshold used by the relative comparison
_MIN_NORMAL = 1.1754943508222875e-38

TAU = 2.0 * math.pi


def is_zero(value: float) -> bool:
    """Return ``True`` when *value* lies strictly within ``ZERO_EPSILON`` of zero."""

    return -ZERO_EPSILON < value < ZERO_EPSILON


def is_equal(a: float, b: float, epsilon: float = EQUAL_EPSILON) -> bool:
    """Relative float comparison.

    Values that are exactly equal always compare equal. When either value is
    zero (or the difference is denormal) the absolute difference must be
    below ``epsilon ** 2``; otherwise the difference relative to the summed
    magnitudes must be below ``epsilon``. NaN never compares equal.
    """

    if a == b:
        return True
    diff = abs(a - b)
    if a * b == 0 or diff < _MIN_NORMAL:
        return diff < epsilon * epsilon
    return diff / min(abs(a) + abs(b), sys.float_info.max) < epsilon


def signbit(value: float) -> bool:
    return math.copysign(1.0, value) < 0


def snap_zero(value: float) -> float:
    return 0.0 if is_zero(value) else float(value)


def divide(num: float, den: float) -> float:
    """IEEE-754 division: a zero denominator yields ``±inf`` or ``nan``."""

    if den != 0:
        return num / den
    if num == 0 or math.isnan(num):
        return math.nan
    return math.copysign(math.inf, num) * math.copysign(1.0, den)


def clamp(lo: float, value: float, hi: float) -> float:
    """Clamp *value* into ``[lo, hi]``; NaN passes through untouched."""

    if value < lo:
        return lo
    if value > hi:
        return hi
    return value


def minimum(values: Iterable[float]) -> float:
    """Smallest value, skipping NaN whenever a real value is available."""

    result = math.nan
    first = True
    for value in values:
        if first or value < result or math.isnan(result):
            result = value
            first = False
    return result


def maximum(values: Iterable[float]) -> float:
    """Largest value, skipping NaN whenever a real value is available."""

    result = math.nan
    first = True
    for value in values:
        if first or value > result or math.isnan(result):
            result = value
            first = False
    return result


def float_error(value: float) -> Optional[NonRealValueError]:
    """Return a :class:`NonRealValueError` when *value* is NaN or infinite."""

    if math.isnan(value) or math.isinf(value):
        return NonRealValueError(value)
    return None


def first_error(values: Iterable[float]) -> Optional[NonRealValueError]:
    """Check several scalars; the first NaN wins over the first infinity."""

    first_inf: Optional[NonRealValueError] = None
    for value in values:
        if math.isnan(value):
            return NonRealValueError(value)
        if first_inf is None and math.isinf(value):
            first_inf = NonRealValueError(value)
    return first_inf


def human_format(value: float, precision: int = 9) -> str:
    """Fixed-point rendering with trailing zeros trimmed (``2.50`` -> ``2.5``)."""

    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    text = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return text


def normalize_radians(theta: float) -> float:
    """Wrap an angle into ``[0, 2π)``."""

    if math.isnan(theta) or math.isinf(theta):
        return theta
    wrapped = math.fmod(theta, TAU)
    if wrapped < 0:
        wrapped += TAU
    if wrapped >= TAU:
        wrapped = 0.0
    return wrapped


def degrees_to_radians(degrees: float) -> float:
    return degrees * math.pi / 180.0


def radians_to_degrees(theta: float) -> float:
    return theta * 180.0 / math.pi


__all__ = [
    "ZERO_EPSILON",
    "EQUAL_EPSILON",
    "TAU",
    "is_zero",
    "is_equal",
    "signbit",
    "snap_zero",
    "divide",
    "clamp",
    "minimum",
    "maximum",
    "float_error",
    "first_error",
    "human_format",
    "normalize_radians",
    "degrees_to_radians",
    "radians_to_degrees",
]
