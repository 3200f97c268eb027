"""Scalar helpers: angle conversion, clamping, interpolation and wrapping."""

from __future__ import annotations

import math
from typing import Any

PI = 3.14159265359
PI_DOUBLE = 6.28318530718
HALF_PI = 1.57079632679


def deg_to_rad(degrees: float) -> float:
    return degrees * (PI / 180)


def rad_to_deg(radians: float) -> float:
    return radians * (180 / PI)


def clamp(value: Any, minimum: Any, maximum: Any) -> Any:
    if value < minimum:
        return minimum
    if value > maximum:
        return maximum
    return value


def lerp(start: Any, end: Any, t: float) -> Any:
    """Interpolate between ``start`` and ``end``; ``t`` is clamped to [0, 1]."""
    t = clamp(t, 0.0, 1.0)
    return start + (end - start) * t


def normalize(value: float, minimum: float, maximum: float) -> float:
    return (value - minimum) / (maximum - minimum)


def remap(value: float, in_min: float, in_max: float, out_min: float, out_max: float) -> float:
    return lerp(out_min, out_max, normalize(value, in_min, in_max))


def mod(numerator: float, denominator: float) -> float:
    """Remainder with the sign of the numerator (truncating division)."""
    if isinstance(numerator, int) and isinstance(denominator, int):
        remainder = abs(numerator) % abs(denominator)
        return -remainder if numerator < 0 else remainder
    return math.fmod(numerator, denominator)


def wrap(value: float, minimum: float, maximum: float) -> float:
    if value < minimum:
        return maximum - mod(minimum - value, maximum - minimum)
    if value > maximum:
        return minimum + mod(value - minimum, maximum - minimum)
    return value