"""Numeric conversion helpers."""

import math
import random

import numpy as np


def degrees_to_radians(degrees: float) -> float:
    """Convert degrees to radians (factor pi/180)."""
    return math.pi * degrees / 180.0


def radians_to_degrees(radians: float) -> float:
    """Convert radians to degrees (factor 180/pi)."""
    return radians * 180.0 / math.pi


def to_int(value: float) -> int:
    """Narrow to an integer, truncating toward zero.

    Raises:
        ValueError: If ``value`` is NaN
        OverflowError: If ``value`` is infinite
    """
    return math.trunc(value)


def to_float(value: float) -> float:
    """Narrow to IEEE single precision.

    Example:
        >>> to_float(0.1)
        0.10000000149011612
    """
    return float(np.float32(value))


def to_double(value: float) -> float:
    """Widen to double precision."""
    return float(value)


def is_positive(value: float) -> bool:
    return value > 0


def is_negative(value: float) -> bool:
    return value < 0


def random_int_between(low: int, high: int, rng: random.Random | None = None) -> int:
    """Random integer in ``[low, high]``, both ends included."""
    rng = rng or random
    return rng.randint(low, high)
