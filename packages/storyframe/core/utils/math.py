"""Numeric helpers shared by techniques, bindings and layout."""

from __future__ import annotations

import math
from typing import TypeVar

import numpy as np

Number = TypeVar("Number", int, float, np.number)


def clamp(value: Number, min_val: Number, max_val: Number) -> Number:
    """Bound ``value`` to ``[min_val, max_val]``; the type of the input is kept."""
    return max(min_val, min(max_val, value))


def clamp_unit(value: float) -> float:
    """Clamp a progress value to [0, 1], mapping NaN to 0."""
    if math.isnan(value):
        return 0.0
    return float(clamp(value, 0.0, 1.0))


def lerp(a: float, b: float, t: float) -> float:
    """Interpolate from ``a`` to ``b``; ``t`` outside [0, 1] extrapolates."""
    return float(a) + (float(b) - float(a)) * t


def evenly_spaced(start: float, stop: float, count: int) -> list[float]:
    """Return ``count`` evenly spaced values from start to stop inclusive.

    Example:
        >>> evenly_spaced(0.2, 0.8, 3)
        [0.2, 0.5, 0.8]
    """
    if count <= 0:
        return []
    return [float(v) for v in np.linspace(start, stop, count)]
