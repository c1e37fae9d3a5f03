"""Basic descriptive statistics."""

from __future__ import annotations

import math
from collections.abc import Collection


def average(data: Collection[float]) -> float:
    """Arithmetic mean of ``data``."""
    if not data:
        raise ValueError("average of empty data")
    return sum(data) / len(data)


def standard_deviation(data: Collection[float], average: float) -> float:
    """Population standard deviation of ``data`` around ``average``."""
    if not data:
        raise ValueError("standard deviation of empty data")
    return math.sqrt(sum((d - average) ** 2 for d in data) / len(data))