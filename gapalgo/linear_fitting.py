"""Orthogonal least-squares line fitting."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass
class Line:
    """The line ``a*x + b*y + c = 0``."""

    a: float
    b: float
    c: float

    def y_at(self, x: float) -> float:
        return (-self.a * x - self.c) / self.b

    def x_at(self, y: float) -> float:
        return (-self.b * y - self.c) / self.a


def line_fit(points: Iterable[tuple[float, float]]) -> Line:
    """Fit a line minimising perpendicular distances to ``(x, y)`` points.

    Fewer than two points give the degenerate line ``0 = 0``.
    """
    pts = list(points)
    if len(pts) < 2:
        return Line(0.0, 0.0, 0.0)
    size = len(pts)
    x_mean = sum(x for x, _ in pts) / size
    y_mean = sum(y for _, y in pts) / size
    dxx = sum((x - x_mean) ** 2 for x, _ in pts)
    dxy = sum((x - x_mean) * (y - y_mean) for x, y in pts)
    dyy = sum((y - y_mean) ** 2 for _, y in pts)
    lam = ((dxx + dyy) - math.sqrt((dxx - dyy) ** 2 + 4 * dxy * dxy)) / 2.0
    den = math.sqrt(dxy * dxy + (lam - dxx) ** 2)
    if den == 0:
        raise ValueError("points do not determine a line")
    a = dxy / den
    b = (lam - dxx) / den
    return Line(a, b, -a * x_mean - b * y_mean)