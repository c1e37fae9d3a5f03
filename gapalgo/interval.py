"""Numeric intervals with open or closed ends."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class IntervalType(Enum):
    """Which ends of an interval belong to it."""

    UNKNOWN = 0
    LEFT_CLOSE_RIGHT_CLOSE = 1
    LEFT_OPEN_RIGHT_OPEN = 2
    LEFT_CLOSE_RIGHT_OPEN = 3
    LEFT_OPEN_RIGHT_CLOSE = 4
    INVALID = 5

    @property
    def left_open(self) -> bool:
        return _openness(self)[0]

    @property
    def right_open(self) -> bool:
        return _openness(self)[1]


_OPENNESS = {
    IntervalType.LEFT_CLOSE_RIGHT_CLOSE: (False, False),
    IntervalType.LEFT_OPEN_RIGHT_OPEN: (True, True),
    IntervalType.LEFT_CLOSE_RIGHT_OPEN: (False, True),
    IntervalType.LEFT_OPEN_RIGHT_CLOSE: (True, False),
}


def _openness(kind: IntervalType) -> tuple[bool, bool]:
    try:
        return _OPENNESS[kind]
    except KeyError:
        raise ValueError(f"interval type {kind.name} has no defined ends") from None


def _format_number(value: Any) -> str:
    if isinstance(value, float):
        return f"{value:.6f}"
    return str(value)


@dataclass(frozen=True, eq=False)
class Interval:
    """An interval from ``low`` to ``high``.

    Equality and hashing use the bounds only; ordering uses ``low`` only,
    which is enough to keep intervals sorted as container keys.
    """

    low: Any
    high: Any
    kind: IntervalType = field(default=IntervalType.LEFT_CLOSE_RIGHT_CLOSE)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.low == other.low and self.high == other.high

    def __hash__(self) -> int:
        return hash((self.low, self.high))

    def __lt__(self, other: Interval) -> bool:
        return self.low < other.low

    def __str__(self) -> str:
        left_open, right_open = _openness(self.kind)
        left = "( " if left_open else "[ "
        right = " )" if right_open else " ]"
        return f"{left}{_format_number(self.low)} , {_format_number(self.high)}{right}"

    def contains(self, value: Any) -> bool:
        """Whether ``value`` lies inside the interval, honouring open ends."""
        left_open, right_open = _openness(self.kind)
        above = value > self.low if left_open else value >= self.low
        below = value < self.high if right_open else value <= self.high
        return above and below

    def contains_interval(self, other: Interval) -> bool:
        """Whether ``other``'s bounds lie within this interval's bounds."""
        return self.low <= other.low and self.high >= other.high

    def length(self) -> Any:
        return self.high - self.low

    def overlap(self, other: Interval) -> Interval:
        """The common part of two intervals; ``[0, 0]`` when they do not meet."""
        if self.contains_interval(other):
            return other
        if other.contains_interval(self):
            return self
        left_open, right_open = _openness(self.kind)
        empty = Interval(0, 0, self.kind)
        if not left_open and not right_open:
            if self.high < other.low or self.low > other.high:
                return empty
        elif self.high <= other.low or self.low >= other.high:
            return empty
        return Interval(max(self.low, other.low), min(self.high, other.high), self.kind)