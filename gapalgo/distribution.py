"""Frequency and percentage distributions over interval bins."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

from gapalgo.interval import Interval


def _ordered(mapping: dict) -> Iterator[tuple[Interval, Any]]:
    return iter(sorted(mapping.items(), key=lambda pair: pair[0].low))


def _format_float(value: float) -> str:
    return f"{value:.6f}"


@dataclass
class IntervalPercent:
    """Share of the total that falls in each interval."""

    percents: dict[Interval, float] = field(default_factory=dict)

    def get_percent(self, value: Any) -> float:
        """The share of the first interval holding ``value``, or 0."""
        for interval, percent in _ordered(self.percents):
            if interval.contains(value):
                return percent
        return 0.0

    def __str__(self) -> str:
        return "".join(
            f"{interval}\t{_format_float(percent)}\n"
            for interval, percent in _ordered(self.percents)
        )

    def valid_keys(self) -> list[Interval]:
        """Intervals with a share above zero, in order."""
        return [interval for interval, percent in _ordered(self.percents) if percent > 0.0]

    def sub_percent(self, keys: Iterable[Interval]) -> IntervalPercent:
        """Shares restricted to ``keys`` and renormalised to sum to one."""
        chosen: dict[Interval, float] = {}
        total = 0.0
        for key in keys:
            share = self.percents.get(key, 0.0)
            chosen[key] = share if share > 0 else 0.0
            total += chosen[key]
        if total > 0:
            return IntervalPercent({key: share / total for key, share in chosen.items()})
        return IntervalPercent({key: 0.0 for key in chosen})

    def compare(self, other: IntervalPercent) -> tuple[float, float]:
        """Compare with ``other``.

        Returns the total share of ``other`` on intervals missing here, and
        the mean squared difference over the intervals of ``other``.
        """
        missing = 0.0
        squared = 0.0
        for interval, percent in other.percents.items():
            if interval in self.percents:
                diff = self.percents[interval] - percent
                squared += diff * diff
            else:
                missing += percent
        mean = squared / len(other.percents) if other.percents else math.nan
        return missing, mean


@dataclass
class IntervalDistribution:
    """Counts of values falling in each interval."""

    freqs: dict[Interval, int] = field(default_factory=dict)

    def __str__(self) -> str:
        return "".join(f"{interval}\t{count}\n" for interval, count in _ordered(self.freqs))

    def init_bins(self, bin_size: Any, low: Any, high: Any) -> None:
        """Create empty closed bins of width ``bin_size`` from ``low`` up to ``high``."""
        start = low
        while start < high:
            self.freqs[Interval(start, start + bin_size - 1)] = 0
            start += bin_size

    def count(self, value: Any, count: int = 1) -> None:
        """Add ``count`` to the first bin holding ``value``; ignore it otherwise."""
        for interval, _ in _ordered(self.freqs):
            if interval.contains(value):
                self.freqs[interval] += count
                return

    def valid_part(self) -> IntervalDistribution:
        """Only the bins with a positive count."""
        return IntervalDistribution(
            {interval: n for interval, n in _ordered(self.freqs) if n > 0}
        )

    def percents(self) -> IntervalPercent:
        """Each bin's share of the total count."""
        total = sum(self.freqs.values())
        if total == 0:
            return IntervalPercent({interval: math.nan for interval, _ in _ordered(self.freqs)})
        return IntervalPercent(
            {interval: n / total for interval, n in _ordered(self.freqs)}
        )