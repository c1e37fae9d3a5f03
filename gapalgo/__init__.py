"""Algorithms and data structures: intervals, distributions, multisets, heaps, graphs, alignment and fitting."""

__version__ = "0.1.0"