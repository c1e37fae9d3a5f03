"""A map keyed by an unordered pair of keys."""

from __future__ import annotations

from typing import Any


class BiKeyMap:
    """Maps pairs of keys to values; ``(a, b)`` and ``(b, a)`` are the same key."""

    def __init__(self) -> None:
        self.data: dict[tuple[Any, Any], Any] = {}

    @staticmethod
    def _pair(k1: Any, k2: Any) -> tuple[Any, Any]:
        return (k1, k2) if k1 < k2 else (k2, k1)

    def contains(self, k1: Any, k2: Any) -> bool:
        return self._pair(k1, k2) in self.data

    def set(self, k1: Any, k2: Any, value: Any) -> None:
        self.data[self._pair(k1, k2)] = value

    def get(self, k1: Any, k2: Any) -> Any:
        """The value stored for the pair; ``KeyError`` if there is none."""
        return self.data[self._pair(k1, k2)]