"""A multiset counting how often each element occurs."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator


class Collection:
    """A multiset of hashable, mutually comparable elements."""

    def __init__(self, elements: Iterable[Hashable] | None = None) -> None:
        self._counts: dict[Hashable, int] = {}
        for element in elements or ():
            self.add(element)

    def add(self, element: Hashable, count: int = 1) -> None:
        """Add ``count`` copies of ``element``."""
        if count <= 0:
            raise ValueError("count must be positive")
        self._counts[element] = self._counts.get(element, 0) + count

    def remove(self, element: Hashable, count: int = 1) -> None:
        """Remove ``count`` copies of ``element``, dropping it when none are left."""
        if count <= 0:
            raise ValueError("count must be positive")
        if element not in self._counts:
            raise KeyError(element)
        if self._counts[element] < count:
            raise ValueError(f"only {self._counts[element]} of {element!r} present")
        self._counts[element] -= count
        if self._counts[element] < 1:
            del self._counts[element]

    def __len__(self) -> int:
        return sum(self._counts.values())

    def key_size(self) -> int:
        """Number of distinct elements."""
        return len(self._counts)

    def __iter__(self) -> Iterator[tuple[Hashable, int]]:
        """Yield ``(element, count)`` pairs in element order."""
        return iter(sorted(self._counts.items()))

    def __iadd__(self, other: Collection) -> Collection:
        for element, count in list(other._counts.items()):
            self.add(element, count)
        return self

    def __isub__(self, other: Collection) -> Collection:
        for element, count in list(other._counts.items()):
            self.remove(element, count)
        return self

    @staticmethod
    def intersection(c1: Collection, c2: Collection) -> Collection:
        """Elements in both, each with the smaller of its two counts."""
        small, big = (c1, c2) if c1.key_size() < c2.key_size() else (c2, c1)
        result = Collection()
        for element, count in small._counts.items():
            if element in big._counts:
                result.add(element, min(count, big._counts[element]))
        return result

    @staticmethod
    def union(c1: Collection, c2: Collection) -> Collection:
        """Elements in either, each with the larger of its two counts."""
        result = Collection()
        result += c1
        result += c2
        result -= Collection.intersection(c1, c2)
        return result

    @staticmethod
    def jaccard(c1: Collection, c2: Collection) -> float:
        """Size of the intersection divided by size of the union."""
        common = Collection.intersection(c1, c2)
        union_size = len(c1) + len(c2) - len(common)
        if union_size == 0:
            raise ValueError("jaccard index of two empty collections is undefined")
        return len(common) / union_size