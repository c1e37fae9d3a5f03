"""Disjoint sets with union by depth and path compression."""

from __future__ import annotations

from collections.abc import Hashable


class DisjointSet:
    """Groups keys that have been connected.

    Keys are added the first time they are seen.  When two groups of the same
    depth join, the group of the first key names the result.
    """

    def __init__(self) -> None:
        self._parent: dict[Hashable, Hashable] = {}
        self._depth: dict[Hashable, int] = {}

    def _find(self, key: Hashable) -> Hashable:
        if key not in self._parent:
            self._parent[key] = key
            self._depth[key] = 0
            return key
        root = key
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[key] != root:
            self._parent[key], key = root, self._parent[key]
        return root

    def connect(self, a: Hashable, b: Hashable) -> None:
        """Put ``a`` and ``b`` in the same group."""
        root_a = self._find(a)
        root_b = self._find(b)
        if root_a == root_b:
            return
        depth_a = self._depth[root_a]
        depth_b = self._depth[root_b]
        if depth_a < depth_b:
            self._parent[root_a] = root_b
        elif depth_b < depth_a:
            self._parent[root_b] = root_a
        else:
            self._parent[root_b] = root_a
            self._depth[root_a] = depth_a + 1

    def group(self, key: Hashable) -> Hashable:
        """The key that names the group of ``key``."""
        return self._find(key)