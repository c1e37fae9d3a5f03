"""A Fibonacci heap over caller-owned nodes."""

from __future__ import annotations

from typing import Any

from gapalgo.bilist import BiList


class FibNode(BiList):
    """A heap node carrying a ``key`` and a ``value``."""

    def __init__(self, key: Any = None, value: Any = None) -> None:
        super().__init__(value)
        self.key = key
        self.father: FibNode | None = None
        self.son: FibNode | None = None
        self.mark = False
        self.degree = 0

    def _reset(self) -> None:
        self._reset_ring()
        self.father = None
        self.son = None
        self.mark = False
        self.degree = 0

    def add_child(self, child: FibNode) -> None:
        """Make the lone node ``child`` a child of this node."""
        if not child.is_single():
            raise ValueError("child must be detached before it is added")
        self.degree += 1
        if self.son is None:
            self.son = child
        else:
            self.son.insert(child)
        child.father = self

    def remove_child(self, child: FibNode) -> None:
        """Take ``child`` out of this node's children."""
        if child.father is not self:
            raise ValueError("node is not a child of this node")
        self.degree -= 1
        if self.son is child:
            self.son = None if child.is_single() else child.forward()
        child.detach()


class FibHeap:
    """A min-ordered Fibonacci heap.

    The heap links the nodes it is given but does not own them; the caller
    keeps them alive and may hand a node back to ``decrease_key``.
    """

    def __init__(self) -> None:
        self._min: FibNode | None = None
        self._n = 0

    def __len__(self) -> int:
        return self._n

    def __bool__(self) -> bool:
        return self._n > 0

    def insert(self, node: FibNode) -> None:
        node._reset()
        self._n += 1
        if self._min is None:
            self._min = node
            return
        self._min.insert(node)
        if node.key < self._min.key:
            self._min = node

    def min(self) -> FibNode:
        """The node with the smallest key, left in the heap."""
        if self._min is None:
            raise IndexError("min of an empty heap")
        return self._min

    @staticmethod
    def union(h1: FibHeap, h2: FibHeap) -> FibHeap:
        """A heap holding the nodes of both; the two heaps share those nodes."""
        heap = FibHeap()
        heap._min = h1._min
        if heap._min is not None and h2._min is not None:
            heap._min.insert(h2._min)
        if heap._min is None or (h2._min is not None and h2._min.key < heap._min.key):
            heap._min = h2._min
        heap._n = h1._n + h2._n
        return heap

    def decrease_key(self, node: FibNode, new_key: Any) -> None:
        """Lower ``node``'s key to ``new_key``."""
        if node.key < new_key:
            raise ValueError("new key is greater than the current key")
        if node.key == new_key:
            return
        node.key = new_key
        father = node.father
        if father is not None and node.key < father.key:
            self._cut(node, father)
            self._cascading_cut(father)
        if self._min is None:
            raise IndexError("decrease_key on an empty heap")
        if node.key < self._min.key:
            self._min = node

    def extract_min(self) -> FibNode:
        """Remove and return the node with the smallest key."""
        z = self._min
        if z is None:
            raise IndexError("extract_min from an empty heap")
        if z.son is not None:
            child = z.son
            while True:
                child.father = None
                child = child.forward()
                if child is z.son:
                    break
            z.insert(z.son)
        if z.is_single():
            self._min = None
        else:
            following = z.forward()
            z.detach()
            self._min = following
            self._consolidate()
        self._n -= 1
        return z

    def _cut(self, son: FibNode, father: FibNode) -> None:
        father.remove_child(son)
        son.mark = False
        son.father = None
        self._min.insert(son)

    def _cascading_cut(self, node: FibNode) -> None:
        while node.father is not None:
            parent = node.father
            if not node.mark:
                node.mark = True
                return
            self._cut(node, parent)
            node = parent

    def _consolidate(self) -> None:
        start = self._min
        if start.is_single():
            return
        by_degree: dict[int, FibNode] = {}
        links: list[tuple[FibNode, FibNode]] = []
        current = start
        while True:
            x = current
            current = x.forward()
            degree = x.degree
            while degree in by_degree:
                y = by_degree.pop(degree)
                if x.key > y.key:
                    x, y = y, x
                links.append((y, x))
                degree += 1
            by_degree[degree] = x
            if current is start:
                break
        for child, parent in links:
            self._link(child, parent)
        self._min = None
        for _, root in sorted(by_degree.items()):
            if self._min is None or root.key < self._min.key:
                self._min = root

    @staticmethod
    def _link(child: FibNode, parent: FibNode) -> None:
        child.detach()
        parent.add_child(child)
        child.mark = False