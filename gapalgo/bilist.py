"""Circular doubly linked list nodes."""

from __future__ import annotations

from typing import Any


class BiList:
    """A node of a circular doubly linked list.

    A fresh node forms a ring of one.  Walking ``forward`` follows the order
    of insertion; ``backward`` walks the ring the other way round.
    """

    def __init__(self, value: Any = None) -> None:
        self.value = value
        self.left: BiList = self
        self.right: BiList = self

    def _reset_ring(self) -> None:
        self.left = self
        self.right = self

    def insert(self, node: BiList) -> None:
        """Splice the ring holding ``node`` in just before this node.

        Taking this node as the head of its ring, the nodes of the other ring
        end up at the end of it, in their own forward order.
        """
        self_right = self.right
        node_right = node.right
        self_right.left = node
        node_right.left = self
        self.right = node_right
        node.right = self_right

    def detach(self) -> None:
        """Take this node out of its ring, leaving it a ring of one."""
        if not self.is_single():
            self.left.right = self.right
            self.right.left = self.left
        self._reset_ring()

    def is_single(self) -> bool:
        """Whether the node is alone in its ring."""
        return self.left is self and self.right is self

    def forward(self) -> BiList:
        return self.left

    def backward(self) -> BiList:
        return self.right