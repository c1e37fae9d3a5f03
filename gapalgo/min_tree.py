"""Minimum spanning trees (Prim's algorithm over a Fibonacci heap)."""

from __future__ import annotations

import copy
from collections.abc import Callable, Hashable
from dataclasses import dataclass
from typing import Any

from gapalgo.fibheap import FibHeap, FibNode
from gapalgo.graph_basic import Edge, ListGraphBase


@dataclass
class _Entry:
    heap_node: FibNode
    edge_id: int


def _empty_like(graph: ListGraphBase) -> ListGraphBase:
    result = copy.copy(graph)
    result.nodes = {}
    result.edges = []
    return result


def min_tree(graph: ListGraphBase, weight: Callable[[Edge], Any]) -> ListGraphBase:
    """A minimum spanning forest of ``graph``, edges weighed by ``weight``.

    Each component is grown from its smallest node id.
    """
    result = _empty_like(graph)
    heap = FibHeap()
    entries: dict[Hashable, _Entry] = {}

    def offer(node_id: Hashable, edge: Edge, value: Any) -> None:
        entry = entries.get(node_id)
        if entry is not None:
            if value < entry.heap_node.key:
                heap.decrease_key(entry.heap_node, value)
                entry.edge_id = edge.id
            return
        heap_node = FibNode(value, node_id)
        entries[node_id] = _Entry(heap_node, edge.id)
        heap.insert(heap_node)

    def take(node_id: Hashable) -> None:
        node = graph.get_node(node_id)
        result.add_node(node)
        result.get_node(node_id).clear_edges()
        for edge_id in sorted(node.edge_ids):
            edge = graph.get_edge(edge_id)
            other = edge.opposite(node_id)
            if result.has_node(other):
                continue
            offer(other, edge, weight(edge))

    for node_id in sorted(graph.nodes):
        if result.has_node(node_id):
            continue
        take(node_id)
        while heap:
            reached = heap.extract_min().value
            edge = graph.get_edge(entries[reached].edge_id)
            take(reached)
            result.add_edge(edge)
    return result