"""The trunk of a tree: its central path, and that path as a node list."""

from __future__ import annotations

import copy
from collections.abc import Hashable
from dataclasses import dataclass

from gapalgo.graph_basic import ListGraphBase


@dataclass
class _TrunkNode:
    id: Hashable
    edges: set[int]
    level: int = -1
    prev: Hashable | None = None
    prev_2: Hashable | None = None
    marked: bool = False


def _empty_like(graph: ListGraphBase) -> ListGraphBase:
    result = copy.copy(graph)
    result.nodes = {}
    result.edges = []
    return result


def linear_trunk(graph: ListGraphBase) -> list[Hashable]:
    """The nodes of a linear graph in path order, from its smallest end node."""
    starter = None
    for node_id in sorted(graph.nodes):
        degree = graph.nodes[node_id].edge_count()
        if degree == 1:
            starter = node_id
            break
        if degree != 2:
            raise ValueError(f"node {node_id!r} has {degree} edges; graph is not linear")
    if starter is None:
        raise ValueError("graph has no end node")

    order = [starter]
    current = starter
    following = graph.get_edge(min(graph.get_node(starter).edge_ids)).opposite(starter)
    while True:
        order.append(following)
        if len(order) > graph.node_count():
            raise ValueError("graph is not linear")
        node = graph.get_node(following)
        degree = node.edge_count()
        if degree == 1:
            break
        if degree != 2:
            raise ValueError(f"node {following!r} has {degree} edges; graph is not linear")
        first, second = (graph.get_edge(edge_id) for edge_id in sorted(node.edge_ids))
        beyond = first.opposite(following)
        if beyond == current:
            beyond = second.opposite(following)
            if beyond == current:
                raise ValueError(f"node {following!r} has no way on")
        current, following = following, beyond
    return order


def trunk(graph: ListGraphBase) -> ListGraphBase:
    """The trunk of a tree, found by peeling leaves level by level.

    The peeling meets in one or two central nodes; the trunk runs from there
    back out along the last two branches peeled.  Graphs of fewer than three
    nodes come back as a copy.
    """
    if graph.node_count() < 3:
        return copy.deepcopy(graph)

    nodes = {
        node_id: _TrunkNode(node_id, set(node.edge_ids)) for node_id, node in graph.nodes.items()
    }
    result = _empty_like(graph)

    def place(node_id: Hashable) -> None:
        if result.has_node(node_id):
            return
        result.add_node(graph.get_node(node_id))
        result.get_node(node_id).clear_edges()

    singles = {node_id for node_id, tn in nodes.items() if not tn.edges}
    for tn in nodes.values():
        if len(tn.edges) == 1:
            tn.level = 1
    for node_id in singles:
        nodes[node_id].marked = True

    remaining = len(nodes) - len(singles)
    while remaining > 1:
        alive = [node_id for node_id in sorted(nodes) if not nodes[node_id].marked]
        candidates = [node_id for node_id in alive if len(nodes[node_id].edges) == 1]
        remaining = len(alive)
        if len(candidates) == remaining:
            if remaining != 2:
                raise ValueError("graph is not a tree")
            break
        if not candidates:
            raise ValueError("graph is not a tree")
        candidate_set = set(candidates)
        for node_id in candidates:
            leaf = nodes[node_id]
            edge_id = min(leaf.edges)
            oppo = graph.get_edge(edge_id).opposite(node_id)
            if oppo in candidate_set:
                continue
            parent = nodes[oppo]
            parent.level = leaf.level + 1
            parent.prev_2 = parent.prev
            parent.prev = node_id
            parent.edges.discard(edge_id)
        for node_id in candidates:
            nodes[node_id].marked = True
        remaining -= len(candidates)

    seeds = sorted(node_id for node_id, tn in nodes.items() if not tn.marked)
    if len(seeds) == 1:
        root = nodes[seeds[0]]
        place(root.id)
        pending = {root.prev, root.prev_2}
    elif len(seeds) == 2:
        root1, root2 = seeds
        place(root1)
        place(root2)
        pending = {nodes[r].prev for r in seeds if nodes[r].prev is not None}
        for edge_id in sorted(nodes[root1].edges):
            edge = graph.get_edge(edge_id)
            if edge.opposite(root1) == root2:
                result.add_edge(edge)
    else:
        raise ValueError("graph is not a tree")

    while pending:
        if None in pending or len(pending) != 2:
            raise ValueError("tree has no balanced trunk")
        first, second = (nodes[node_id] for node_id in sorted(pending))
        if len(first.edges) != 1 or len(second.edges) != 1 or first.level != second.level:
            raise ValueError("tree has no balanced trunk")
        place(first.id)
        place(second.id)
        result.add_edge(graph.get_edge(next(iter(first.edges))))
        result.add_edge(graph.get_edge(next(iter(second.edges))))
        pending = {first.prev, second.prev} if first.level > 1 else set()

    return result