"""Adjacency-list graphs, undirected and directed, with numbered edges."""

from __future__ import annotations

import copy
from collections.abc import Hashable, Iterable
from dataclasses import dataclass, field
from typing import Any, ClassVar, TextIO

INVALID_EDGE = -1


@dataclass(eq=False)
class Edge:
    """An undirected edge between ``source`` and ``target``.

    The id is ``-1`` until a graph stores the edge, and again once the edge
    has been removed from its graph.
    """

    source: Hashable
    target: Hashable
    id: int = INVALID_EDGE

    def links(self, other: Edge) -> bool:
        """Whether both edges join the same two nodes, in either direction."""
        return (self.source == other.source and self.target == other.target) or (
            self.source == other.target and self.target == other.source
        )

    def opposite(self, node: Hashable) -> Hashable:
        """The end of the edge that is not ``node``."""
        if node == self.source:
            return self.target
        if node == self.target:
            return self.source
        raise ValueError(f"{node!r} is not an end of edge {self.id}")

    def invalidate(self) -> bool:
        """Mark the edge removed; false if it already was."""
        if self.id == INVALID_EDGE:
            return False
        self.id = INVALID_EDGE
        return True

    def is_valid(self) -> bool:
        return self.id != INVALID_EDGE

    def attr_string(self) -> str:
        return f" id = {self.id}"

    def __str__(self) -> str:
        return f"{self.source}\t--\t{self.target} [ {self.attr_string()} ]"

    @classmethod
    def dot_head(cls) -> str:
        return "graph {"


@dataclass(eq=False)
class DirectedEdge(Edge):
    """An edge that leads from ``source`` to ``target`` only."""

    def links(self, other: Edge) -> bool:
        return self.source == other.source and self.target == other.target

    def __str__(self) -> str:
        return f"{self.source}\t->\t{self.target} [ {self.attr_string()} ]"

    @classmethod
    def dot_head(cls) -> str:
        return "digraph {"


@dataclass
class GraphNode:
    """A node and the ids of the edges it holds."""

    id: Hashable
    edge_ids: set[int] = field(default_factory=set)

    def add_edge(self, edge_id: int) -> None:
        self.edge_ids.add(edge_id)

    def has_edge(self, edge_id: int) -> bool:
        return edge_id in self.edge_ids

    def edge_count(self) -> int:
        return len(self.edge_ids)

    def clear_edges(self) -> None:
        self.edge_ids.clear()

    def remove_edge(self, edge_id: int) -> bool:
        """Forget ``edge_id``; false if the node did not hold it."""
        if edge_id in self.edge_ids:
            self.edge_ids.discard(edge_id)
            return True
        return False


class ListGraphBase:
    """Nodes keyed by id and edges numbered in the order they were added.

    A removed edge keeps its slot, marked invalid, so edge ids stay stable.
    """

    directed: ClassVar[bool] = False

    def __init__(self, edge_type: type[Edge]) -> None:
        self.edge_type = edge_type
        self.nodes: dict[Hashable, GraphNode] = {}
        self.edges: list[Edge] = []

    def add_node(self, node: GraphNode | Hashable) -> None:
        """Store a copy of ``node``, or make a bare node for an id not yet present."""
        if isinstance(node, GraphNode):
            stored = copy.copy(node)
            stored.edge_ids = set(node.edge_ids)
            self.nodes[stored.id] = stored
        elif node not in self.nodes:
            self.nodes[node] = GraphNode(node)

    def get_node(self, node_id: Hashable) -> GraphNode:
        try:
            return self.nodes[node_id]
        except KeyError:
            raise KeyError(f"no node {node_id!r}") from None

    def has_node(self, node_id: Hashable) -> bool:
        return node_id in self.nodes

    def get_edge(self, edge_id: int) -> Edge:
        if not 0 <= edge_id < len(self.edges):
            raise IndexError(f"no edge {edge_id}")
        return self.edges[edge_id]

    def remove_node(self, node_id: Hashable) -> bool:
        """Remove a node and the edges it holds; false if there was no such node."""
        node = self.nodes.get(node_id)
        if node is None:
            return False
        for edge_id in sorted(node.edge_ids):
            self.remove_edge(edge_id)
        del self.nodes[node_id]
        return True

    def remove_edge(self, edge_id: int) -> bool:
        """Detach an edge from its ends and mark it invalid; false if already removed."""
        edge = self.get_edge(edge_id)
        if not edge.is_valid():
            return False
        for end in (edge.source, edge.target):
            node = self.nodes.get(end)
            if node is not None:
                node.remove_edge(edge_id)
        edge.invalidate()
        return True

    def check_edge(self, source: Hashable, target: Hashable) -> bool:
        """Whether an edge from ``source`` to ``target`` is present."""
        if source not in self.nodes or target not in self.nodes:
            return False
        probe = self.edge_type(source, target)
        return any(
            self.get_edge(edge_id).links(probe) for edge_id in self.nodes[source].edge_ids
        )

    def edge_count(self) -> int:
        """Number of edge slots, removed edges included."""
        return len(self.edges)

    def node_count(self) -> int:
        return len(self.nodes)

    def write_dot(self, out: TextIO) -> None:
        """Write every edge slot to ``out`` in DOT form."""
        out.write(self.edge_type.dot_head() + "\n")
        for edge in self.edges:
            out.write(f"\t{edge}\n")
        out.write("}\n")

    def connect(self, source: Hashable, target: Hashable) -> int | None:
        """Add a plain edge between two node ids."""
        return self.add_edge(self.edge_type(source, target))

    def add_edge(self, edge: Edge) -> int | None:
        """Store a copy of ``edge`` and return its new id.

        Missing end nodes are created.  Nothing is added, and ``None`` is
        returned, when such an edge is already present.
        """
        source, target = edge.source, edge.target
        if self.check_edge(source, target):
            return None
        self.add_node(source)
        self.add_node(target)
        stored = copy.copy(edge)
        stored.id = len(self.edges)
        self.edges.append(stored)
        self.nodes[source].add_edge(stored.id)
        if not self.directed:
            self.nodes[target].add_edge(stored.id)
        return stored.id

    def subgraph(self, node_ids: Iterable[Hashable]) -> ListGraphBase:
        """A new graph of the given nodes and the edges among them."""
        wanted = sorted({node_id for node_id in node_ids if node_id in self.nodes})
        result = copy.copy(self)
        result.nodes = {}
        result.edges = []
        for node_id in wanted:
            result.add_node(self.nodes[node_id])
            result.nodes[node_id].clear_edges()
        for node_id in wanted:
            for edge_id in sorted(self.nodes[node_id].edge_ids):
                edge = self.get_edge(edge_id)
                if result.has_node(edge.source) and result.has_node(edge.target):
                    result.add_edge(edge)
        return result


class ListGraph(ListGraphBase):
    """An undirected graph: each edge is held by both of its ends."""

    directed = False

    def __init__(self) -> None:
        super().__init__(Edge)


class ListDigraph(ListGraphBase):
    """A directed graph: each edge is held by its source only."""

    directed = True

    def __init__(self) -> None:
        super().__init__(DirectedEdge)


def _edge_of(graph: ListGraphBase, edge_id: int) -> Any:
    return graph.get_edge(edge_id)