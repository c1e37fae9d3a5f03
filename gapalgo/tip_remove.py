"""Detection and removal of short dead-end branches (tips) of a graph."""

from __future__ import annotations

import sys
from collections.abc import Callable, Hashable
from dataclasses import dataclass

from gapalgo.graph_basic import ListGraphBase

Tip = list[Hashable]


@dataclass
class TipRemoveResult:
    """Counts gathered by a run of tip removal."""

    base_node_num: int = 0
    tip_num: int = 0
    tip_node_num: int = 0
    base_left_node_num: int = 0


class TipRemover:
    """Finds and deletes tips: chains from a one-edge node to a junction.

    ``checker`` receives the chain found so far and returns true while it is
    still short enough to count as a tip.
    """

    def __init__(self, checker: Callable[[Tip], bool], debug: bool = False) -> None:
        self.checker = checker
        self.debug = debug

    def detect(self, graph: ListGraphBase) -> list[Tip]:
        """All tips of ``graph``, each listed from its loose end inwards."""
        tips: list[Tip] = []
        used: set[Hashable] = set()
        for node_id in sorted(graph.nodes):
            node = graph.nodes[node_id]
            if node.id in used or node.edge_count() != 1:
                continue
            tip: Tip = [node.id]
            edge = graph.get_edge(min(node.edge_ids))
            following = edge.opposite(node.id)
            previous = node.id
            while self.checker(tip):
                current = graph.get_node(following)
                degree = current.edge_count()
                if degree == 0:
                    raise RuntimeError(f"node {following!r} reached by an edge holds none")
                if degree == 1:
                    # Both ends are loose: a short linear piece, not a tip.
                    break
                if degree == 2:
                    tip.append(following)
                    for edge_id in sorted(current.edge_ids):
                        beyond = graph.get_edge(edge_id).opposite(following)
                        if beyond != previous:
                            previous, following = following, beyond
                            break
                    else:
                        raise RuntimeError(f"no way on from node {following!r}")
                    continue
                tips.append(tip)
                used.update(tip)
                break
        return tips

    def remove(self, graph: ListGraphBase, tip: Tip) -> None:
        """Delete the nodes of ``tip`` from ``graph``."""
        for node_id in tip:
            if self.debug:
                print(f"    del node : {node_id}", file=sys.stderr)
            graph.remove_node(node_id)

    def deep_remove(self, graph: ListGraphBase) -> TipRemoveResult:
        """Remove tips round after round until none are left."""
        result = TipRemoveResult(base_node_num=graph.node_count())
        while True:
            if self.debug:
                print("    tip round ...", file=sys.stderr)
            tips = self.detect(graph)
            if not tips:
                break
            for tip in tips:
                result.tip_num += 1
                result.tip_node_num += len(tip)
                self.remove(graph, tip)
        result.base_left_node_num = result.base_node_num - result.tip_node_num
        return result