import io

import pytest

from gapalgo.graph_basic import DirectedEdge, Edge, GraphNode, ListDigraph, ListGraph


def _fill(graph):
    graph.connect("NodeA", "NodeB")
    graph.connect("NodeA", "NodeC")
    graph.connect("NodeB", "NodeC")
    graph.connect("NodeB", "NodeD")
    graph.connect("NodeC", "NodeD")
    return graph


def test_list_graph():
    graph = _fill(ListGraph())
    assert graph.check_edge("NodeA", "NodeB") is True
    assert graph.check_edge("NodeB", "NodeA") is True
    assert graph.get_node("NodeA").has_edge(0) is True
    assert graph.get_node("NodeB").has_edge(0) is True


def test_list_digraph():
    graph = _fill(ListDigraph())
    assert graph.check_edge("NodeA", "NodeB") is True
    assert graph.check_edge("NodeB", "NodeA") is False
    assert graph.get_node("NodeA").has_edge(0) is True
    assert graph.get_node("NodeB").has_edge(0) is False


def test_counts_and_duplicate_edge_ignored():
    graph = _fill(ListGraph())
    assert graph.node_count() == 4
    assert graph.edge_count() == 5
    assert graph.connect("NodeB", "NodeA") is None
    assert graph.edge_count() == 5


def test_write_dot_undirected():
    graph = ListGraph()
    graph.connect("a", "b")
    out = io.StringIO()
    graph.write_dot(out)
    assert out.getvalue() == "graph {\n\ta\t--\tb [  id = 0 ]\n}\n"


def test_write_dot_directed():
    graph = ListDigraph()
    graph.connect("a", "b")
    out = io.StringIO()
    graph.write_dot(out)
    assert out.getvalue() == "digraph {\n\ta\t->\tb [  id = 0 ]\n}\n"


def test_edge_opposite_and_error():
    edge = Edge("a", "b", 3)
    assert edge.opposite("a") == "b"
    assert edge.opposite("b") == "a"
    with pytest.raises(ValueError):
        edge.opposite("c")


def test_edge_links():
    assert Edge("a", "b").links(Edge("b", "a"))
    assert not DirectedEdge("a", "b").links(DirectedEdge("b", "a"))
    assert DirectedEdge("a", "b").links(DirectedEdge("a", "b"))


def test_edge_invalidate():
    edge = Edge("a", "b", 0)
    assert edge.is_valid()
    assert edge.invalidate() is True
    assert edge.is_valid() is False
    assert edge.invalidate() is False


def test_graph_node_edges():
    node = GraphNode("x")
    node.add_edge(1)
    node.add_edge(2)
    assert node.edge_count() == 2
    assert node.remove_edge(1) is True
    assert node.remove_edge(1) is False
    node.clear_edges()
    assert node.edge_count() == 0


def test_remove_node_removes_its_edges():
    graph = _fill(ListGraph())
    assert graph.remove_node("NodeA") is True
    assert graph.remove_node("NodeA") is False
    assert graph.has_node("NodeA") is False
    assert graph.get_edge(0).is_valid() is False
    assert graph.get_edge(1).is_valid() is False
    assert graph.get_node("NodeB").edge_ids == {2, 3}
    assert graph.check_edge("NodeB", "NodeC") is True


def test_remove_edge_twice():
    graph = _fill(ListGraph())
    assert graph.remove_edge(2) is True
    assert graph.remove_edge(2) is False
    assert graph.check_edge("NodeB", "NodeC") is False


def test_get_missing():
    graph = ListGraph()
    with pytest.raises(KeyError):
        graph.get_node("none")
    with pytest.raises(IndexError):
        graph.get_edge(0)


def test_subgraph():
    graph = _fill(ListGraph())
    sub = graph.subgraph({"NodeB", "NodeC", "NodeD", "missing"})
    assert isinstance(sub, ListGraph)
    assert sorted(sub.nodes) == ["NodeB", "NodeC", "NodeD"]
    assert sub.edge_count() == 3
    assert sub.check_edge("NodeC", "NodeB")
    assert not sub.has_node("NodeA")
    assert graph.node_count() == 4


def test_subgraph_directed():
    graph = _fill(ListDigraph())
    sub = graph.subgraph(["NodeA", "NodeB"])
    assert sub.edge_count() == 1
    assert sub.check_edge("NodeA", "NodeB")
    assert not sub.check_edge("NodeB", "NodeA")