"""Unit tests for Graph node registry and traversals."""

from graphwalk import Graph, Node, Path, graph_from_edges


def test_get_or_create_node_is_idempotent() -> None:
    """Test that the same name always yields the same node."""
    graph = Graph()
    first = graph.get_or_create_node("A")
    second = graph.get_or_create_node("A")

    assert first is second
    assert graph.contains_node("A")
    assert "A" in graph
    assert len(graph) == 1
    assert graph.get_all_nodes() == [first]


def test_contains_node_does_not_create() -> None:
    """Test that membership checks never register a node."""
    graph = Graph()
    assert not graph.contains_node("missing")
    assert len(graph) == 0


def test_graph_from_edges() -> None:
    """Test building directed and undirected graphs from triples."""
    directed = graph_from_edges([("A", "B", 2), ("B", "C", 3)])
    a = directed.get_or_create_node("A")
    b = directed.get_or_create_node("B")
    assert a.get_weight(b) == 2
    assert not b.has_edge(a)
    assert [node.name for node in directed.get_all_nodes()] == ["A", "B", "C"]

    undirected = graph_from_edges([("A", "B", 2)], directed=False)
    a = undirected.get_or_create_node("A")
    b = undirected.get_or_create_node("B")
    assert b.get_weight(a) == 2


def test_iter_edges() -> None:
    """Test that every directed edge is yielded once."""
    graph = graph_from_edges([("A", "B", 1), ("B", "C", 2)], directed=False)
    edges = {(src.name, dst.name, w) for src, dst, w in graph.iter_edges()}
    assert edges == {
        ("A", "B", 1),
        ("B", "A", 1),
        ("B", "C", 2),
        ("C", "B", 2),
    }


def _tree_graph() -> Graph:
    # A -> B, A -> C, B -> D
    return graph_from_edges([("A", "B", 1), ("A", "C", 1), ("B", "D", 1)])


def test_breadth_first_search_order() -> None:
    """Test that BFS visits layer by layer in neighbor insertion order."""
    visited: list[str] = []
    _tree_graph().breadth_first_search("A", lambda node: visited.append(node.name))
    assert visited == ["A", "B", "C", "D"]


def test_depth_first_search_order() -> None:
    """Test that DFS follows the most recently pushed neighbor first."""
    visited: list[str] = []
    _tree_graph().depth_first_search("A", lambda node: visited.append(node.name))
    assert visited == ["A", "C", "B", "D"]


def test_traversals_visit_each_node_once_with_cycles() -> None:
    """Test that cycles never cause a node to be visited twice."""
    graph = graph_from_edges(
        [("A", "B", 1), ("B", "C", 1), ("C", "A", 1), ("C", "D", 1), ("A", "D", 1)],
        directed=False,
    )
    for search in (graph.breadth_first_search, graph.depth_first_search):
        visited: list[Node] = []
        search("A", visited.append)
        assert len(visited) == 4
        assert set(visited) == set(graph.get_all_nodes())


def test_traversal_only_reaches_connected_nodes() -> None:
    """Test that unreachable nodes are never visited."""
    graph = graph_from_edges([("A", "B", 1), ("C", "D", 1)])
    visited: list[str] = []
    graph.breadth_first_search("A", lambda node: visited.append(node.name))
    assert visited == ["A", "B"]


def test_traversal_creates_missing_start_node() -> None:
    """Test that searching from an unknown name registers that node."""
    graph = Graph()
    visited: list[str] = []
    graph.depth_first_search("lonely", lambda node: visited.append(node.name))
    assert visited == ["lonely"]
    assert graph.contains_node("lonely")


def test_path_orders_by_cost() -> None:
    """Test that paths order by cost only."""
    a, b, c = Node("A"), Node("B"), Node("C")
    assert Path(1, b) < Path(2, a)
    assert Path(3, a, b) == Path(3, b, c)
    assert str(Path(4, c)) == "C with cost 4"


def test_owns_checks_identity() -> None:
    """Test that a same-named node from elsewhere is not owned."""
    graph = Graph()
    registered = graph.get_or_create_node("A")
    assert graph.owns(registered)
    assert not graph.owns(Node("A"))
