"""Weighted graph over uniquely named nodes, with search and MST algorithms."""

import heapq
import logging
from collections import deque
from collections.abc import Callable, Iterable, Iterator

from .node import Node
from .path import Path

logger = logging.getLogger(__name__)

NodeVisitor = Callable[[Node], None]


class Graph:
    """
    Directed, weighted graph keyed by node name.

    Nodes are created lazily: looking up a missing name registers a new node
    with no edges. Undirected graphs are built from undirected edges, which
    are pairs of directed edges. Nodes and neighbors are iterated in
    insertion order, which fixes traversal order and the node Prim-Jarnik
    starts from.
    """

    def __init__(self) -> None:
        """Initialize an empty graph."""
        self._nodes: dict[str, Node] = {}

    def __len__(self) -> int:
        """Return the number of registered nodes."""
        return len(self._nodes)

    def __contains__(self, name: object) -> bool:
        """Return True if a node with the given name is registered."""
        return name in self._nodes

    def get_or_create_node(self, name: str) -> Node:
        """Return the node with the given name, creating it if needed."""
        node = self._nodes.get(name)
        if node is None:
            node = Node(name)
            self._nodes[name] = node
        return node

    def contains_node(self, name: str) -> bool:
        """Return True if a node with the given name is registered."""
        return name in self._nodes

    def get_all_nodes(self) -> list[Node]:
        """Get all registered nodes."""
        return list(self._nodes.values())

    def owns(self, node: Node) -> bool:
        """Return True if ``node`` itself, not just its name, is registered."""
        return self._nodes.get(node.name) is node

    def iter_edges(self) -> Iterator[tuple[Node, Node, int]]:
        """Yield ``(source, target, weight)`` for every directed edge."""
        for node in self._nodes.values():
            for neighbor, weight in node.neighbors.items():
                yield node, neighbor, weight

    def breadth_first_search(self, start_name: str, visit: NodeVisitor) -> None:
        """
        Visit every node reachable from ``start_name`` in breadth-first order.

        ``visit`` is called once per node, the first time it is dequeued.
        The start node is created if it does not exist.
        """
        logger.debug("BFS from %s", start_name)
        visited: set[Node] = set()
        to_visit: deque[Node] = deque([self.get_or_create_node(start_name)])
        while to_visit:
            node = to_visit.popleft()
            if node in visited:
                continue
            visit(node)
            visited.add(node)
            to_visit.extend(n for n in node.get_neighbors() if n not in visited)

    def depth_first_search(self, start_name: str, visit: NodeVisitor) -> None:
        """
        Visit every node reachable from ``start_name`` in depth-first order.

        ``visit`` is called once per node, the first time it is popped.
        The start node is created if it does not exist.
        """
        logger.debug("DFS from %s", start_name)
        visited: set[Node] = set()
        to_visit: list[Node] = [self.get_or_create_node(start_name)]
        while to_visit:
            node = to_visit.pop()
            if node in visited:
                continue
            visit(node)
            visited.add(node)
            to_visit.extend(n for n in node.get_neighbors() if n not in visited)

    def dijkstra(self, start_name: str) -> dict[Node, int]:
        """
        Compute the cheapest path cost from ``start_name`` to every node.

        Edge weights must be non-negative; negative weights are not detected
        and give unspecified results. The search stops once every registered
        node is finalized or nothing more is reachable, so unreachable nodes
        are absent from the result. Neighbors owned by another graph are
        walked like any other node and appear in the result under their own
        identity.

        Args:
            start_name: Name of the source node, created if it does not exist.

        Returns:
            Mapping from each reachable node to its total path cost.

        """
        result: dict[Node, int] = {}
        todo: list[Path] = [Path(0, self.get_or_create_node(start_name))]
        finalized = 0
        while todo and finalized < len(self._nodes):
            path = heapq.heappop(todo)
            node = path.dst
            if node in result:
                continue
            result[node] = path.cost
            if self.owns(node):
                finalized += 1
            for neighbor, weight in node.neighbors.items():
                if neighbor not in result:
                    heapq.heappush(todo, Path(path.cost + weight, neighbor))
        logger.debug(
            "Dijkstra from %s finalized %d of %d nodes",
            start_name,
            len(result),
            len(self._nodes),
        )
        return result

    def prim_jarnik(self) -> "Graph":
        """
        Compute a minimum spanning tree with Prim-Jarnik's algorithm.

        The tree is a new graph with a fresh node for every node of this
        graph and an undirected edge for every tree edge. Growth starts at
        the first registered node and follows outgoing edges. When the
        frontier runs out before every node is visited, growth restarts at
        the next unvisited node, so a disconnected graph yields a minimum
        spanning forest. Edges to nodes owned by another graph are ignored.

        Returns:
            The spanning tree (or forest) as a new Graph.

        """
        tree = Graph()
        visited: set[Node] = set()
        for root in self._nodes.values():
            if root in visited:
                continue
            if visited:
                logger.debug("Graph is disconnected, new tree from %s", root.name)
            self._grow_tree(root, tree, visited)
        return tree

    def _grow_tree(self, root: Node, tree: "Graph", visited: set[Node]) -> None:
        """Add the minimum spanning tree of the nodes reachable from ``root``."""
        todo: list[Path] = []

        def expand(node: Node) -> None:
            visited.add(node)
            for neighbor, weight in node.neighbors.items():
                # edges leaving this graph are not part of its spanning tree
                if neighbor not in visited and self.owns(neighbor):
                    heapq.heappush(todo, Path(weight, neighbor, node))

        tree.get_or_create_node(root.name)
        expand(root)
        while todo and len(visited) < len(self._nodes):
            path = heapq.heappop(todo)
            node, source = path.dst, path.start
            if node in visited or source is None:
                continue
            tree_node = tree.get_or_create_node(node.name)
            tree_source = tree.get_or_create_node(source.name)
            tree_node.add_undirected_edge(tree_source, path.cost)
            expand(node)


def graph_from_edges(
    edges: Iterable[tuple[str, str, int]], *, directed: bool = True
) -> Graph:
    """
    Build a graph from ``(source, target, weight)`` triples.

    Args:
        edges: Edges to add, by node name.
        directed: Add directed edges if True, undirected edges otherwise.

    Returns:
        The new Graph.

    """
    graph = Graph()
    for source, target, weight in edges:
        src = graph.get_or_create_node(source)
        dst = graph.get_or_create_node(target)
        if directed:
            src.add_directed_edge(dst, weight)
        else:
            src.add_undirected_edge(dst, weight)
    return graph
