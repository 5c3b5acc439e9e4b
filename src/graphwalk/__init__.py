"""GraphWalk: weighted graphs with traversal, shortest path and MST algorithms."""

from .exceptions import NoSuchEdgeError
from .graph import Graph, Node, NodeVisitor, Path, graph_from_edges

__version__ = "0.1.0"

__all__: list[str] = [
    "Graph",
    "Node",
    "NoSuchEdgeError",
    "NodeVisitor",
    "Path",
    "__version__",
    "graph_from_edges",
]
