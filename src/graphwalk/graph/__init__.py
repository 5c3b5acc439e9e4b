"""Weighted graph data structures and algorithms."""

from .node import Node
from .path import Path
from .weighted_graph import Graph, NodeVisitor, graph_from_edges

__all__: list[str] = ["Graph", "Node", "NodeVisitor", "Path", "graph_from_edges"]
