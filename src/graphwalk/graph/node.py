"""Dataclass for a named vertex with weighted outgoing edges."""

from collections.abc import KeysView
from dataclasses import dataclass, field

from graphwalk.exceptions import NoSuchEdgeError


@dataclass(frozen=True, eq=False, slots=True)
class Node:
    """
    A named vertex owning a mapping from neighbor node to edge weight.

    Nodes compare and hash by identity, so nodes with the same name that
    belong to different graphs stay distinct. An undirected edge is stored as
    two directed edges of equal weight.
    """

    name: str
    neighbors: dict["Node", int] = field(default_factory=dict, repr=False)

    def __repr__(self) -> str:
        """Represent the Node by its name."""
        return self.name

    @property
    def degree(self) -> int:
        """Number of outgoing edges."""
        return len(self.neighbors)

    def get_neighbors(self) -> KeysView["Node"]:
        """Get all nodes this node has an edge to, in edge insertion order."""
        return self.neighbors.keys()

    def add_directed_edge(self, target: "Node", weight: int) -> None:
        """Add or overwrite the edge from this node to ``target``."""
        self.neighbors[target] = weight

    def add_undirected_edge(self, target: "Node", weight: int) -> None:
        """Add edges in both directions between this node and ``target``."""
        self.neighbors[target] = weight
        target.neighbors[self] = weight

    def remove_directed_edge(self, target: "Node") -> None:
        """
        Remove the edge from this node to ``target``.

        Raises:
            NoSuchEdgeError: if there is no such edge.

        """
        if target not in self.neighbors:
            raise NoSuchEdgeError(self.name, target.name)
        del self.neighbors[target]

    def remove_undirected_edge(self, target: "Node") -> None:
        """
        Remove the edges in both directions between this node and ``target``.

        Both directions are checked before either is removed, so a missing
        reverse edge leaves the graph untouched.

        Raises:
            NoSuchEdgeError: if either direction is missing.

        """
        if target not in self.neighbors:
            raise NoSuchEdgeError(self.name, target.name)
        if self not in target.neighbors:
            raise NoSuchEdgeError(target.name, self.name)
        del self.neighbors[target]
        # a self-loop is a single entry
        if target is not self:
            del target.neighbors[self]

    def has_edge(self, target: "Node") -> bool:
        """Return True if there is an edge from this node to ``target``."""
        return target in self.neighbors

    def get_weight(self, target: "Node") -> int:
        """
        Get the weight of the edge from this node to ``target``.

        Raises:
            NoSuchEdgeError: if there is no such edge.

        """
        try:
            return self.neighbors[target]
        except KeyError:
            raise NoSuchEdgeError(self.name, target.name) from None
