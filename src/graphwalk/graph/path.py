"""Priority-queue element used by the shortest path and spanning tree searches."""

from dataclasses import dataclass, field

from .node import Node


@dataclass(frozen=True, order=True, slots=True)
class Path:
    """
    A candidate path ending at ``dst`` with a cumulative ``cost``.

    Paths order by cost alone; the order among equal costs is unspecified.
    ``start`` is the node the final edge leaves, when the search needs it.
    """

    cost: int
    dst: Node = field(compare=False)
    start: Node | None = field(default=None, compare=False)

    def __str__(self) -> str:
        """Render the path as its destination and cost."""
        return f"{self.dst.name} with cost {self.cost}"
