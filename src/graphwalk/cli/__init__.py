"""Setup the GraphWalk command line interface."""

from . import cli, mst, search, shortest

__all__: list[str] = ["cli", "mst", "search", "shortest"]
