"""Command-line interface for the GraphWalk package."""

import click
import daiquiri

from graphwalk import __version__
from graphwalk.graph import graph_from_edges


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--log-level",
    type=click.Choice(
        ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False
    ),
    default="info",
    show_default=True,
    help="Set the logging level.",
)
@click.option(
    "-e",
    "--edge",
    "edges",
    type=(str, str, int),
    multiple=True,
    metavar="SRC DST WEIGHT",
    help="Add an edge to the graph. May be repeated.",
)
@click.option(
    "--undirected/--directed",
    default=False,
    show_default=True,
    help="Treat every edge as undirected.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    edges: tuple[tuple[str, str, int], ...],
    log_level: str = "info",
    undirected: bool = False,  # noqa: FBT001, FBT002
) -> None:
    """CLI command group for GraphWalk."""
    daiquiri.setup(level=log_level.upper(), program_name="GraphWalk")
    logger = daiquiri.getLogger(__name__)
    ctx.ensure_object(dict)
    logger.info("GraphWalk %s", __version__)
    ctx.obj["graph"] = graph_from_edges(edges, directed=not undirected)
    logger.debug("Built graph with %d nodes", len(ctx.obj["graph"]))
