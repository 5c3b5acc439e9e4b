"""GraphWalk shortest path CLI definition."""

import click
import daiquiri

from graphwalk.graph import Graph

from .cli import cli

logger = daiquiri.getLogger(__name__)


@cli.command()
@click.argument("start", nargs=1, type=str, required=True)
@click.pass_obj
def dijkstra(obj: dict, start: str) -> None:
    """Print the cheapest path cost from START to every reachable node."""
    graph: Graph = obj["graph"]
    if any(weight < 0 for _, _, weight in graph.iter_edges()):
        logger.warning("Negative edge weights found, costs may be wrong")
    costs = graph.dijkstra(start)
    for node, cost in sorted(costs.items(), key=lambda item: item[1]):
        click.echo(f"{node.name} {cost}")
