"""GraphWalk traversal CLI definitions."""

import click

from graphwalk.graph import Graph, Node

from .cli import cli


def _echo_name(node: Node) -> None:
    click.echo(node.name)


@cli.command()
@click.argument("start", nargs=1, type=str, required=True)
@click.pass_obj
def bfs(obj: dict, start: str) -> None:
    """Print the nodes reachable from START in breadth-first order."""
    graph: Graph = obj["graph"]
    graph.breadth_first_search(start, _echo_name)


@cli.command()
@click.argument("start", nargs=1, type=str, required=True)
@click.pass_obj
def dfs(obj: dict, start: str) -> None:
    """Print the nodes reachable from START in depth-first order."""
    graph: Graph = obj["graph"]
    graph.depth_first_search(start, _echo_name)
