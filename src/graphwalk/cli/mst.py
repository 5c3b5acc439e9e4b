"""GraphWalk minimum spanning tree CLI definition."""

import click

from graphwalk.graph import Graph, Node

from .cli import cli


@cli.command()
@click.pass_obj
def mst(obj: dict) -> None:
    """Print the edges of a minimum spanning tree and their total weight."""
    graph: Graph = obj["graph"]
    tree = graph.prim_jarnik()
    printed: set[frozenset[Node]] = set()
    total = 0
    for source, target, weight in tree.iter_edges():
        pair = frozenset((source, target))
        if pair in printed:
            continue
        printed.add(pair)
        total += weight
        click.echo(f"{source.name} {target.name} {weight}")
    click.echo(f"total {total}")
