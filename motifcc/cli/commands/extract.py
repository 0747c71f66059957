"""Motif subgraph extraction command."""

import sys
import click
from typing import Optional

from ...exceptions import MotifClusteringError
from ...io import read_graph, write_graph, write_node_map
from ...networks.extract import extract_motif_subgraph
from ...networks.motifs import motif_from_isoclass


def register_extract_commands(cli: click.Group) -> None:
    """Register extraction commands."""
    @cli.command("extract", help="Extract the subgraph made of a motif's instances")
    @click.argument("graph_in", type=click.Path(exists=True, dir_okay=False))
    @click.argument("motif_size", type=int)
    @click.argument("motif_id", type=click.IntRange(min=0))
    @click.argument("graph_out", type=click.Path(dir_okay=False))
    @click.argument("map_out", type=click.Path(dir_okay=False), required=False)
    def extract(graph_in: str, motif_size: int, motif_id: int, graph_out: str,
                map_out: Optional[str]):
        """Write to GRAPH_OUT (GML) the part of GRAPH_IN covered by motif instances.

        MAP_OUT, if given, receives one "new_id,old_id" line per node.
        """
        try:
            host = read_graph(graph_in)
            motif = motif_from_isoclass(motif_size, motif_id, directed=host.directed)
            sub, node_map = extract_motif_subgraph(host, motif)
        except (MotifClusteringError, ValueError) as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)

        write_graph(sub, graph_out)
        if map_out:
            write_node_map(map_out, node_map)
        click.echo(f"Extracted {sub.n_nodes} nodes, {sub.n_edges} edges to {graph_out}")
