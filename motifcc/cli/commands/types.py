"""Pairwise motif clustering type commands."""

import sys
import click
from typing import Optional

from ...exceptions import MotifClusteringError
from ...io import read_graph, write_cluster_types, write_node_sets
from ...networks.cluster_types import classify_cluster_pairs, enumerate_cluster_types
from ...networks.motifs import motif_from_isoclass


def register_types_commands(cli: click.Group) -> None:
    """Register clustering type commands."""
    @cli.command("types", help="Count pairs of motif instances by clustering type")
    @click.argument("graph_in", type=click.Path(exists=True, dir_okay=False))
    @click.argument("motif_size", type=int)
    @click.argument("motif_id", type=click.IntRange(min=0))
    @click.argument("out_prefix", required=False)
    def types(graph_in: str, motif_size: int, motif_id: int, out_prefix: Optional[str]):
        """Print per-type pair counts for GRAPH_IN, then the non-overlapping count.

        With OUT_PREFIX, writes each clustering type to OUT_PREFIXType<i>.gml
        and the host nodes involved in each type to OUT_PREFIXNodeMaps.txt.
        """
        try:
            host = read_graph(graph_in)
            motif = motif_from_isoclass(motif_size, motif_id, directed=host.directed)
            cluster_types = enumerate_cluster_types(motif)
            result = classify_cluster_pairs(host, motif, types=cluster_types)
        except (MotifClusteringError, ValueError) as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)

        if out_prefix:
            write_cluster_types(out_prefix, cluster_types)
            write_node_sets(f"{out_prefix}NodeMaps.txt", result.node_sets)
        click.echo(str(result))
