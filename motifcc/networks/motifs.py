"""
Motif catalog.

Motifs are small connected patterns identified by size and igraph
isomorphism class id. They are returned as NetworkX graphs whose nodes are
the motif positions ``0..size-1``.
"""

from __future__ import annotations

from typing import Dict, Tuple

import igraph as ig
import networkx as nx

from ..exceptions import MotifError

# Number of isomorphism classes per (size, directed), as tabulated by igraph.
ISOCLASS_COUNTS: Dict[Tuple[int, bool], int] = {
    (3, False): 4,
    (4, False): 11,
    (3, True): 16,
    (4, True): 218,
}

MOTIF_SIZES = (3, 4)


def isoclass_count(size: int, directed: bool) -> int:
    """Number of isomorphism classes for graphs with ``size`` nodes."""
    try:
        return ISOCLASS_COUNTS[(int(size), bool(directed))]
    except KeyError:
        raise MotifError(
            f"Motif size must be one of {MOTIF_SIZES}, got {size}"
        ) from None


def motif_from_isoclass(size: int, isoclass: int, directed: bool = False) -> nx.Graph:
    """
    Build the canonical motif graph for an isomorphism class.

    Parameters
    ----------
    size : int
        Number of motif nodes (3 or 4)
    isoclass : int
        igraph isomorphism class id
    directed : bool
        Must match the directedness of the host graph

    Returns
    -------
    motif : nx.Graph or nx.DiGraph
        Motif with nodes 0..size-1

    Raises
    ------
    MotifError
        If size or class id is out of range
    """
    n_classes = isoclass_count(size, directed)
    if not 0 <= int(isoclass) < n_classes:
        kind = "directed" if directed else "undirected"
        raise MotifError(
            f"Isoclass id for {kind} size-{size} motifs must be in "
            f"0..{n_classes - 1}, got {isoclass}"
        )

    pattern = ig.Graph.Isoclass(n=int(size), cls=int(isoclass), directed=bool(directed))
    motif = nx.DiGraph() if directed else nx.Graph()
    motif.add_nodes_from(range(int(size)))
    motif.add_edges_from(pattern.get_edgelist())
    return motif


def as_motif(G: nx.Graph) -> nx.Graph:
    """Relabel a small pattern graph so its nodes are positions 0..k-1."""
    if G.number_of_nodes() == 0:
        raise MotifError("Motif must have at least one node")
    motif = nx.convert_node_labels_to_integers(G, first_label=0, ordering="default")
    return nx.DiGraph(motif) if motif.is_directed() else nx.Graph(motif)


def check_directedness(host: nx.Graph, motif: nx.Graph) -> None:
    """Raise MotifError unless host and motif agree on directedness."""
    if host.is_directed() != motif.is_directed():
        raise MotifError(
            f"Motif directedness ({'directed' if motif.is_directed() else 'undirected'}) "
            f"does not match host graph "
            f"({'directed' if host.is_directed() else 'undirected'})"
        )
