"""
Extraction of the subgraph made of a motif's instances.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Tuple, Union

import networkx as nx

from ..core.graph import Graph, as_nx
from .matching import match
from .counting import unique_node_sets

logger = logging.getLogger(__name__)


def extract_motif_subgraph(
    G: Union[Graph, nx.Graph], motif: nx.Graph
) -> Tuple[Graph, Dict[int, int]]:
    """
    Build a graph containing only the edges of motif instances.

    Instances are added one at a time: each host node receives a new dense
    id the first time it is used, and the motif's edges are added through
    the instance's mapping. Duplicate edges and self-loops are dropped.

    Parameters
    ----------
    G : Graph, nx.Graph or nx.DiGraph
        Host graph
    motif : nx.Graph or nx.DiGraph
        Motif with nodes 0..k-1

    Returns
    -------
    subgraph : Graph
        Extracted graph with the host's directedness
    node_map : dict
        New node id -> host node id
    """
    host = as_nx(G)
    instances = unique_node_sets(match(host, motif))

    node_map: Dict[int, int] = {}
    new_id: Dict[int, int] = {}
    edges: List[Tuple[int, int]] = []
    motif_edges = list(motif.edges())

    for nodes in instances:
        for h in nodes:
            if h not in new_id:
                new_id[h] = len(node_map)
                node_map[new_id[h]] = h
        for u, v in motif_edges:
            edges.append((new_id[nodes[u]], new_id[nodes[v]]))

    out = nx.DiGraph() if host.is_directed() else nx.Graph()
    out.add_nodes_from(range(len(node_map)))
    out.add_edges_from(edges)
    out.remove_edges_from(list(nx.selfloop_edges(out)))

    logger.info(
        f"Extracted {len(instances)} motif instances: "
        f"{out.number_of_nodes()} nodes, {out.number_of_edges()} edges"
    )
    return Graph.from_networkx(out), node_map
