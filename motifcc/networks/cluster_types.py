"""
Pairwise motif clustering types.

Two instances of a motif can overlap in several topologically distinct
ways. A clustering type is the graph obtained by gluing two copies of the
motif along a set of shared positions; types are enumerated up to
isomorphism and every overlapping pair of instances in a host graph is
classified against them. Only 3- and 4-node motifs are supported.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from itertools import permutations
from typing import List, Optional, Sequence, Union

import networkx as nx

from ..core.graph import Graph, as_nx
from ..exceptions import MotifError
from .matching import match
from .counting import unique_node_sets
from .motifs import MOTIF_SIZES

logger = logging.getLogger(__name__)


def merge_motifs(
    motif: nx.Graph, overlap1: Sequence[int], overlap2: Sequence[int]
) -> nx.Graph:
    """
    Glue two copies of ``motif`` together.

    Position ``overlap2[i]`` of the second copy is identified with position
    ``overlap1[i]`` of the first. The first copy keeps nodes ``0..k-1``;
    the second copy's remaining positions become ``k, k+1, ...``.
    Duplicate edges collapse.
    """
    k = motif.number_of_nodes()
    merged = motif.__class__()
    merged.add_nodes_from(range(2 * k - len(overlap1)))
    merged.add_edges_from(motif.edges())

    position = dict(zip(overlap2, overlap1))
    nxt = k
    for p in range(k):
        if p not in position:
            position[p] = nxt
            nxt += 1

    merged.add_edges_from((position[u], position[v]) for u, v in motif.edges())
    return merged


def _keeps_motif(merged: nx.Graph, motif: nx.Graph, overlap1: Sequence[int]) -> bool:
    """True if neither glued copy picked up edges from the other."""
    k = motif.number_of_nodes()
    m = motif.number_of_edges()
    first = range(k)
    second = list(overlap1) + list(range(k, 2 * k - len(overlap1)))
    return (
        merged.subgraph(first).number_of_edges() == m
        and merged.subgraph(second).number_of_edges() == m
    )


def enumerate_cluster_types(motif: nx.Graph) -> List[nx.Graph]:
    """
    All distinct ways two instances of ``motif`` can share vertices.

    Parameters
    ----------
    motif : nx.Graph or nx.DiGraph
        Motif with 3 or 4 nodes

    Returns
    -------
    types : list of graphs
        One representative per isomorphism class, in discovery order
        (overlap size 1 first)
    """
    k = motif.number_of_nodes()
    if k not in MOTIF_SIZES:
        raise MotifError(
            f"Clustering types are only supported for motifs of size {MOTIF_SIZES}, got {k}"
        )

    types: List[nx.Graph] = []
    for overlap in range(1, k):
        for m1 in permutations(range(k), overlap):
            for m2 in permutations(range(k), overlap):
                merged = merge_motifs(motif, m1, m2)
                if not _keeps_motif(merged, motif, m1):
                    continue
                if not any(
                    T.number_of_nodes() == merged.number_of_nodes()
                    and T.number_of_edges() == merged.number_of_edges()
                    and nx.is_isomorphic(T, merged)
                    for T in types
                ):
                    types.append(merged)

    logger.info(f"Found {len(types)} types of motif clustering")
    return types


def overlap_subgraph(
    host: nx.Graph,
    motif: nx.Graph,
    nodes1: Sequence[int],
    nodes2: Sequence[int],
) -> Optional[nx.Graph]:
    """
    Graph formed by two overlapping instances, for type classification.

    The first instance contributes a copy of the motif; the second adds its
    unshared nodes together with the host edges among its own nodes that
    touch them.

    Returns
    -------
    graph or None
        None when the instances share no vertex
    """
    shared = set(nodes1) & set(nodes2)
    if not shared:
        return None

    res = motif.__class__()
    res.add_nodes_from(range(motif.number_of_nodes()))
    res.add_edges_from(motif.edges())

    pos = {h: p for p, h in enumerate(nodes1)}
    new_nodes = []
    for h in nodes2:
        if h not in pos:
            pos[h] = len(pos)
            res.add_node(pos[h])
            new_nodes.append(h)

    members = set(nodes2)
    for h in new_nodes:
        if host.is_directed():
            incident = list(host.in_edges(h)) + list(host.out_edges(h))
        else:
            incident = host.edges(h)
        for u, v in incident:
            if u in members and v in members:
                res.add_edge(pos[u], pos[v])

    res.remove_edges_from(list(nx.selfloop_edges(res)))
    return res


@dataclass
class ClusterTypeCounts:
    """
    Classification of all pairs of motif instances.

    Attributes
    ----------
    types : list of graphs
        Clustering types, indexed like ``counts``
    counts : list of int
        Pairs of instances overlapping as each type
    non_overlapping : int
        Pairs of instances sharing no vertex
    node_sets : list of list of int
        Host nodes involved in each type, in first-seen order
    n_instances : int
        Unique motif instances (by node set)
    """

    types: List[nx.Graph]
    counts: List[int]
    non_overlapping: int = 0
    node_sets: List[List[int]] = field(default_factory=list)
    n_instances: int = 0

    def as_list(self) -> List[int]:
        """Per-type counts followed by the non-overlapping count."""
        return list(self.counts) + [self.non_overlapping]

    def __str__(self) -> str:
        return ",".join(str(c) for c in self.as_list())


def classify_cluster_pairs(
    G: Union[Graph, nx.Graph],
    motif: nx.Graph,
    types: Optional[List[nx.Graph]] = None,
) -> ClusterTypeCounts:
    """
    Count how each pair of motif instances in ``G`` overlaps.

    Parameters
    ----------
    G : Graph, nx.Graph or nx.DiGraph
        Host graph
    motif : nx.Graph or nx.DiGraph
        Motif with 3 or 4 nodes
    types : list of graphs, optional
        Clustering types; enumerated from the motif when omitted

    Returns
    -------
    ClusterTypeCounts
    """
    host = as_nx(G)
    if types is None:
        types = enumerate_cluster_types(motif)

    instances = unique_node_sets(match(host, motif))
    logger.info(f"Found {len(instances)} motif instances in graph")

    result = ClusterTypeCounts(
        types=types,
        counts=[0] * len(types),
        node_sets=[[] for _ in types],
        n_instances=len(instances),
    )
    seen = [set() for _ in types]

    for i in range(len(instances) - 1):
        for j in range(i + 1, len(instances)):
            sub = overlap_subgraph(host, motif, instances[i], instances[j])
            if sub is None:
                result.non_overlapping += 1
                continue
            for t, T in enumerate(types):
                if nx.is_isomorphic(sub, T):
                    result.counts[t] += 1
                    for h in instances[i] + instances[j]:
                        if h not in seen[t]:
                            seen[t].add(h)
                            result.node_sets[t].append(h)
                    break

    return result
