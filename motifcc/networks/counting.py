"""
Motif instance counting.

Every instance of a motif appears in the mapping set once per motif
automorphism, so the number of unique instances is the valid mapping count
divided by the automorphism count.
"""

from __future__ import annotations

import logging
from typing import List, Tuple

import networkx as nx

from .matching import MappingSet, match

logger = logging.getLogger(__name__)


def unique_instance_count(mappings: MappingSet) -> int:
    """
    Unique motif instances represented by a mapping set.

    Parameters
    ----------
    mappings : MappingSet
        Output of ``match``

    Returns
    -------
    int
        ``n_valid // automorphisms``
    """
    n_valid = mappings.n_valid
    sym = mappings.automorphisms
    if sym < 1:
        raise ValueError(f"Automorphism count must be >= 1, got {sym}")
    if n_valid % sym:
        logger.warning(
            f"Valid mapping count {n_valid} is not a multiple of the "
            f"automorphism count {sym}"
        )
    return n_valid // sym


def count_motifs(host: nx.Graph, motif: nx.Graph) -> int:
    """Number of unique instances of ``motif`` in ``host``."""
    return unique_instance_count(match(host, motif))


def unique_node_sets(mappings: MappingSet) -> List[Tuple[int, ...]]:
    """
    Collapse valid mappings that cover the same host nodes.

    The first mapping seen for each node set is kept, so motif positions of
    the returned tuples are meaningful. Distinct instances on one node set
    (possible when the host has extra edges) collapse to one entry here.
    """
    seen = set()
    unique = []
    for nodes in mappings.valid:
        key = frozenset(nodes)
        if key not in seen:
            seen.add(key)
            unique.append(nodes)
    return unique
