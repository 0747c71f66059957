"""
Motif clustering coefficient.

Measures how often motif instances share vertices with other instances:
the number of shared vertices over all pairs of distinct instances, divided
by the most that could be shared (``size - 1`` per pair).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, asdict
from typing import Any, Dict, Union

import numpy as np
import networkx as nx

from ..core.graph import Graph, as_nx
from ..core.parallel import parallel_map, resolve_n_jobs
from .matching import MappingSet, match
from .counting import unique_instance_count

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MotifClusteringResult:
    """
    Motif clustering coefficient and the counts it was derived from.

    Attributes
    ----------
    coefficient : float
        ``actual_shared / possible_shared``; NaN when fewer than two
        unique instances exist
    unique_instances : int
        Valid mappings divided by the automorphism count
    n_mappings : int
        Mappings returned by the matcher
    n_valid : int
        Mappings surviving the directed edge-count check
    automorphisms : int
        Automorphism count of the motif
    motif_size : int
        Number of motif nodes
    total_shared : int
        Shared vertices summed over all pairs of valid mappings
    actual_shared : float
        ``total_shared / automorphisms**2``
    possible_shared : int
        ``(size - 1) * u * (u - 1) / 2``
    """

    coefficient: float
    unique_instances: int
    n_mappings: int
    n_valid: int
    automorphisms: int
    motif_size: int
    total_shared: int
    actual_shared: float
    possible_shared: int

    @property
    def defined(self) -> bool:
        """False when the coefficient is undefined (fewer than two instances)."""
        return not np.isnan(self.coefficient)

    def summary(self) -> Dict[str, Any]:
        return asdict(self)


def possible_shared_vertices(motif_size: int, unique_instances: int) -> int:
    """Most vertices that all pairs of distinct instances could share."""
    u = int(unique_instances)
    return (int(motif_size) - 1) * u * (u - 1) // 2


def _shared_block(rows: np.ndarray, start: int, stop: int) -> int:
    """Shared vertices between row i and every later row, for i in [start, stop)."""
    size = rows.shape[1]
    total = 0
    for i in range(start, stop):
        rest = rows[i + 1:]
        if rest.shape[0] == 0:
            continue
        # positions of row i whose node appears anywhere in each later row
        hits = (rows[i][None, :, None] == rest[:, None, :]).any(axis=2).sum(axis=1)
        # identical node sets are the same instance, not an overlap
        total += int(hits[hits < size].sum())
    return total


def shared_vertex_total(rows: np.ndarray, n_jobs: int = 1) -> int:
    """
    Sum partial overlaps over all unordered pairs of mappings.

    Parameters
    ----------
    rows : array (n_mappings, motif_size)
        Valid mappings
    n_jobs : int, default 1
        Worker processes; row blocks are summed after the pool returns

    Returns
    -------
    int
        Total shared vertices over pairs that overlap in fewer than
        ``motif_size`` nodes
    """
    rows = np.asarray(rows, dtype=np.int64)
    n = rows.shape[0]
    if n < 2:
        return 0

    n_jobs = resolve_n_jobs(n_jobs, n)
    if n_jobs == 1:
        return _shared_block(rows, 0, n)

    # later rows have fewer partners, so cut more, smaller blocks up front
    n_blocks = n_jobs * 4
    bounds = np.unique(np.linspace(0, n, n_blocks + 1).astype(int))
    tasks = [(rows, int(a), int(b)) for a, b in zip(bounds[:-1], bounds[1:])]
    return int(sum(parallel_map(_shared_block, tasks, n_jobs=n_jobs)))


def clustering_from_mappings(mappings: MappingSet, n_jobs: int = 1) -> MotifClusteringResult:
    """Motif clustering coefficient from an already validated mapping set."""
    sym = mappings.automorphisms
    size = mappings.motif_size
    unique = unique_instance_count(mappings)

    total = shared_vertex_total(mappings.as_array(), n_jobs=n_jobs)
    actual = total / (sym * sym)
    possible = possible_shared_vertices(size, unique)

    if unique < 2 or possible == 0:
        logger.debug(f"Coefficient undefined: {unique} unique motif instances")
        coefficient = float("nan")
    else:
        coefficient = actual / possible

    return MotifClusteringResult(
        coefficient=coefficient,
        unique_instances=unique,
        n_mappings=len(mappings),
        n_valid=mappings.n_valid,
        automorphisms=sym,
        motif_size=size,
        total_shared=total,
        actual_shared=actual,
        possible_shared=possible,
    )


def motif_clustering(
    G: Union[Graph, nx.Graph], motif: nx.Graph, n_jobs: int = 1
) -> MotifClusteringResult:
    """
    Compute the motif clustering coefficient of a graph.

    Parameters
    ----------
    G : Graph, nx.Graph or nx.DiGraph
        Host graph
    motif : nx.Graph or nx.DiGraph
        Motif with nodes 0..k-1 and the host's directedness
    n_jobs : int, default 1
        Worker processes for the pairwise overlap count

    Returns
    -------
    MotifClusteringResult

    Examples
    --------
    >>> import networkx as nx
    >>> G = nx.Graph([(0, 1), (1, 2), (2, 0), (2, 3), (3, 4), (4, 2)])
    >>> motif_clustering(G, nx.complete_graph(3)).coefficient
    0.5
    """
    return clustering_from_mappings(match(as_nx(G), motif), n_jobs=n_jobs)


def motif_clustering_coefficient(
    G: Union[Graph, nx.Graph], motif: nx.Graph, n_jobs: int = 1
) -> float:
    """Motif clustering coefficient as a float (NaN when undefined)."""
    return motif_clustering(G, motif, n_jobs=n_jobs).coefficient
