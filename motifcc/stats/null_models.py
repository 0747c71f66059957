"""
Null-model graphs with a fixed motif count.

A null-model sample has the host's node count and directedness and exactly
as many unique motif instances as the host. Sampling random graphs and
filtering by motif count is hopeless, so samples are grown instead: random
batches of motif instances are inserted into an initially empty graph and
each batch is kept only if it moves the count toward the target without
overshooting. The batch size shrinks as the target gets close.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple, Union

import numpy as np
import networkx as nx

from ..core.graph import Graph, as_graph
from ..core.parallel import parallel_map
from ..exceptions import SamplerConvergenceError
from ..networks.counting import count_motifs
from ..networks.metrics import motif_clustering_coefficient
from ..networks.motifs import check_directedness

logger = logging.getLogger(__name__)

# Recorded in place of a coefficient when a sample did not converge.
FAILED_SAMPLE = -1.0

DEFAULT_MAX_TRIALS = 200


def random_motif_edges(
    motif: nx.Graph, n_nodes: int, count: int, rng: np.random.Generator
) -> List[Tuple[int, int]]:
    """
    Edges of ``count`` motif instances placed on random nodes.

    Each instance draws its positions independently and uniformly from
    ``0..n_nodes-1``; coincident nodes and the resulting self-loops are
    allowed.
    """
    size = motif.number_of_nodes()
    motif_edges = list(motif.edges())
    positions = rng.integers(0, n_nodes, size=(count, size))
    return [(int(row[u]), int(row[v])) for row in positions for u, v in motif_edges]


def generate_sample(
    host: Union[Graph, nx.Graph],
    motif: nx.Graph,
    target_count: int,
    n_nodes: Optional[int] = None,
    max_trials: int = DEFAULT_MAX_TRIALS,
    rng: Optional[np.random.Generator] = None,
) -> Graph:
    """
    Grow a random graph holding exactly ``target_count`` motif instances.

    Parameters
    ----------
    host : Graph or nx.Graph
        Graph whose directedness (and, by default, node count) is kept
    motif : nx.Graph or nx.DiGraph
        Motif with nodes 0..k-1
    target_count : int
        Required number of unique motif instances
    n_nodes : int, optional
        Node count of the sample; defaults to the host's
    max_trials : int, default 200
        Consecutive stalled trials (at batch size 1) allowed before giving up
    rng : np.random.Generator, optional
        Random number generator

    Returns
    -------
    sample : Graph
        Graph with ``n_nodes`` nodes and exactly ``target_count`` instances

    Raises
    ------
    SamplerConvergenceError
        If the stall counter reaches ``max_trials``
    """
    host = as_graph(host)
    if rng is None:
        rng = np.random.default_rng()
    if n_nodes is None:
        n_nodes = host.n_nodes
    if max_trials < 1:
        raise ValueError(f"max_trials must be >= 1, got {max_trials}")
    if target_count < 0:
        raise ValueError(f"target_count must be >= 0, got {target_count}")

    current = Graph.empty(n_nodes, directed=host.directed)
    check_directedness(current.as_networkx(), motif)
    if target_count == 0:
        return current
    if n_nodes < motif.number_of_nodes():
        raise ValueError(
            f"Cannot place {target_count} motifs of size "
            f"{motif.number_of_nodes()} on {n_nodes} nodes"
        )

    accepted_count = 0
    cur_add = max(1, target_count // 5)
    stalls = 0

    while stalls < max_trials:
        candidate = current.with_edges(random_motif_edges(motif, n_nodes, cur_add, rng))
        new_count = count_motifs(candidate.as_networkx(), motif)

        if new_count == target_count:
            logger.debug(f"Reached {new_count} motifs")
            return candidate

        if new_count < target_count and new_count != accepted_count:
            current = candidate
            accepted_count = new_count
            cur_add = min(cur_add, max(1, (target_count - new_count) // 3))
            stalls = 0
            logger.debug(
                f"Accepting change, {new_count} motifs of {target_count}, next batch {cur_add}"
            )
        else:
            cur_add //= 3
            if cur_add <= 1:
                cur_add = 1
                stalls += 1
            logger.debug(
                f"Rejecting change, {new_count} motifs instead of {target_count}, "
                f"stall {stalls}"
            )

    raise SamplerConvergenceError(target_count, accepted_count, stalls)


def _sample_coefficient(
    directed: bool,
    motif: nx.Graph,
    target_count: int,
    n_nodes: int,
    max_trials: int,
    seed: np.random.SeedSequence,
) -> float:
    """Generate one sample and return its coefficient (or the failure marker)."""
    rng = np.random.default_rng(seed)
    template = Graph.empty(n_nodes, directed=directed)
    try:
        sample = generate_sample(
            template, motif, target_count, n_nodes=n_nodes, max_trials=max_trials, rng=rng
        )
    except SamplerConvergenceError as e:
        logger.warning(f"Sample did not converge: {e}")
        return FAILED_SAMPLE
    return motif_clustering_coefficient(sample, motif)


def spawn_seeds(n: int, seed: Optional[int] = None) -> Sequence[np.random.SeedSequence]:
    """Independent seed sequences, one per sample."""
    return np.random.SeedSequence(seed).spawn(n)


def generate_samples(
    host: Union[Graph, nx.Graph],
    motif: nx.Graph,
    target_count: int,
    n_samples: int,
    n_nodes: Optional[int] = None,
    max_trials: int = DEFAULT_MAX_TRIALS,
    seed: Optional[int] = None,
    n_jobs: int = 1,
    progress: bool = False,
) -> np.ndarray:
    """
    Motif clustering coefficients of independent null-model samples.

    Parameters
    ----------
    host : Graph or nx.Graph
        Graph whose directedness (and, by default, node count) is kept
    motif : nx.Graph or nx.DiGraph
        Motif with nodes 0..k-1
    target_count : int
        Motif count every sample must reach
    n_samples : int
        Number of samples
    n_nodes : int, optional
        Node count of each sample; defaults to the host's
    max_trials : int, default 200
        Stall ceiling for each sample
    seed : int, optional
        Root seed; each sample gets its own child stream, so results do
        not depend on ``n_jobs``
    n_jobs : int, default 1
        Worker processes (-1 for all cores but one)
    progress : bool, default False
        Show a progress bar

    Returns
    -------
    samples : array (n_samples,)
        Coefficient per sample; ``FAILED_SAMPLE`` (-1.0) where the sampler
        did not converge and NaN where the coefficient is undefined
    """
    if n_samples < 0:
        raise ValueError(f"n_samples must be >= 0, got {n_samples}")
    if max_trials < 1:
        raise ValueError(f"max_trials must be >= 1, got {max_trials}")

    host = as_graph(host)
    if n_nodes is None:
        n_nodes = host.n_nodes

    logger.info(
        f"Generating {n_samples} null-model samples with {target_count} motifs "
        f"on {n_nodes} nodes"
    )
    tasks = [
        (host.directed, motif, target_count, n_nodes, max_trials, s)
        for s in spawn_seeds(n_samples, seed)
    ]
    values = parallel_map(
        _sample_coefficient, tasks, n_jobs=n_jobs, progress=progress, desc="Samples"
    )
    samples = np.asarray(values, dtype=np.float64)

    n_failed = int(np.sum(samples == FAILED_SAMPLE))
    if n_failed:
        logger.warning(f"{n_failed} of {n_samples} samples did not converge")
    return samples
