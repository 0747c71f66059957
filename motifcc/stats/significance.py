"""
Significance of a motif clustering coefficient against null-model samples.

The z-score uses the population variance of the valid samples
(``mean(x**2) - mean(x)**2``), not the unbiased sample variance.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Literal, Optional, Union

import numpy as np
import networkx as nx
from numpy.typing import NDArray
from scipy import stats as sp_stats

from ..core.graph import Graph, as_graph
from ..exceptions import NoValidSamplesError
from ..networks.matching import match
from ..networks.counting import unique_instance_count
from ..networks.metrics import clustering_from_mappings
from .null_models import DEFAULT_MAX_TRIALS, generate_samples

logger = logging.getLogger(__name__)

# Variances at or below this are treated as zero.
VARIANCE_TOL = 1e-12

Status = Literal["ok", "undefined_observed", "zero_variance"]


@dataclass
class MotifClusteringSignificance:
    """
    Results of a motif clustering significance run.

    Attributes
    ----------
    observed : float
        Motif clustering coefficient of the host graph (NaN if undefined)
    z_score : float
        ``(observed - null_mean) / null_std``; NaN when undefined
    null_mean : float
        Mean of the valid sample coefficients
    null_std : float
        Population standard deviation of the valid sample coefficients
    n_samples : int
        Samples requested
    n_valid : int
        Samples that converged and had a defined coefficient
    target_count : int
        Unique motif instances in the host, reproduced by every sample
    n_nodes : int
        Host node count
    n_edges : int
        Host edge count
    samples : array
        Per-sample coefficients including failure markers (-1.0) and NaN
    p_value : float
        Two-sided p-value from the normal approximation; NaN when the
        z-score is undefined
    graph_stats : dict
        Host summary from ``Graph.summary()`` (degree and density)
    status : str
        ``"ok"``, ``"undefined_observed"`` (host has fewer than two
        instances) or ``"zero_variance"`` (all valid samples equal)
    """

    observed: float
    z_score: float
    null_mean: float
    null_std: float
    n_samples: int
    n_valid: int
    target_count: int
    n_nodes: int
    n_edges: int
    samples: NDArray[np.float64] = field(repr=False)
    status: Status = "ok"
    p_value: float = float("nan")
    graph_stats: Dict[str, Any] = field(default_factory=dict, repr=False)

    @property
    def z_score_defined(self) -> bool:
        return self.status == "ok"

    def __str__(self) -> str:
        """String representation of the result."""
        return (
            f"Motif clustering coefficient = {self.observed:.8f}, "
            f"z-score = {self.z_score:.8f}"
        )

    def summary(self) -> Dict[str, Any]:
        """Return a dictionary summary of the result."""
        return {
            "n_nodes": self.n_nodes,
            "n_edges": self.n_edges,
            "mcc": self.observed,
            "z_score": self.z_score,
            "null_mean": self.null_mean,
            "null_std": self.null_std,
            "target_count": self.target_count,
            "n_samples": self.n_samples,
            "n_valid": self.n_valid,
            "p_value": self.p_value,
            "status": self.status,
            "avg_degree": self.graph_stats.get("avg_degree"),
            "density": self.graph_stats.get("density"),
        }


def valid_samples(samples: NDArray[np.float64]) -> NDArray[np.float64]:
    """Drop failure markers (negative values) and undefined (NaN) coefficients."""
    samples = np.asarray(samples, dtype=np.float64)
    return samples[np.isfinite(samples) & (samples >= 0.0)]


def compute_zscore(
    observed: float, samples: NDArray[np.float64]
) -> tuple[float, float, float]:
    """
    Compute z-score from an observed coefficient and null-model samples.

    Parameters
    ----------
    observed : float
        Observed coefficient
    samples : array
        Sample coefficients; failure markers and NaN are ignored

    Returns
    -------
    z_score : float
        NaN when the variance is zero or ``observed`` is NaN
    null_mean : float
        Mean of the valid samples
    null_std : float
        Population standard deviation of the valid samples

    Raises
    ------
    NoValidSamplesError
        If no sample is valid
    """
    values = valid_samples(samples)
    n = len(values)
    if n == 0:
        raise NoValidSamplesError(len(np.atleast_1d(samples)), np.asarray(samples))

    mean = float(np.sum(values) / n)
    mean_sq = float(np.sum(values ** 2) / n)
    variance = mean_sq - mean * mean

    if variance <= VARIANCE_TOL:
        return float("nan"), mean, 0.0

    std = float(np.sqrt(variance))
    return float((observed - mean) / std), mean, std


def motif_clustering_significance(
    G: Union[Graph, nx.Graph],
    motif: nx.Graph,
    n_samples: int = 100,
    max_trials: int = DEFAULT_MAX_TRIALS,
    seed: Optional[int] = None,
    n_jobs: int = 1,
    progress: bool = False,
) -> MotifClusteringSignificance:
    """
    Motif clustering coefficient of ``G`` and its z-score under the null model.

    Parameters
    ----------
    G : Graph, nx.Graph or nx.DiGraph
        Host graph
    motif : nx.Graph or nx.DiGraph
        Motif with nodes 0..k-1 and the host's directedness
    n_samples : int, default 100
        Null-model samples to generate
    max_trials : int, default 200
        Stall ceiling for each sample
    seed : int, optional
        Root seed for the samples
    n_jobs : int, default 1
        Worker processes (-1 for all cores but one)
    progress : bool, default False
        Show a progress bar over samples

    Returns
    -------
    MotifClusteringSignificance

    Raises
    ------
    NoValidSamplesError
        If no sample produced a valid coefficient

    Examples
    --------
    >>> import networkx as nx
    >>> G = nx.Graph([(0, 1), (1, 2), (2, 0), (2, 3), (3, 4), (4, 2)])
    >>> result = motif_clustering_significance(G, nx.complete_graph(3), n_samples=20, seed=1)
    >>> result.observed, result.target_count
    (0.5, 2)
    """
    graph = as_graph(G)
    host = graph.as_networkx()

    mappings = match(host, motif)
    observed = clustering_from_mappings(mappings, n_jobs=n_jobs).coefficient
    target_count = unique_instance_count(mappings)
    logger.info(
        f"Observed coefficient {observed:.8f} from {target_count} motif instances"
    )

    status: Status = "ok"
    if np.isnan(observed):
        # samples with the same instance count would be undefined as well
        logger.warning(
            "Host has fewer than two motif instances; coefficient is undefined, "
            "skipping null-model samples"
        )
        status = "undefined_observed"
        samples = np.full(n_samples, np.nan)
        z_score, null_mean, null_std = float("nan"), float("nan"), float("nan")
    else:
        samples = generate_samples(
            graph,
            motif,
            target_count,
            n_samples,
            max_trials=max_trials,
            seed=seed,
            n_jobs=n_jobs,
            progress=progress,
        )
        z_score, null_mean, null_std = compute_zscore(observed, samples)
        if np.isnan(z_score):
            status = "zero_variance"
            logger.warning("All valid samples share one coefficient; z-score is undefined")

    p_value = float("nan") if np.isnan(z_score) else float(2 * sp_stats.norm.sf(abs(z_score)))

    return MotifClusteringSignificance(
        observed=observed,
        z_score=z_score,
        null_mean=null_mean,
        null_std=null_std,
        n_samples=n_samples,
        n_valid=len(valid_samples(samples)),
        target_count=target_count,
        n_nodes=graph.n_nodes,
        n_edges=graph.n_edges,
        samples=samples,
        status=status,
        p_value=p_value,
        graph_stats=graph.summary(),
    )
