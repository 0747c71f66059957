"""
Estimator-style entry point for motif clustering analysis.
"""

from typing import Dict, Optional, Tuple, Union

import numpy as np
import networkx as nx

from .core.graph import Graph, as_graph
from .networks.motifs import motif_from_isoclass, as_motif, check_directedness
from .networks.metrics import MotifClusteringResult, motif_clustering
from .networks.cluster_types import ClusterTypeCounts, classify_cluster_pairs
from .networks.extract import extract_motif_subgraph
from .stats.significance import MotifClusteringSignificance, motif_clustering_significance


class MotifClustering:
    """
    Motif clustering coefficient with a null-model z-score.

    Parameters
    ----------
    size : int
        Motif size (3 or 4)
    isoclass : int
        igraph isomorphism class id of the motif
    motif : nx.Graph, optional
        Explicit motif pattern; overrides ``size``/``isoclass``
    n_samples : int
        Null-model samples for the z-score
    max_trials : int
        Stall ceiling for each sample
    seed : int, optional
        Root seed for the samples
    n_jobs : int
        Worker processes (-1 for all cores but one)

    Examples
    --------
    >>> import networkx as nx
    >>> from motifcc import MotifClustering
    >>> G = nx.Graph([(0, 1), (1, 2), (2, 0), (2, 3), (3, 4), (4, 2)])
    >>> mc = MotifClustering(size=3, isoclass=3, n_samples=20, seed=7)
    >>> _ = mc.fit(G)
    >>> mc.coefficient
    0.5
    """

    def __init__(self, size: int = 3, isoclass: int = 3, motif: Optional[nx.Graph] = None,
                 n_samples: int = 100, max_trials: int = 200, seed: Optional[int] = None,
                 n_jobs: int = 1, progress: bool = False):
        self.size = size
        self.isoclass = isoclass
        self.motif = as_motif(motif) if motif is not None else None
        self.n_samples = n_samples
        self.max_trials = max_trials
        self.seed = seed
        self.n_jobs = n_jobs
        self.progress = progress
        self._result: Optional[MotifClusteringSignificance] = None

    def motif_for(self, G: Union[Graph, nx.Graph]) -> nx.Graph:
        """Motif pattern matching the directedness of ``G``."""
        directed = G.directed if isinstance(G, Graph) else G.is_directed()
        if self.motif is not None:
            check_directedness(nx.DiGraph() if directed else nx.Graph(), self.motif)
            return self.motif
        return motif_from_isoclass(self.size, self.isoclass, directed=directed)

    def fit(self, G: Union[Graph, nx.Graph]) -> "MotifClustering":
        """Compute the coefficient of ``G`` and its z-score."""
        graph = as_graph(G)
        self._result = motif_clustering_significance(
            graph,
            self.motif_for(graph),
            n_samples=self.n_samples,
            max_trials=self.max_trials,
            seed=self.seed,
            n_jobs=self.n_jobs,
            progress=self.progress,
        )
        return self

    @property
    def result(self) -> MotifClusteringSignificance:
        if self._result is None:
            raise ValueError("Call fit() first")
        return self._result

    @property
    def coefficient(self) -> float:
        return self.result.observed

    @property
    def z_score(self) -> float:
        return self.result.z_score

    @property
    def samples(self) -> np.ndarray:
        return self.result.samples

    def stats(self) -> Dict:
        """Summary of the last fit."""
        return self.result.summary()

    def clustering(self, G: Union[Graph, nx.Graph]) -> MotifClusteringResult:
        """Observed coefficient and its counts, without sampling."""
        return motif_clustering(G, self.motif_for(G), n_jobs=self.n_jobs)

    def cluster_types(self, G: Union[Graph, nx.Graph]) -> ClusterTypeCounts:
        """Classify how pairs of motif instances overlap."""
        return classify_cluster_pairs(G, self.motif_for(G))

    def extract(self, G: Union[Graph, nx.Graph]) -> Tuple[Graph, Dict[int, int]]:
        """Subgraph made of the motif's instances and its node map."""
        return extract_motif_subgraph(G, self.motif_for(G))
