"""
motifcc: Motif clustering coefficients for networks

Measures how often instances of a small motif share vertices and compares
the result against null-model graphs with the same node and motif counts.
"""

from .core.graph import Graph
from .api import MotifClustering
from .networks import (
    motif_from_isoclass,
    match,
    count_motifs,
    automorphism_count,
    motif_clustering,
    motif_clustering_coefficient,
    extract_motif_subgraph,
    enumerate_cluster_types,
    classify_cluster_pairs,
)
from .stats import (
    generate_sample,
    generate_samples,
    compute_zscore,
    motif_clustering_significance,
)
from .exceptions import (
    MotifClusteringError,
    MotifError,
    SamplerConvergenceError,
    NoValidSamplesError,
)
from .config import RunConfig
from .factory import create_motif_clustering, run_from_config
from .io import read_graph, write_graph

__version__ = "0.1.0"

__all__ = [
    'Graph',
    'MotifClustering',
    'motif_from_isoclass',
    'match',
    'count_motifs',
    'automorphism_count',
    'motif_clustering',
    'motif_clustering_coefficient',
    'extract_motif_subgraph',
    'enumerate_cluster_types',
    'classify_cluster_pairs',
    'generate_sample',
    'generate_samples',
    'compute_zscore',
    'motif_clustering_significance',
    'MotifClusteringError',
    'MotifError',
    'SamplerConvergenceError',
    'NoValidSamplesError',
    'RunConfig',
    'create_motif_clustering',
    'run_from_config',
    'read_graph',
    'write_graph',
]
