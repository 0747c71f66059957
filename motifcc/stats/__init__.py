"""
Null models and significance testing for motif clustering.
"""

from .null_models import (
    FAILED_SAMPLE,
    random_motif_edges,
    generate_sample,
    generate_samples,
)
from .significance import (
    MotifClusteringSignificance,
    valid_samples,
    compute_zscore,
    motif_clustering_significance,
)

__all__ = [
    'FAILED_SAMPLE',
    'random_motif_edges',
    'generate_sample',
    'generate_samples',
    'MotifClusteringSignificance',
    'valid_samples',
    'compute_zscore',
    'motif_clustering_significance',
]
