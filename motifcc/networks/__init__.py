"""
Motif matching, counting and clustering on networks.

This module provides the motif catalog, subgraph matching with directed
validation, instance counting, the motif clustering coefficient, motif
subgraph extraction and pairwise clustering types.
"""

from .motifs import (
    motif_from_isoclass,
    isoclass_count,
    as_motif,
)
from .matching import (
    ValidMapping,
    InvalidMapping,
    MappingSet,
    find_mappings,
    validate_mappings,
    automorphism_count,
    match,
)
from .counting import (
    count_motifs,
    unique_instance_count,
    unique_node_sets,
)
from .metrics import (
    MotifClusteringResult,
    possible_shared_vertices,
    shared_vertex_total,
    motif_clustering,
    motif_clustering_coefficient,
)
from .extract import extract_motif_subgraph
from .cluster_types import (
    ClusterTypeCounts,
    merge_motifs,
    enumerate_cluster_types,
    overlap_subgraph,
    classify_cluster_pairs,
)

__all__ = [
    "motif_from_isoclass",
    "isoclass_count",
    "as_motif",
    "ValidMapping",
    "InvalidMapping",
    "MappingSet",
    "find_mappings",
    "validate_mappings",
    "automorphism_count",
    "match",
    "count_motifs",
    "unique_instance_count",
    "unique_node_sets",
    "MotifClusteringResult",
    "possible_shared_vertices",
    "shared_vertex_total",
    "motif_clustering",
    "motif_clustering_coefficient",
    "extract_motif_subgraph",
    "ClusterTypeCounts",
    "merge_motifs",
    "enumerate_cluster_types",
    "overlap_subgraph",
    "classify_cluster_pairs",
]
