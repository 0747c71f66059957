"""
Build and run motif clustering analyses from configuration.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from .api import MotifClustering
from .config import RunConfig
from .core.graph import Graph
from .exceptions import NoValidSamplesError
from .io import read_graph, write_samples, write_stats
from .stats.significance import MotifClusteringSignificance

logger = logging.getLogger(__name__)


def create_motif_clustering(config: RunConfig) -> MotifClustering:
    """Create a MotifClustering estimator from configuration."""
    return MotifClustering(
        size=config.motif.size,
        isoclass=config.motif.isoclass,
        n_samples=config.sampling.n_samples,
        max_trials=config.sampling.max_trials,
        seed=config.sampling.seed,
        n_jobs=config.sampling.n_jobs,
        progress=config.sampling.progress,
    )


def run_from_config(
    config: RunConfig, graph: Optional[Graph] = None
) -> Tuple[Graph, MotifClusteringSignificance]:
    """
    Load the graph, run the analysis and write configured outputs.

    The samples file is written even when no sample is valid; the
    ``NoValidSamplesError`` is re-raised afterwards.
    """
    if graph is None:
        graph = read_graph(config.graph.path)
    config.motif.validate_for(graph.directed)

    estimator = create_motif_clustering(config)
    output = config.output
    try:
        result = estimator.fit(graph).result
    except NoValidSamplesError as e:
        if output.samples_path is not None and e.samples is not None:
            write_samples(output.samples_path, e.samples)
        raise

    if output.prefix:
        write_samples(output.samples_path, result.samples)
        write_stats(
            output.stats_path, result.n_nodes, result.n_edges, result.observed, result.z_score
        )
        logger.info(f"Wrote {output.samples_path} and {output.stats_path}")

    return graph, result
