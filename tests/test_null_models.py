"""
Tests for null-model sampling and significance testing.
"""

import numpy as np
import networkx as nx
import pytest

from motifcc.core.graph import Graph
from motifcc.exceptions import MotifError, NoValidSamplesError, SamplerConvergenceError
from motifcc.networks.counting import count_motifs
from motifcc.stats.null_models import (
    FAILED_SAMPLE,
    generate_sample,
    generate_samples,
    random_motif_edges,
    spawn_seeds,
)
from motifcc.stats.significance import (
    MotifClusteringSignificance,
    compute_zscore,
    motif_clustering_significance,
    valid_samples,
)


class TestSampleGeneration:
    """Test growing graphs with a fixed motif count."""

    def test_random_motif_edges(self, triangle):
        edges = random_motif_edges(triangle, 10, 4, np.random.default_rng(0))
        assert len(edges) == 12
        assert all(0 <= u < 10 and 0 <= v < 10 for u, v in edges)

    def test_reaches_exact_target(self, bowtie, triangle):
        sample = generate_sample(bowtie, triangle, 2, rng=np.random.default_rng(42))
        assert isinstance(sample, Graph)
        assert sample.n_nodes == 5
        assert count_motifs(sample.as_networkx(), triangle) == 2

    def test_larger_target(self, triangle):
        host = Graph.empty(30)
        sample = generate_sample(host, triangle, 12, rng=np.random.default_rng(7))
        assert count_motifs(sample.as_networkx(), triangle) == 12

    def test_custom_node_count(self, bowtie, triangle):
        sample = generate_sample(bowtie, triangle, 3, n_nodes=12, rng=np.random.default_rng(1))
        assert sample.n_nodes == 12
        assert count_motifs(sample.as_networkx(), triangle) == 3

    def test_directed_sample(self):
        motif = nx.DiGraph([(0, 1), (1, 2), (2, 0)])
        host = Graph.empty(10, directed=True)
        sample = generate_sample(host, motif, 2, rng=np.random.default_rng(3))
        assert sample.directed
        assert count_motifs(sample.as_networkx(), motif) == 2

    def test_zero_target_returns_empty_graph(self, bowtie, triangle):
        sample = generate_sample(bowtie, triangle, 0)
        assert sample.n_edges == 0
        assert sample.n_nodes == 5

    def test_convergence_failure(self, triangle):
        """Three nodes hold at most one triangle."""
        with pytest.raises(SamplerConvergenceError) as excinfo:
            generate_sample(Graph.empty(3), triangle, 5, max_trials=3,
                            rng=np.random.default_rng(0))
        assert excinfo.value.target == 5
        assert excinfo.value.reached <= 1

    def test_too_few_nodes(self, triangle):
        with pytest.raises(ValueError):
            generate_sample(Graph.empty(2), triangle, 1)

    def test_directedness_mismatch(self, triangle):
        with pytest.raises(MotifError):
            generate_sample(Graph.empty(5, directed=True), triangle, 1)

    @pytest.mark.parametrize("kwargs", [{"max_trials": 0}, {"target_count": -1}])
    def test_invalid_arguments(self, triangle, kwargs):
        params = {"target_count": 1, "max_trials": 10}
        params.update(kwargs)
        with pytest.raises(ValueError):
            generate_sample(Graph.empty(5), triangle, **params)


class TestGenerateSamples:
    """Test batches of null-model samples."""

    def test_bowtie_samples(self, bowtie, triangle):
        """Two triangles on five nodes share either a vertex or an edge."""
        samples = generate_samples(bowtie, triangle, 2, 8, seed=11)
        assert samples.shape == (8,)
        assert set(np.round(samples, 8)) <= {0.5, 1.0}

    def test_reproducible_with_seed(self, bowtie, triangle):
        a = generate_samples(bowtie, triangle, 2, 5, seed=3)
        b = generate_samples(bowtie, triangle, 2, 5, seed=3)
        np.testing.assert_array_equal(a, b)

    def test_independent_of_n_jobs(self, bowtie, triangle):
        serial = generate_samples(bowtie, triangle, 2, 6, seed=5, n_jobs=1)
        pooled = generate_samples(bowtie, triangle, 2, 6, seed=5, n_jobs=2)
        np.testing.assert_array_equal(serial, pooled)

    def test_failed_samples_marked(self, triangle):
        samples = generate_samples(Graph.empty(3), triangle, 5, 3, max_trials=2, seed=0)
        assert np.all(samples == FAILED_SAMPLE)

    def test_zero_samples(self, bowtie, triangle):
        assert generate_samples(bowtie, triangle, 2, 0).shape == (0,)

    def test_spawn_seeds(self):
        seeds = spawn_seeds(4, seed=1)
        assert len(seeds) == 4
        draws = [np.random.default_rng(s).integers(1 << 30) for s in seeds]
        assert len(set(draws)) == 4


class TestComputeZScore:
    """Test z-score computation."""

    def test_population_variance(self):
        z, mean, std = compute_zscore(0.4, np.array([0.1, 0.2, 0.3, 0.4, 0.5]))
        assert mean == pytest.approx(0.3)
        assert std == pytest.approx(np.sqrt(0.02))
        assert z == pytest.approx(0.1 / np.sqrt(0.02))

    def test_failure_markers_ignored(self):
        z, mean, std = compute_zscore(0.5, np.array([0.2, FAILED_SAMPLE, 0.4]))
        assert mean == pytest.approx(0.3)
        assert std == pytest.approx(0.1)
        assert z == pytest.approx(2.0)

    def test_nan_ignored(self):
        _, mean, _ = compute_zscore(0.5, np.array([0.2, np.nan, 0.4]))
        assert mean == pytest.approx(0.3)

    def test_zero_variance(self):
        z, mean, std = compute_zscore(0.5, np.array([0.3, 0.3, 0.3]))
        assert np.isnan(z)
        assert mean == pytest.approx(0.3)
        assert std == 0.0

    def test_no_valid_samples(self):
        with pytest.raises(NoValidSamplesError) as excinfo:
            compute_zscore(0.5, np.array([FAILED_SAMPLE, np.nan]))
        assert excinfo.value.n_samples == 2

    def test_valid_samples(self):
        np.testing.assert_array_equal(
            valid_samples(np.array([0.0, -1.0, np.nan, 0.7])), [0.0, 0.7]
        )


class TestSignificance:
    """Test the end-to-end significance run."""

    def test_bowtie_significance(self, bowtie, triangle):
        result = motif_clustering_significance(bowtie, triangle, n_samples=10, seed=2)
        assert isinstance(result, MotifClusteringSignificance)
        assert result.observed == pytest.approx(0.5)
        assert result.target_count == 2
        assert result.n_valid == 10
        assert result.n_nodes == 5
        assert result.n_edges == 6
        assert result.status in ("ok", "zero_variance")
        assert len(result.samples) == 10

    def test_str_format(self, bowtie, triangle):
        result = motif_clustering_significance(bowtie, triangle, n_samples=4, seed=2)
        assert str(result).startswith("Motif clustering coefficient = 0.50000000, z-score = ")

    def test_p_value(self, bowtie, triangle):
        result = motif_clustering_significance(bowtie, triangle, n_samples=10, seed=2)
        if result.z_score_defined:
            assert 0.0 <= result.p_value <= 1.0
        else:
            assert np.isnan(result.p_value)

    def test_undefined_observed(self, triangle):
        """A single instance leaves the coefficient and z-score undefined."""
        result = motif_clustering_significance(nx.complete_graph(3), triangle,
                                               n_samples=3, seed=0)
        assert result.status == "undefined_observed"
        assert np.isnan(result.observed)
        assert np.isnan(result.z_score)
        assert result.n_valid == 0
        assert len(result.samples) == 3
        assert np.isnan(result.samples).all()

    def test_undefined_observed_skips_sampling(self, triangle, monkeypatch):
        def fail(*args, **kwargs):
            raise AssertionError("null-model samples generated")

        monkeypatch.setattr("motifcc.stats.significance.generate_samples", fail)
        result = motif_clustering_significance(nx.complete_graph(3), triangle,
                                               n_samples=5, seed=0)
        assert result.status == "undefined_observed"

    def test_all_samples_fail(self, bowtie, triangle, monkeypatch):
        monkeypatch.setattr(
            "motifcc.stats.significance.generate_samples",
            lambda *args, **kwargs: np.full(4, FAILED_SAMPLE),
        )
        with pytest.raises(NoValidSamplesError) as excinfo:
            motif_clustering_significance(bowtie, triangle, n_samples=4, seed=0)
        assert excinfo.value.n_samples == 4
        assert len(excinfo.value.samples) == 4

    def test_summary(self, bowtie, triangle):
        summary = motif_clustering_significance(bowtie, triangle, n_samples=3, seed=0).summary()
        assert summary['mcc'] == pytest.approx(0.5)
        assert summary['n_samples'] == 3
        assert 'p_value' in summary
        assert summary['avg_degree'] == pytest.approx(2.4)
        assert summary['density'] == pytest.approx(0.6)
