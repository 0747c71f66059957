"""
Tests for motif matching and counting.
"""

import numpy as np
import networkx as nx
import pytest

from motifcc.exceptions import MotifError
from motifcc.networks.matching import (
    InvalidMapping,
    MappingSet,
    ValidMapping,
    automorphism_count,
    find_mappings,
    match,
    validate_mappings,
)
from motifcc.networks.counting import count_motifs, unique_instance_count, unique_node_sets


class TestAutomorphisms:
    """Test rotational symmetry of common motifs."""

    @pytest.mark.parametrize("motif,expected", [
        (nx.complete_graph(3), 6),
        (nx.path_graph(3), 2),
        (nx.complete_graph(4), 24),
        (nx.DiGraph([(0, 1), (1, 2), (2, 0)]), 3),
        (nx.DiGraph([(0, 1), (1, 2)]), 1),
    ])
    def test_automorphism_count(self, motif, expected):
        assert automorphism_count(motif) == expected


class TestFindMappings:
    """Test structural matching."""

    def test_bowtie_triangles(self, bowtie, triangle):
        mappings = find_mappings(bowtie, triangle)
        assert len(mappings) == 12
        assert {frozenset(m) for m in mappings} == {
            frozenset({0, 1, 2}), frozenset({2, 3, 4})
        }

    def test_mapping_carries_motif_edges(self, bowtie):
        motif = nx.path_graph(3)
        for m in find_mappings(bowtie, motif):
            for u, v in motif.edges():
                assert bowtie.has_edge(m[u], m[v])

    def test_non_induced(self):
        """A path motif matches inside a triangle."""
        assert len(find_mappings(nx.complete_graph(3), nx.path_graph(3))) == 6

    def test_host_smaller_than_motif(self, triangle):
        assert find_mappings(nx.path_graph(2), triangle) == []

    def test_no_occurrence(self, triangle):
        assert find_mappings(nx.path_graph(5), triangle) == []

    def test_directedness_mismatch(self, triangle):
        with pytest.raises(MotifError):
            find_mappings(nx.DiGraph([(0, 1), (1, 2), (2, 0)]), triangle)


class TestDirectedValidation:
    """Test the induced edge-count check for directed graphs."""

    def test_extra_arc_invalidates_mapping(self, directed_path_motif):
        host = nx.DiGraph([(0, 1), (1, 2), (2, 0)])
        mappings = match(host, directed_path_motif)
        assert len(mappings) == 3
        assert mappings.n_valid == 0
        assert all(isinstance(m, InvalidMapping) for m in mappings)
        assert count_motifs(host, directed_path_motif) == 0

    def test_path_host_has_no_directed_triangle(self):
        """A path on three nodes holds no directed triangle."""
        host = nx.DiGraph([(0, 1), (1, 2)])
        motif = nx.DiGraph([(0, 1), (1, 2), (2, 0)])
        assert match(host, motif).n_valid == 0
        assert count_motifs(host, motif) == 0

    def test_exact_match_is_valid(self, directed_path_motif):
        host = nx.DiGraph([(0, 1), (1, 2), (3, 0)])
        mappings = match(host, directed_path_motif)
        assert sorted(mappings.valid) == [(0, 1, 2), (3, 0, 1)]
        assert count_motifs(host, directed_path_motif) == 2

    def test_undirected_always_valid(self, triangle):
        host = nx.complete_graph(4)
        tagged = validate_mappings(host, triangle, find_mappings(host, triangle))
        assert all(isinstance(m, ValidMapping) for m in tagged)


class TestMappingSet:
    """Test MappingSet accessors."""

    def test_as_array(self, bowtie, triangle):
        mappings = match(bowtie, triangle)
        rows = mappings.as_array()
        assert rows.shape == (12, 3)
        assert rows.dtype == np.int64

    def test_empty_array_shape(self, triangle):
        mappings = match(nx.path_graph(4), triangle)
        assert mappings.as_array().shape == (0, 3)

    def test_counts(self, bowtie, triangle):
        mappings = match(bowtie, triangle)
        assert mappings.automorphisms == 6
        assert mappings.n_valid == 12
        assert mappings.n_invalid == 0


class TestCounting:
    """Test unique instance counting."""

    def test_unique_instances(self, bowtie, triangle):
        assert count_motifs(bowtie, triangle) == 2

    def test_k4_triangles(self, triangle):
        assert count_motifs(nx.complete_graph(4), triangle) == 4

    def test_unique_node_sets(self, diamond, triangle):
        node_sets = unique_node_sets(match(diamond, triangle))
        assert {frozenset(s) for s in node_sets} == {
            frozenset({0, 1, 2}), frozenset({1, 2, 3})
        }

    def test_invalid_automorphism_count(self):
        mappings = MappingSet(mappings=(), motif_size=3, automorphisms=0)
        with pytest.raises(ValueError):
            unique_instance_count(mappings)
