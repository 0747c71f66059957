"""
Tests for GML graph I/O and result files.
"""

import networkx as nx
import numpy as np
import pytest

from motifcc.core.graph import Graph
from motifcc.io import (
    read_graph,
    write_cluster_types,
    write_graph,
    write_node_map,
    write_node_sets,
    write_samples,
    write_stats,
)


class TestGraphIO:
    """Test reading and writing GML."""

    def test_round_trip(self, tmp_path, bowtie):
        path = tmp_path / "bowtie.gml"
        write_graph(Graph.from_networkx(bowtie), path)
        G = read_graph(path)
        assert G.n_nodes == 5
        assert G.n_edges == 6
        assert not G.directed

    def test_directed_round_trip(self, tmp_path):
        path = tmp_path / "cycle.gml"
        write_graph(nx.DiGraph([(0, 1), (1, 2), (2, 0)]), path)
        G = read_graph(path)
        assert G.directed
        assert set(G.edges) == {(0, 1), (1, 2), (2, 0)}

    def test_sparse_ids_relabelled(self, tmp_path):
        path = tmp_path / "sparse.gml"
        path.write_text(
            "graph [\n"
            "  node [ id 10 ]\n"
            "  node [ id 20 ]\n"
            "  node [ id 30 ]\n"
            "  edge [ source 10 target 20 ]\n"
            "  edge [ source 20 target 30 ]\n"
            "]\n"
        )
        G = read_graph(path)
        assert G.n_nodes == 3
        assert set(G.edges) == {(0, 1), (1, 2)}

    def test_repeated_edge_without_multigraph_flag(self, tmp_path):
        """Both orientations of an undirected edge are kept."""
        path = tmp_path / "repeated.gml"
        path.write_text(
            "graph [\n"
            "  node [ id 0 ]\n"
            "  node [ id 1 ]\n"
            "  node [ id 2 ]\n"
            "  edge [ source 0 target 1 ]\n"
            "  edge [ source 1 target 0 ]\n"
            "  edge [ source 1 target 2 ]\n"
            "  edge [ source 2 target 0 ]\n"
            "]\n"
        )
        G = read_graph(path)
        assert G.n_nodes == 3
        assert G.n_edges == 4
        assert not G.directed
        assert G.as_networkx().number_of_edges() == 3

    def test_malformed_file(self, tmp_path):
        path = tmp_path / "truncated.gml"
        path.write_text("graph [\n  node [ id 0 ]\n")
        with pytest.raises(ValueError, match="Invalid GML file"):
            read_graph(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_graph(tmp_path / "missing.gml")


class TestResultFiles:
    """Test plain-text output formats."""

    def test_samples(self, tmp_path):
        path = tmp_path / "out" / "run_samples.txt"
        write_samples(path, np.array([0.5, -1.0, 0.25]))
        assert path.read_text() == "0.50000000\n-1.00000000\n0.25000000\n"

    def test_stats(self, tmp_path):
        path = tmp_path / "run_stats.txt"
        write_stats(path, 5, 6, 0.5, 1.25)
        lines = path.read_text().splitlines()
        assert lines == ["Nodes, Edges, MCC, Z-Score", "5, 6, 0.50000000, 1.25000000"]

    def test_node_map(self, tmp_path):
        path = tmp_path / "map.txt"
        write_node_map(path, {1: 7, 0: 3})
        assert path.read_text() == "0,3\n1,7\n"

    def test_node_sets(self, tmp_path):
        path = tmp_path / "NodeMaps.txt"
        write_node_sets(path, [[0, 1, 2], []])
        assert path.read_text() == "0,1,2\n\n"

    def test_cluster_types(self, tmp_path, bowtie, diamond):
        paths = write_cluster_types(str(tmp_path / "tri"), [bowtie, diamond])
        assert [p.name for p in paths] == ["triType1.gml", "triType2.gml"]
        assert read_graph(paths[1]).n_edges == 5
