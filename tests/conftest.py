"""
Test configuration and fixtures for pytest.

This file contains fixtures and configuration that will be available to all tests.
"""
import numpy as np
import networkx as nx
import pytest

# Set random seed for reproducibility
np.random.seed(42)


# Common test graphs
@pytest.fixture
def triangle():
    """Undirected triangle motif."""
    return nx.complete_graph(3)


@pytest.fixture
def bowtie():
    """Two triangles sharing node 2; motif clustering coefficient 0.5."""
    return nx.Graph([(0, 1), (1, 2), (2, 0), (2, 3), (3, 4), (4, 2)])


@pytest.fixture
def diamond():
    """Two triangles sharing the edge (1, 2)."""
    return nx.Graph([(0, 1), (0, 2), (1, 2), (1, 3), (2, 3)])


@pytest.fixture
def two_disjoint_triangles():
    """Two triangles with no common node."""
    return nx.Graph([(0, 1), (1, 2), (2, 0), (3, 4), (4, 5), (5, 3)])


@pytest.fixture
def directed_path_motif():
    """Directed two-arc path 0 -> 1 -> 2."""
    return nx.DiGraph([(0, 1), (1, 2)])


@pytest.fixture
def sample_undirected_graph():
    """Generate a sample undirected graph for testing."""
    return nx.erdos_renyi_graph(10, 0.4, seed=42)
