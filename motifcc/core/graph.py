"""
Lightweight graph value object.

Edge list + node count + directedness. Candidate graphs built by the null
model sampler are new values created with ``with_edges``; nothing mutates a
Graph once it has been handed out. NetworkX conversion happens on demand.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray
from typing import Iterable, List, Optional, Tuple
from dataclasses import dataclass, field

import networkx as nx


@dataclass(frozen=True)
class Graph:
    """
    Immutable graph representation.

    Attributes
    ----------
    edges : tuple of (int, int)
        Edge list over dense node ids ``0..n_nodes-1``. Duplicates and
        self-loops are allowed; they collapse when converted to NetworkX.
    n_nodes : int
        Number of nodes
    directed : bool
        Whether graph is directed

    Examples
    --------
    >>> G = Graph(edges=((0, 1), (1, 2)), n_nodes=3)
    >>> G.n_edges
    2
    >>> H = G.with_edges([(2, 0)])
    >>> H.n_edges, G.n_edges
    (3, 2)
    """

    edges: Tuple[Tuple[int, int], ...]
    n_nodes: int
    directed: bool = False
    _nx: Optional[nx.Graph] = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "edges", tuple((int(i), int(j)) for i, j in self.edges))
        if self.n_nodes < 0:
            raise ValueError(f"n_nodes must be >= 0, got {self.n_nodes}")
        for i, j in self.edges:
            if not (0 <= i < self.n_nodes and 0 <= j < self.n_nodes):
                raise ValueError(
                    f"Edge ({i}, {j}) references a node outside 0..{self.n_nodes - 1}"
                )

    @classmethod
    def empty(cls, n_nodes: int, directed: bool = False) -> Graph:
        """Graph with ``n_nodes`` nodes and no edges."""
        return cls(edges=(), n_nodes=n_nodes, directed=directed)

    @classmethod
    def from_networkx(cls, G: nx.Graph) -> Graph:
        """
        Build from a NetworkX graph, relabelling nodes densely to 0..N-1.

        Nodes keep their iteration order, so a graph already labelled
        0..N-1 in order keeps its ids.
        """
        index = {node: i for i, node in enumerate(G.nodes())}
        edges = [(index[u], index[v]) for u, v in G.edges()]
        return cls(edges=tuple(edges), n_nodes=len(index), directed=G.is_directed())

    @property
    def n_edges(self) -> int:
        """Number of edges"""
        return len(self.edges)

    def with_edges(self, new_edges: Iterable[Tuple[int, int]]) -> Graph:
        """Return a new graph holding these edges plus ``new_edges``."""
        return Graph(
            edges=self.edges + tuple(new_edges),
            n_nodes=self.n_nodes,
            directed=self.directed,
        )

    def degree_sequence(self) -> NDArray[np.int64]:
        """
        Degree sequence.

        Returns
        -------
        degrees : array (n_nodes,)
            Degree of each node (out-degree for directed graphs)
        """
        degrees = np.zeros(self.n_nodes, dtype=np.int64)
        for i, j in self.edges:
            degrees[i] += 1
            if not self.directed and i != j:
                degrees[j] += 1
        return degrees

    def as_networkx(self) -> nx.Graph:
        """
        Convert to a simple NetworkX graph (cached).

        Returns
        -------
        G : networkx.Graph or networkx.DiGraph
            Duplicate edges collapse; self-loops are kept.
        """
        if self._nx is None:
            G = nx.DiGraph() if self.directed else nx.Graph()
            G.add_nodes_from(range(self.n_nodes))
            G.add_edges_from(self.edges)
            object.__setattr__(self, "_nx", G)
        return self._nx.copy()

    def summary(self) -> dict:
        """
        Graph summary statistics.

        Returns
        -------
        stats : dict
            Dictionary with n_nodes, n_edges, avg_degree, density
        """
        degrees = self.degree_sequence()
        max_edges = self.n_nodes * (self.n_nodes - 1)
        if not self.directed:
            max_edges //= 2

        return {
            'n_nodes': self.n_nodes,
            'n_edges': self.n_edges,
            'avg_degree': float(np.mean(degrees)) if self.n_nodes else 0.0,
            'density': self.n_edges / max_edges if max_edges > 0 else 0.0,
        }

    def __repr__(self) -> str:
        return f"Graph(n_nodes={self.n_nodes}, n_edges={self.n_edges}, directed={self.directed})"


def as_graph(G) -> Graph:
    """Accept a Graph or a NetworkX graph and return a Graph."""
    if isinstance(G, Graph):
        return G
    if isinstance(G, nx.Graph):
        return Graph.from_networkx(G)
    raise TypeError(f"Expected Graph or networkx graph, got {type(G).__name__}")


def as_nx(G) -> nx.Graph:
    """Accept a Graph or a NetworkX graph and return a NetworkX graph."""
    if isinstance(G, Graph):
        return G.as_networkx()
    if isinstance(G, nx.Graph):
        return G
    raise TypeError(f"Expected Graph or networkx graph, got {type(G).__name__}")
