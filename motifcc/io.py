"""
File input and output.

Graphs are read and written as GML. Result files are plain text.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Dict, Iterable, List, Sequence, Union

import numpy as np
import networkx as nx

from .core.graph import Graph

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def read_graph(path: PathLike) -> Graph:
    """
    Load a graph from a GML file.

    Node ids are relabelled densely to 0..N-1 in file order. The GML
    ``directed`` flag sets the graph's directedness. Repeated edges are
    kept in the edge list even when the file does not declare
    ``multigraph 1``.

    Raises
    ------
    FileNotFoundError
        If the file does not exist
    ValueError
        If the file is not valid GML
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Graph file not found: {path}")

    G = _parse_gml(path.read_text(), path)
    graph = Graph.from_networkx(G)
    logger.info(
        f"Loaded {'directed' if graph.directed else 'undirected'} graph from {path}: "
        f"{graph.n_nodes} nodes, {graph.n_edges} edges"
    )
    return graph


def _parse_gml(text: str, path: Path) -> nx.Graph:
    try:
        return nx.parse_gml(text, label="id")
    except nx.NetworkXError as e:
        if "duplicated" not in str(e):
            raise ValueError(f"Invalid GML file {path}: {e}") from e

    # repeated edges without a multigraph declaration
    if re.search(r"\bmultigraph\s+0\b", text):
        text = re.sub(r"\bmultigraph\s+0\b", "multigraph 1", text, count=1)
    else:
        text = re.sub(r"\bgraph\s*\[", "graph [\n  multigraph 1", text, count=1)
    try:
        return nx.parse_gml(text, label="id")
    except nx.NetworkXError as e:
        raise ValueError(f"Invalid GML file {path}: {e}") from e


def write_graph(graph: Union[Graph, nx.Graph], path: PathLike) -> None:
    """Write a graph to a GML file with integer node ids."""
    G = graph.as_networkx() if isinstance(graph, Graph) else graph
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    nx.write_gml(G, path)


def write_samples(path: PathLike, samples: Iterable[float]) -> None:
    """One sample coefficient per line, ``%.8f`` formatted."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        for value in np.asarray(list(samples), dtype=np.float64):
            f.write(f"{value:.8f}\n")


def write_stats(
    path: PathLike, n_nodes: int, n_edges: int, coefficient: float, z_score: float
) -> None:
    """Run statistics: a header line and one data line."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        f.write("Nodes, Edges, MCC, Z-Score\n")
        f.write(f"{n_nodes}, {n_edges}, {coefficient:.8f}, {z_score:.8f}\n")


def write_node_map(path: PathLike, node_map: Dict[int, int]) -> None:
    """``new_id,old_id`` per line, ordered by new id."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        for new_id in sorted(node_map):
            f.write(f"{new_id},{node_map[new_id]}\n")


def write_node_sets(path: PathLike, node_sets: Sequence[Sequence[int]]) -> None:
    """One comma-separated line of node ids per set."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        for nodes in node_sets:
            f.write(",".join(str(n) for n in nodes) + "\n")


def write_cluster_types(prefix: str, types: Sequence[nx.Graph]) -> List[Path]:
    """Write each clustering type to ``<prefix>Type<i>.gml`` (1-based)."""
    paths = []
    for i, T in enumerate(types, start=1):
        path = Path(f"{prefix}Type{i}.gml")
        write_graph(T, path)
        paths.append(path)
    return paths
