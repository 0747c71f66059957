"""
Subgraph matching of a motif into a host graph.

The structural search is NetworkX's VF2 monomorphism matcher: every
injective assignment of host nodes to motif positions that carries each
motif edge onto a host edge. Extra host edges between the matched nodes
are allowed. For directed graphs a second pass marks as invalid every
mapping whose induced host subgraph has a different edge count from the
motif; the check is by edge count only, so a host subgraph with another
directed structure but the same number of arcs passes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar, Iterator, List, Sequence, Tuple, Union

import numpy as np
import networkx as nx
from networkx.algorithms import isomorphism

from .motifs import check_directedness

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidMapping:
    """Host node ids indexed by motif position."""

    nodes: Tuple[int, ...]
    valid: ClassVar[bool] = True


@dataclass(frozen=True)
class InvalidMapping:
    """A structural match rejected by the directed edge-count check."""

    nodes: Tuple[int, ...]
    valid: ClassVar[bool] = False


Mapping = Union[ValidMapping, InvalidMapping]


@dataclass(frozen=True)
class MappingSet:
    """
    All mappings of one motif into one host graph.

    Contains one entry per motif automorphism for every instance. Invalid
    entries are kept in place so positions stay stable.

    Attributes
    ----------
    mappings : tuple of ValidMapping / InvalidMapping
        Matcher output in discovery order
    motif_size : int
        Number of motif positions
    automorphisms : int
        Automorphism count of the motif (rotational symmetry)
    directed : bool
        Whether host and motif are directed
    """

    mappings: Tuple[Mapping, ...]
    motif_size: int
    automorphisms: int
    directed: bool = False

    def __len__(self) -> int:
        return len(self.mappings)

    def __iter__(self) -> Iterator[Mapping]:
        return iter(self.mappings)

    @property
    def valid(self) -> List[Tuple[int, ...]]:
        """Node tuples of the valid mappings, in order."""
        return [m.nodes for m in self.mappings if m.valid]

    @property
    def n_valid(self) -> int:
        return sum(1 for m in self.mappings if m.valid)

    @property
    def n_invalid(self) -> int:
        return len(self.mappings) - self.n_valid

    def as_array(self) -> np.ndarray:
        """Valid mappings as an int64 array of shape (n_valid, motif_size)."""
        valid = self.valid
        if not valid:
            return np.empty((0, self.motif_size), dtype=np.int64)
        return np.asarray(valid, dtype=np.int64)


def _matcher(host: nx.Graph, motif: nx.Graph) -> isomorphism.GraphMatcher:
    if host.is_directed():
        return isomorphism.DiGraphMatcher(host, motif)
    return isomorphism.GraphMatcher(host, motif)


def _simple(G: nx.Graph) -> nx.Graph:
    if G.is_multigraph():
        return nx.DiGraph(G) if G.is_directed() else nx.Graph(G)
    return G


def find_mappings(host: nx.Graph, motif: nx.Graph) -> List[Tuple[int, ...]]:
    """
    Find every structural embedding of ``motif`` in ``host``.

    Parameters
    ----------
    host : nx.Graph or nx.DiGraph
        Host graph
    motif : nx.Graph or nx.DiGraph
        Motif with nodes 0..k-1

    Returns
    -------
    mappings : list of tuple
        ``mapping[p]`` is the host node playing motif position ``p``.
        Empty when the motif does not occur.
    """
    check_directedness(host, motif)
    host = _simple(host)
    size = motif.number_of_nodes()
    if host.number_of_nodes() < size:
        return []

    mappings = []
    for host_to_motif in _matcher(host, motif).subgraph_monomorphisms_iter():
        position = {p: h for h, p in host_to_motif.items()}
        mappings.append(tuple(position[p] for p in range(size)))
    return mappings


def validate_mappings(
    host: nx.Graph, motif: nx.Graph, mappings: Sequence[Tuple[int, ...]]
) -> Tuple[Mapping, ...]:
    """
    Tag each mapping as valid or invalid.

    Undirected mappings are always valid. A directed mapping is valid when
    the host subgraph induced on its nodes has exactly as many edges as the
    motif.
    """
    if not host.is_directed():
        return tuple(ValidMapping(tuple(m)) for m in mappings)

    host = _simple(host)
    motif_edges = motif.number_of_edges()
    tagged: List[Mapping] = []
    for m in mappings:
        if host.subgraph(m).number_of_edges() == motif_edges:
            tagged.append(ValidMapping(tuple(m)))
        else:
            tagged.append(InvalidMapping(tuple(m)))
    return tuple(tagged)


def automorphism_count(motif: nx.Graph) -> int:
    """Number of mappings of the motif onto itself (at least 1)."""
    return len(find_mappings(motif, motif))


def match(host: nx.Graph, motif: nx.Graph) -> MappingSet:
    """
    Find and validate all mappings of ``motif`` into ``host``.

    Returns
    -------
    MappingSet
        Tagged mappings plus the motif's automorphism count
    """
    raw = find_mappings(host, motif)
    tagged = validate_mappings(host, motif, raw)
    result = MappingSet(
        mappings=tagged,
        motif_size=motif.number_of_nodes(),
        automorphisms=automorphism_count(motif),
        directed=host.is_directed(),
    )
    logger.debug(
        f"Matched motif: {len(result)} mappings, {result.n_invalid} invalid, "
        f"{result.automorphisms} automorphisms"
    )
    return result
