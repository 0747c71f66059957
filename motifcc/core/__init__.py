"""Graph value object and parallel helpers."""

from .graph import Graph, as_graph, as_nx
from .parallel import parallel_map, resolve_n_jobs

__all__ = ['Graph', 'as_graph', 'as_nx', 'parallel_map', 'resolve_n_jobs']
