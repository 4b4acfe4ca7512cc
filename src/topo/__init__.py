"""Directed graphs with topological ordering and cycle detection."""

__all__ = [
    "Graph",
    "GraphCycleError",
    "graph_from_mapping",
    "new_graph",
    "topological_sort",
]

from ._algorithms import topological_sort
from ._errors import GraphCycleError
from ._graph import Graph, graph_from_mapping, new_graph
