"""Graph analysis: construction, depth-first sorting and validation.

Exports:
    Vertex, SortResult: Graph data structures
    build_vertices: Relations -> vertex map
    topological_sort: Reverse-postorder sort with cycle detection
    validate_graph: Cycle and root errors for a sorted graph
    find_roots: Root detection by configured strategy

Python 3.11+.
"""

from .graph import SortResult, Vertex, build_vertices, topological_sort
from .validator import find_roots, validate_graph

__all__ = [
    "SortResult",
    "Vertex",
    "build_vertices",
    "find_roots",
    "topological_sort",
    "validate_graph",
]
