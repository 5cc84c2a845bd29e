"""tsortengine - Topological sorting with cycle and root diagnostics.

Sorts the keys implied by ``child -> parent`` relations so that every
parent comes first, and reports every cycle and every independent root
tree in one structured error.

Public API:
    sort - Generic keys, used as-is
    sort_names - Case-insensitive names, validated and reported in original spelling
    build_graph - Like sort_names, returning the sorted Graph
    SortConfig - Root detection strategy and name rules
    RootDetection - Available root detection strategies

Exceptions:
    TopoSortError - Base exception class
    MultiError - Aggregate raised by every failed sort
    CyclicDependencyError - A cycle in the relations
    MultipleRootsError - More than one independent tree
    InvalidNameError - Malformed name (name API only)

Submodules:
    tsortengine.analysis - Vertex map, depth-first sort, validation
    tsortengine.core - Name validation and case folding
    tsortengine.diagnostics - Error types, codes, templates and formatting
"""

from .config import RootDetection, SortConfig
from .diagnostics import (
    CyclicDependencyError,
    InvalidNameError,
    MultiError,
    MultipleRootsError,
    TopoSortError,
)
from .graph import Graph, build_graph, sort, sort_names

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("tsortengine")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CyclicDependencyError",
    "Graph",
    "InvalidNameError",
    "MultiError",
    "MultipleRootsError",
    "RootDetection",
    "SortConfig",
    "TopoSortError",
    "__version__",
    "build_graph",
    "sort",
    "sort_names",
]
