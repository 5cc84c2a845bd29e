"""Post-sort validation of a dependency graph.

Turns the raw output of topological_sort into structured errors:

- one CyclicDependencyError per cycle path the sorter recorded
- one MultipleRootsError when the keys form more than one independent
  dependency tree

Two root detection strategies are available (see RootDetection):

SUBTREE_DELTA walks the sorted keys, skipping cycle-flagged ones, and
counts the edges reachable from each key. A count larger than the previous
key's count is taken to mean a new tree has started. The heuristic is
sensitive to sort order: with ``{"b": "r", "c": "b", "a": "r"}`` it sees
``r=3, a=0, b=1`` and reports ``b`` as a second root, and when two trees
interleave in the sorted order it may name a non-root key in place of
the real one.

COMPONENTS counts connected components of the undirected edge set and
reports one parentless key per component. A component that is a pure
cycle has no parentless key and contributes no root.

Python 3.11+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Iterator, Mapping
from typing import TypeVar

from tsortengine.config import DEFAULT_CONFIG, RootDetection, SortConfig
from tsortengine.diagnostics import (
    CyclicDependencyError,
    MultipleRootsError,
    TopoSortError,
)

from .components import component_index
from .graph import SortResult, Vertex

__all__ = [
    "find_roots",
    "find_roots_by_components",
    "find_roots_by_subtree_delta",
    "reachable_edge_counts",
    "validate_graph",
]

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)


def reachable_edge_counts(
    vertices: Mapping[K, Vertex[K]],
    recursive: frozenset[K] | set[K] = frozenset(),
) -> dict[K, int]:
    """Count the edges walked when following afters transitively.

    Every walk is counted, so a key reachable along two paths contributes
    its edges twice. Edges into cycle-flagged keys are counted but not
    followed; the unflagged part of the graph is acyclic, so the counts are
    finite. Cycle-flagged keys get no entry.

    Args:
        vertices: Mapping from key to Vertex
        recursive: Cycle-flagged keys

    Returns:
        Mapping from each unflagged key to its walk edge count

    Example:
        >>> from tsortengine.analysis.graph import build_vertices
        >>> reachable_edge_counts(build_vertices({"b": "a", "c": "a", "d": "b"}))
        {'d': 0, 'b': 1, 'c': 0, 'a': 3}
    """
    counts: dict[K, int] = {}

    def edges(key: K) -> int:
        return sum(
            1 if after in recursive else 1 + counts.get(after, 0)
            for after in vertices[key].afters
        )

    for start in vertices:
        if start in recursive or start in counts:
            continue

        pending: set[K] = {start}
        stack: list[tuple[K, Iterator[K]]] = [(start, iter(vertices[start].afters))]

        while stack:
            key, afters = stack[-1]
            for after in afters:
                if after not in recursive and after not in counts and after not in pending:
                    pending.add(after)
                    stack.append((after, iter(vertices[after].afters)))
                    break
            else:
                stack.pop()
                pending.discard(key)
                counts[key] = edges(key)

    return counts


def find_roots_by_subtree_delta(
    result: SortResult[K],
    vertices: Mapping[K, Vertex[K]],
) -> list[K]:
    """Find roots with the reachable-edge-count heuristic.

    Args:
        result: Output of topological_sort
        vertices: The sorted vertex map

    Returns:
        Keys classified as roots, in sorted order
    """
    counts = reachable_edge_counts(vertices, result.recursive)
    roots: list[K] = []
    previous = 0
    for key in result.order:
        if key in result.recursive:
            continue
        current = counts[key]
        if current > previous:
            roots.append(key)
        previous = current
    return roots


def find_roots_by_components(
    result: SortResult[K],
    vertices: Mapping[K, Vertex[K]],
) -> list[K]:
    """Find one root per connected component.

    The root of a component is its first key in sorted order that is not a
    dependent of any other key. A component in which every key has a
    prerequisite (a pure cycle) has no root and is left to the cycle errors.

    Args:
        result: Output of topological_sort
        vertices: The sorted vertex map

    Returns:
        One key per component that has a parentless key, in sorted order
    """
    index = component_index(vertices)
    dependents = {after for vertex in vertices.values() for after in vertex.afters}
    position = {key: i for i, key in enumerate(result.order)}

    parentless: dict[K, K] = {}
    for key in result.order:
        if key not in dependents:
            parentless.setdefault(index[key], key)

    return sorted(parentless.values(), key=position.__getitem__)


def find_roots(
    result: SortResult[K],
    vertices: Mapping[K, Vertex[K]],
    strategy: RootDetection = RootDetection.COMPONENTS,
) -> list[K]:
    """Dispatch to the root detection strategy.

    Args:
        result: Output of topological_sort
        vertices: The sorted vertex map
        strategy: Which detector to run

    Returns:
        Detected roots, in sorted order
    """
    match strategy:
        case RootDetection.SUBTREE_DELTA:
            return find_roots_by_subtree_delta(result, vertices)
        case RootDetection.COMPONENTS:
            return find_roots_by_components(result, vertices)


def validate_graph(
    result: SortResult[K],
    vertices: Mapping[K, Vertex[K]],
    *,
    config: SortConfig | None = None,
    label: Callable[[K], Hashable] | None = None,
) -> list[TopoSortError]:
    """Check a sorted graph for cycles and multiple roots.

    Never raises; every problem found is returned so that the caller can
    aggregate them. Cycle errors come first, in detection order, followed
    by at most one MultipleRootsError.

    Args:
        result: Output of topological_sort
        vertices: The sorted vertex map
        config: Sort configuration (default: SortConfig())
        label: Maps keys to the values shown in errors (default: the key)

    Returns:
        Errors found, empty if the graph is a single acyclic tree
    """
    config = config or DEFAULT_CONFIG
    show = label or (lambda key: key)
    errors: list[TopoSortError] = []

    for path in result.cycles:
        errors.append(CyclicDependencyError([show(key) for key in path]))

    roots = find_roots(result, vertices, config.root_detection)
    logger.debug("Found %d root(s) using %s", len(roots), config.root_detection)
    if len(roots) > 1 and not config.allow_multiple_roots:
        errors.append(MultipleRootsError([show(key) for key in roots]))

    return errors
