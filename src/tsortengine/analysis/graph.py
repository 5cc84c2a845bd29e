"""Graph algorithms for topological sorting.

Builds the adjacency structure implied by ``child -> parent`` relations
and sorts it with a depth-first traversal that detects cycles in the same
pass.

Python 3.11+.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Generic, TypeVar

__all__ = [
    "SortResult",
    "Vertex",
    "build_vertices",
    "topological_sort",
]

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)


@dataclass(slots=True)
class Vertex(Generic[K]):
    """Graph node.

    Attributes:
        key: Identity of the vertex
        afters: Keys that must come after this one (its dependents), in
            the order the relations introduced them
    """

    key: K
    afters: list[K] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class SortResult(Generic[K]):
    """Output of topological_sort.

    Attributes:
        order: Every key exactly once; prerequisites before dependents
            when the graph is acyclic
        recursive: Keys lying on a detected cycle
        cycles: One closed path per back-edge found, e.g. ``("a", "b", "a")``
    """

    order: tuple[K, ...]
    recursive: frozenset[K]
    cycles: tuple[tuple[K, ...], ...]

    @property
    def has_cycles(self) -> bool:
        """True if at least one cycle was found."""
        return bool(self.cycles)


def build_vertices(
    relations: Mapping[K, K],
    keys: Iterable[K] = (),
) -> dict[K, Vertex[K]]:
    """Build the vertex map for a set of relations.

    Each entry ``child -> parent`` asserts that child comes after parent and
    adds the edge parent -> child. Vertices are created in mapping iteration
    order (child first, then parent), followed by any extra ``keys`` not
    already present as isolated vertices.

    Args:
        relations: Mapping from child key to parent key
        keys: Additional keys that take part in the sort without relations

    Returns:
        Mapping from key to Vertex, in creation order

    Example:
        >>> vertices = build_vertices({"nick": "sophie", "sophie": "jonas"})
        >>> list(vertices)
        ['nick', 'sophie', 'jonas']
        >>> vertices["sophie"].afters
        ['nick']
    """
    vertices: dict[K, Vertex[K]] = {}

    for child, parent in relations.items():
        if child not in vertices:
            vertices[child] = Vertex(child)
        if parent not in vertices:
            vertices[parent] = Vertex(parent)
        vertices[parent].afters.append(child)

    for key in keys:
        if key not in vertices:
            vertices[key] = Vertex(key)

    logger.debug("Built %d vertices from %d relations", len(vertices), len(relations))
    return vertices


def topological_sort(vertices: Mapping[K, Vertex[K]]) -> SortResult[K]:
    """Sort a vertex map topologically and detect cycles.

    Implements depth-first search with an explicit stack of afters
    iterators, so deep chains never hit Python's recursion limit. The
    traversal is equivalent to the recursive visit:

    1. Mark the key visited and push it on the ancestor path.
    2. For each after, in list order: if it is on the ancestor path the edge
       closes a cycle, otherwise descend into it unless already visited.
    3. Prepend the key to the result once all afters are done.

    A cycle closed by ``current -> ancestor`` flags every key on the path
    from ``ancestor`` to ``current`` and is recorded as
    ``(current, ancestor, ..., current)``.

    Args:
        vertices: Mapping from key to Vertex, e.g. from build_vertices

    Returns:
        SortResult with the order, cycle-flagged keys and cycle paths

    Example:
        >>> result = topological_sort(build_vertices({"b": "a", "c": "b"}))
        >>> result.order
        ('a', 'b', 'c')
        >>> topological_sort(build_vertices({"a": "b", "b": "a"})).cycles
        (('b', 'a', 'b'),)

    Complexity:
        Time: O(V + E) plus the size of recorded cycle paths
        Space: O(V)
    """
    visited: set[K] = set()
    recursive: set[K] = set()
    cycles: list[tuple[K, ...]] = []
    postorder: list[K] = []

    for start in vertices:
        if start in visited:
            continue

        # Ancestor path as ordered list + set for O(1) membership
        path: list[K] = [start]
        on_path: set[K] = {start}
        visited.add(start)
        stack: list[tuple[K, Iterator[K]]] = [(start, iter(vertices[start].afters))]

        while stack:
            key, afters = stack[-1]
            for after in afters:
                if after in on_path:
                    cycle = path[path.index(after):]
                    recursive.update(cycle)
                    cycles.append((key, *cycle))
                elif after not in visited:
                    visited.add(after)
                    path.append(after)
                    on_path.add(after)
                    stack.append((after, iter(vertices[after].afters)))
                    break
            else:
                stack.pop()
                path.pop()
                on_path.discard(key)
                postorder.append(key)

    if cycles:
        logger.debug("Detected %d cycle(s) over %d key(s)", len(cycles), len(recursive))

    postorder.reverse()
    return SortResult(
        order=tuple(postorder),
        recursive=frozenset(recursive),
        cycles=tuple(cycles),
    )
