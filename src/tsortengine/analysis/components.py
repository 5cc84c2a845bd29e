"""Connected components of a vertex map.

Union-find (disjoint set union) over the undirected closure of the edge
set, used by the validator to count independent dependency trees.

Python 3.11+.
"""

from __future__ import annotations

from collections.abc import Hashable, Mapping
from typing import Generic, TypeVar

from .graph import Vertex

__all__ = ["UnionFind", "component_index"]

K = TypeVar("K", bound=Hashable)


class UnionFind(Generic[K]):
    """Union-find with path compression and union by rank.

    Elements are lazily initialized on first use.

    Example:
        >>> uf = UnionFind[str]()
        >>> _ = uf.union("a", "b")
        >>> uf.connected("a", "b")
        True
        >>> uf.connected("a", "c")
        False
    """

    def __init__(self) -> None:
        self._parent: dict[K, K] = {}
        self._rank: dict[K, int] = {}

    def add(self, element: K) -> None:
        """Initialize element as its own set if not seen before."""
        if element not in self._parent:
            self._parent[element] = element
            self._rank[element] = 0

    def find(self, element: K) -> K:
        """Find the representative of the set containing element."""
        self.add(element)

        root = element
        while self._parent[root] != root:
            root = self._parent[root]

        # Path compression
        current = element
        while self._parent[current] != root:
            next_node = self._parent[current]
            self._parent[current] = root
            current = next_node

        return root

    def union(self, x: K, y: K) -> K:
        """Merge the sets containing x and y; return the new representative."""
        root_x = self.find(x)
        root_y = self.find(y)

        if root_x == root_y:
            return root_x

        if self._rank[root_x] < self._rank[root_y]:
            root_x, root_y = root_y, root_x
        self._parent[root_y] = root_x
        if self._rank[root_x] == self._rank[root_y]:
            self._rank[root_x] += 1
        return root_x

    def connected(self, x: K, y: K) -> bool:
        """Check if x and y are in the same set."""
        return self.find(x) == self.find(y)


def component_index(vertices: Mapping[K, Vertex[K]]) -> dict[K, K]:
    """Map every key to the representative of its connected component.

    Edge direction is ignored: a prerequisite and its dependent always
    share a component.

    Example:
        >>> from tsortengine.analysis.graph import build_vertices
        >>> index = component_index(build_vertices({"b": "a", "d": "c"}))
        >>> index["a"] == index["b"], index["a"] == index["c"]
        (True, False)
    """
    uf: UnionFind[K] = UnionFind()
    for key, vertex in vertices.items():
        uf.add(key)
        for after in vertex.afters:
            uf.union(key, after)
    return {key: uf.find(key) for key in vertices}
