"""Public sort API.

Two variants share the same pipeline (build vertices, sort, validate):

- sort(): generic keys, used as-is
- build_graph() / sort_names(): case-insensitive string names, validated
  and folded before sorting, reported back in their original spelling

Every problem found in one call is raised together as a MultiError.

Python 3.11+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Iterable, Mapping
from dataclasses import dataclass
from typing import TypeVar

from tsortengine.analysis import (
    SortResult,
    Vertex,
    build_vertices,
    topological_sort,
    validate_graph,
)
from tsortengine.config import DEFAULT_CONFIG, SortConfig
from tsortengine.core import normalize_relations
from tsortengine.diagnostics import MultiError

__all__ = ["Graph", "build_graph", "sort", "sort_names"]

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)


@dataclass(frozen=True, slots=True)
class Graph:
    """A validated, sorted graph of case-insensitive names.

    Attributes:
        vertices: Canonical key -> Vertex
        names: Canonical key -> original spelling
        result: Sort output over canonical keys
    """

    vertices: dict[str, Vertex[str]]
    names: dict[str, str]
    result: SortResult[str]

    def sorted_ids(self) -> list[str]:
        """Return the sorted names in their original spelling."""
        return [self.names[key] for key in self.result.order]

    def __len__(self) -> int:
        return len(self.vertices)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.casefold() in self.vertices


def sort(
    relations: Mapping[K, K],
    *,
    keys: Iterable[K] = (),
    config: SortConfig | None = None,
) -> list[K]:
    """Sort keys so that every parent comes before its children.

    Args:
        relations: Mapping from child to parent; each entry asserts that the
            child comes after the parent
        keys: Extra keys to include without relations
        config: Sort configuration (default: SortConfig())

    Returns:
        Every distinct key exactly once, foundational keys first

    Raises:
        MultiError: If the relations contain cycles or describe more than
            one independent tree

    Example:
        >>> sort({"Barbara": "Nick", "Nick": "Sophie", "Sophie": "Jonas"})
        ['Jonas', 'Sophie', 'Nick', 'Barbara']
    """
    vertices = build_vertices(relations, keys)
    result = topological_sort(vertices)
    _raise_for_errors(result, vertices, config, label=None)
    return list(result.order)


def build_graph(
    data: Mapping[str, str],
    *,
    config: SortConfig | None = None,
) -> Graph:
    """Validate, sort and check a mapping of case-insensitive names.

    Names are compared with ``str.casefold``; the first spelling seen for
    a name is the one reported back. Name errors are raised before any
    graph work is done.

    Args:
        data: Mapping from child name to parent name
        config: Sort configuration (default: SortConfig())

    Returns:
        The sorted Graph

    Raises:
        MultiError: Of InvalidNameError for malformed names, otherwise of
            CyclicDependencyError / MultipleRootsError

    Example:
        >>> build_graph({"Sophie": "Jonas"}).sorted_ids()
        ['Jonas', 'Sophie']
    """
    config = config or DEFAULT_CONFIG
    normalized = normalize_relations(data, min_name_length=config.min_name_length)
    vertices = build_vertices(normalized.relations)
    result = topological_sort(vertices)
    _raise_for_errors(result, vertices, config, label=normalized.original)
    return Graph(vertices=vertices, names=normalized.names, result=result)


def sort_names(
    data: Mapping[str, str],
    *,
    config: SortConfig | None = None,
) -> list[str]:
    """Sort case-insensitive names; shorthand for build_graph().sorted_ids().

    Example:
        >>> sort_names({"Nick": "Sophie", "sophie": "Jonas"})
        ['Jonas', 'Sophie', 'Nick']
    """
    return build_graph(data, config=config).sorted_ids()


def _raise_for_errors(
    result: SortResult[K],
    vertices: Mapping[K, Vertex[K]],
    config: SortConfig | None,
    label: Callable[[K], Hashable] | None,
) -> None:
    errors = validate_graph(result, vertices, config=config, label=label)
    if errors:
        logger.warning(
            "Sort of %d key(s) failed with %d error(s)", len(vertices), len(errors)
        )
        raise MultiError(errors)
