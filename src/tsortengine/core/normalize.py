"""Relation normalization for the case-insensitive sort API.

Turns caller-supplied ``child -> parent`` name pairs into a canonical key
space (``str.casefold``) and keeps a side table mapping each canonical key
back to the first spelling encountered. Every distinct name is validated
once, on first encounter; all failures are collected and raised together.

Python 3.11+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from tsortengine.constants import MIN_NAME_LENGTH
from tsortengine.diagnostics import InvalidNameError, MultiError

from .name_validation import is_valid_name

__all__ = ["NormalizedRelations", "canonical_key", "normalize_relations"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class NormalizedRelations:
    """Relations rewritten into the canonical key space.

    Attributes:
        relations: Canonical child key -> canonical parent key
        names: Canonical key -> original spelling (first one encountered)
    """

    relations: dict[str, str]
    names: dict[str, str]

    def original(self, key: str) -> str:
        """Return the original spelling of a canonical key."""
        return self.names[key]


def canonical_key(name: str) -> str:
    """Return the case-insensitive identity of a name.

    Example:
        >>> canonical_key("jONas") == canonical_key("Jonas")
        True
    """
    return name.casefold()


def normalize_relations(
    data: Mapping[str, str],
    *,
    min_name_length: int = MIN_NAME_LENGTH,
) -> NormalizedRelations:
    """Case-fold and validate a child -> parent name mapping.

    Two children that fold to the same key keep the relation of the one
    iterated last, the same way a dict keeps the last assignment.

    Args:
        data: Mapping from child name to parent name
        min_name_length: Minimum accepted name length

    Returns:
        NormalizedRelations with the folded relations and the name table

    Raises:
        MultiError: One InvalidNameError per distinct invalid name, in
            encounter order

    Example:
        >>> normalized = normalize_relations({"Sophie": "Jonas", "jONAS": "Nick"})
        >>> normalized.relations
        {'sophie': 'jonas', 'jonas': 'nick'}
        >>> normalized.original("jonas")
        'Jonas'
    """
    relations: dict[str, str] = {}
    names: dict[str, str] = {}
    errors: list[InvalidNameError] = []

    def register(name: str) -> str:
        key = canonical_key(name) if isinstance(name, str) else name
        if key not in names:
            if not is_valid_name(name, min_name_length):
                errors.append(InvalidNameError(str(name), min_name_length))
            names[key] = name
        return key

    for child, parent in data.items():
        child_key = register(child)
        parent_key = register(parent)
        relations[child_key] = parent_key

    if errors:
        logger.debug("Rejected %d invalid name(s)", len(errors))
        raise MultiError(errors)

    return NormalizedRelations(relations=relations, names=names)
