"""Hypothesis strategies for tsortengine property-based testing.

Usage:
    from tests.strategies import tree_relations, forest_relations
    from tests.strategies.graph import cyclic_relations, valid_names
"""

from .graph import (
    cyclic_relations,
    forest_relations,
    invalid_names,
    node_names,
    tree_relations,
    valid_names,
)

__all__ = [
    "cyclic_relations",
    "forest_relations",
    "invalid_names",
    "node_names",
    "tree_relations",
    "valid_names",
]
