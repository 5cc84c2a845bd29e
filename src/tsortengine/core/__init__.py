"""Core utilities for the case-insensitive name API.

This package holds the input-side rules the analysis layer never sees:
name validation and case folding. Keeping them here maintains a clean
dependency graph:

    diagnostics <- core <- analysis <- graph

Exports:
    is_valid_name: Name format check
    normalize_relations: Case folding with an original-spelling side table
    NormalizedRelations: Result of normalize_relations

Python 3.11+.
"""

from .name_validation import is_valid_name
from .normalize import NormalizedRelations, canonical_key, normalize_relations

__all__ = [
    "NormalizedRelations",
    "canonical_key",
    "is_valid_name",
    "normalize_relations",
]
