"""Shared constants for tsortengine.

This module provides centralized constants used across the core, analysis
and diagnostics packages. Placing constants here avoids circular imports
and provides a single source of truth.

Constants are grouped by domain:
- Name limits: Format rules for the case-insensitive name API
- Rendering: Separators used in error messages

Python 3.11+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Name limits
    "MIN_NAME_LENGTH",
    # Rendering
    "CYCLE_PATH_SEPARATOR",
    "ROOT_NAME_SEPARATOR",
    "NO_ERRORS_MESSAGE",
]

# ============================================================================
# NAME LIMITS
# ============================================================================

# Minimum length of a name accepted by sort_names()/build_graph().
# Single letters are rejected; names must be purely alphabetic.
MIN_NAME_LENGTH: int = 2

# ============================================================================
# RENDERING
# ============================================================================

# Joins the keys of a cycle path: "nick -> barbara -> nick"
CYCLE_PATH_SEPARATOR: str = " -> "

# Joins the names of detected roots: "Jonas, Daniel"
ROOT_NAME_SEPARATOR: str = ", "

# Summary of an empty MultiError
NO_ERRORS_MESSAGE: str = "(0 errors)"
