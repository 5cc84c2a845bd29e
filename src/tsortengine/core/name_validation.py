"""Name validation for the case-insensitive sort API.

This module provides the single source of truth for the name format
accepted by ``sort_names()`` and ``build_graph()``.

Name Grammar:
    Letters only (any script, per ``str.isalpha``), at least
    MIN_NAME_LENGTH characters.

Thread Safety:
    All functions in this module are pure functions with no shared state.
    Safe for concurrent use across multiple threads.

Python 3.11+.
"""

from __future__ import annotations

from tsortengine.constants import MIN_NAME_LENGTH

__all__ = ["is_valid_name"]


def is_valid_name(name: object, min_length: int = MIN_NAME_LENGTH) -> bool:
    """Validate a complete name.

    Args:
        name: Candidate name; anything but a ``str`` is invalid
        min_length: Minimum accepted length (default: MIN_NAME_LENGTH)

    Returns:
        True if the name is purely alphabetic and long enough

    Example:
        >>> is_valid_name("Jonas")
        True
        >>> is_valid_name("Sébastien")
        True
        >>> is_valid_name("J0nas")
        False
        >>> is_valid_name("J")
        False
    """
    if not isinstance(name, str):
        return False
    return len(name) >= min_length and name.isalpha()
