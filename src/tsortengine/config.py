"""Sort configuration.

Provides a single frozen dataclass that encapsulates the tunable parts of
a sort: how independent roots are detected, whether more than one root is
acceptable, and the name-format rule of the case-insensitive API.

Python 3.11+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from tsortengine.constants import MIN_NAME_LENGTH

__all__ = ["RootDetection", "SortConfig"]


class RootDetection(StrEnum):
    """Strategy used by the validator to find independent dependency trees.

    Members:
        COMPONENTS: One root per connected component of the undirected
            edge set. Exact, and the default.
        SUBTREE_DELTA: Walk the sorted keys and treat every key whose
            reachable-edge count grows over the previous key's count as a
            new root. Cheap but order-sensitive; kept for compatibility.
    """

    COMPONENTS = "components"
    SUBTREE_DELTA = "subtree-delta"


@dataclass(frozen=True, slots=True)
class SortConfig:
    """Immutable configuration for sort(), sort_names() and build_graph().

    All fields have sensible defaults; ``SortConfig()`` is what every API
    function uses when ``config`` is omitted.

    Attributes:
        root_detection: Strategy for finding independent roots
            (default: ``RootDetection.COMPONENTS``).
        allow_multiple_roots: If True, a forest of independent trees sorts
            without a MultipleRootsError (default: False).
        min_name_length: Shortest name accepted by the name-validating API
            (default: 2).

    Example:
        >>> from tsortengine import SortConfig, RootDetection, sort
        >>> config = SortConfig(root_detection=RootDetection.SUBTREE_DELTA)
        >>> sort({"b": "a"}, config=config)
        ['a', 'b']
    """

    root_detection: RootDetection = RootDetection.COMPONENTS
    allow_multiple_roots: bool = False
    min_name_length: int = MIN_NAME_LENGTH

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If min_name_length is not positive or
                root_detection is not a known strategy.
        """
        if self.min_name_length <= 0:
            msg = "min_name_length must be positive"
            raise ValueError(msg)
        if not isinstance(self.root_detection, RootDetection):
            try:
                object.__setattr__(
                    self, "root_detection", RootDetection(self.root_detection)
                )
            except ValueError:
                msg = f"unknown root_detection strategy: {self.root_detection!r}"
                raise ValueError(msg) from None


DEFAULT_CONFIG = SortConfig()
