"""Diagnostic codes and data structures.

Defines error codes, categories and diagnostic messages.
Python 3.11+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
]


class ErrorCategory(StrEnum):
    """Error categorization for sort failures.

    Inherits from ``StrEnum`` so that ``str(category)`` yields the plain
    prefix used at the start of every error message (``"cyclic"``,
    ``"multiple roots"``, ``"invalid name"``).

    Categories:
        CYCLIC: A cycle makes the relations unsatisfiable
        MULTIPLE_ROOTS: The relations describe more than one independent tree
        INVALID_NAME: A name failed the format rule of the named API
        AGGREGATE: A collection of other errors
    """

    CYCLIC = "cyclic"
    MULTIPLE_ROOTS = "multiple roots"
    INVALID_NAME = "invalid name"
    AGGREGATE = "aggregate"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Graph structure errors (cycles, roots)
        2000-2999: Input errors (name format)
        9000-9999: Aggregation
    """

    # Graph structure errors (1000-1999)
    CYCLIC_DEPENDENCY = 1001
    MULTIPLE_ROOTS = 1002

    # Input errors (2000-2999)
    INVALID_NAME = 2001

    # Aggregation (9000-9999)
    MULTIPLE_ERRORS = 9001

    @property
    def category(self) -> ErrorCategory:
        """Category this code belongs to."""
        return _CODE_CATEGORIES[self]


_CODE_CATEGORIES: dict[DiagnosticCode, ErrorCategory] = {
    DiagnosticCode.CYCLIC_DEPENDENCY: ErrorCategory.CYCLIC,
    DiagnosticCode.MULTIPLE_ROOTS: ErrorCategory.MULTIPLE_ROOTS,
    DiagnosticCode.INVALID_NAME: ErrorCategory.INVALID_NAME,
    DiagnosticCode.MULTIPLE_ERRORS: ErrorCategory.AGGREGATE,
}


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Provides rich error information for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        severity: Error severity level
        keys: Keys involved (cycle path, root names, offending name)
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    severity: Literal["error", "warning"] = "error"
    keys: tuple[str, ...] | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler error.

        Example output:
            error[CYCLIC_DEPENDENCY]: cyclic: nick -> barbara -> nick
              = keys: nick, barbara
              = help: Remove one of the relations along the cycle

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
