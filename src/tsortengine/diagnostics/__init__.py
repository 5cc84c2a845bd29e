"""Diagnostic system for sort errors.

Provides structured error diagnostics with codes, categories and hints,
plus the MultiError aggregate every failed sort raises.

Python 3.11+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory
from .errors import (
    CyclicDependencyError,
    InvalidNameError,
    MultiError,
    MultipleRootsError,
    TopoSortError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "CyclicDependencyError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorCategory",
    "ErrorTemplate",
    "InvalidNameError",
    "MultiError",
    "MultipleRootsError",
    "OutputFormat",
    "TopoSortError",
]
