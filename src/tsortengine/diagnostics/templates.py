"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.11+. Zero external dependencies.
"""

from collections.abc import Sequence

from tsortengine.constants import CYCLE_PATH_SEPARATOR, ROOT_NAME_SEPARATOR

from .codes import Diagnostic, DiagnosticCode, ErrorCategory


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Every message starts with its ErrorCategory so that summaries stay
    greppable: ``cyclic: ...``, ``multiple roots: ...``, ``invalid name: ...``.
    """

    @staticmethod
    def cyclic_dependency(path: Sequence[str]) -> Diagnostic:
        """Cycle found while sorting.

        Args:
            path: Closed cycle path; first and last element are the same key

        Returns:
            Diagnostic for CYCLIC_DEPENDENCY
        """
        msg = f"{ErrorCategory.CYCLIC}: {CYCLE_PATH_SEPARATOR.join(path)}"
        members = tuple(dict.fromkeys(path))
        return Diagnostic(
            code=DiagnosticCode.CYCLIC_DEPENDENCY,
            message=msg,
            hint="Remove one of the relations along the cycle",
            keys=members,
        )

    @staticmethod
    def multiple_roots(roots: Sequence[str]) -> Diagnostic:
        """More than one independent root found.

        Args:
            roots: Root names in sorted order

        Returns:
            Diagnostic for MULTIPLE_ROOTS
        """
        msg = f"{ErrorCategory.MULTIPLE_ROOTS}: {ROOT_NAME_SEPARATOR.join(roots)}"
        return Diagnostic(
            code=DiagnosticCode.MULTIPLE_ROOTS,
            message=msg,
            hint="Relate the independent trees to a common ancestor",
            keys=tuple(roots),
        )

    @staticmethod
    def invalid_name(name: str, min_length: int) -> Diagnostic:
        """Name failed the format rule.

        Args:
            name: The offending name as supplied by the caller
            min_length: Minimum accepted length

        Returns:
            Diagnostic for INVALID_NAME
        """
        msg = f'{ErrorCategory.INVALID_NAME}: "{name}"'
        return Diagnostic(
            code=DiagnosticCode.INVALID_NAME,
            message=msg,
            hint=f"Names must contain only letters and be at least {min_length} long",
            keys=(name,),
        )
