"""Sort exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.
MultiError aggregates every error detected by one call so that callers
can branch on cause without parsing messages.

Python 3.11+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator, Sequence
from typing import Any

from tsortengine.constants import NO_ERRORS_MESSAGE

from .codes import Diagnostic, DiagnosticCode
from .templates import ErrorTemplate

__all__ = [
    "CyclicDependencyError",
    "InvalidNameError",
    "MultiError",
    "MultipleRootsError",
    "TopoSortError",
]


class TopoSortError(Exception):
    """Base exception for all sort errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize TopoSortError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)

    @property
    def code(self) -> DiagnosticCode | None:
        """Diagnostic code, if the error carries a diagnostic."""
        return self.diagnostic.code if self.diagnostic is not None else None

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.diagnostic or self.args[0],))


class CyclicDependencyError(TopoSortError):
    """A cycle makes the relations unsatisfiable.

    Example:
        {"a": "b", "b": "a"}  ->  cyclic: a -> b -> a

    Attributes:
        path: Closed cycle path; the first key is repeated at the end
    """

    def __init__(self, path: Sequence[Hashable]) -> None:
        """Initialize CyclicDependencyError.

        Args:
            path: Keys around the cycle, closed (first == last)
        """
        self.path: tuple[Hashable, ...] = tuple(path)
        super().__init__(ErrorTemplate.cyclic_dependency([str(k) for k in self.path]))

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.path,))

    @property
    def keys(self) -> tuple[Hashable, ...]:
        """Distinct keys on the cycle, in path order.

        A self relation yields a single key.
        """
        return tuple(dict.fromkeys(self.path))


class MultipleRootsError(TopoSortError):
    """The relations describe more than one independent dependency tree.

    Attributes:
        roots: Root keys in sorted order
    """

    def __init__(self, roots: Sequence[Hashable]) -> None:
        """Initialize MultipleRootsError.

        Args:
            roots: Detected root keys
        """
        self.roots: tuple[Hashable, ...] = tuple(roots)
        super().__init__(ErrorTemplate.multiple_roots([str(k) for k in self.roots]))

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.roots,))


class InvalidNameError(TopoSortError):
    """A name failed the format rule of the case-insensitive API.

    Attributes:
        name: The offending name, as supplied
        min_length: Minimum accepted name length
    """

    def __init__(self, name: str, min_length: int) -> None:
        """Initialize InvalidNameError.

        Args:
            name: The offending name
            min_length: Minimum accepted name length
        """
        self.name = name
        self.min_length = min_length
        super().__init__(ErrorTemplate.invalid_name(name, min_length))

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.name, self.min_length))


class MultiError(TopoSortError):
    """Ordered collection of errors raised as one.

    An empty MultiError is falsy and reads ``(0 errors)``. Otherwise the
    message is the first error's message plus a count of the rest:

        >>> str(MultiError([CyclicDependencyError(["a", "a"])]))
        'cyclic: a -> a'
        >>> str(MultiError([MultipleRootsError(["a", "b"])] * 3))
        'multiple roots: a, b (and 2 other errors)'

    Attributes:
        errors: Contained errors, in detection order
    """

    def __init__(self, errors: Iterable[BaseException | None] = ()) -> None:
        """Initialize MultiError.

        Args:
            errors: Errors to aggregate; None entries are dropped
        """
        self.errors: tuple[BaseException, ...] = tuple(e for e in errors if e is not None)
        super().__init__(self._summary())
        self.diagnostic = Diagnostic(
            code=DiagnosticCode.MULTIPLE_ERRORS,
            message=self._summary(),
        )

    def _summary(self) -> str:
        match len(self.errors):
            case 0:
                return NO_ERRORS_MESSAGE
            case 1:
                return str(self.errors[0])
            case 2:
                return f"{self.errors[0]} (and 1 other error)"
            case n:
                return f"{self.errors[0]} (and {n - 1} other errors)"

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.errors,))

    def __len__(self) -> int:
        return len(self.errors)

    def __iter__(self) -> Iterator[BaseException]:
        return iter(self.errors)

    def __bool__(self) -> bool:
        return bool(self.errors)

    def __repr__(self) -> str:
        return f"MultiError({list(self.errors)!r})"

    def matches(self, kind: type[BaseException] | DiagnosticCode) -> bool:
        """Check whether this aggregate is, or contains, an error of ``kind``.

        Searches nested MultiError instances recursively.

        Args:
            kind: Exception class to test with isinstance, or a
                DiagnosticCode compared against each error's code

        Returns:
            True if any error matches

        Example:
            >>> err = MultiError([MultiError([MultipleRootsError(["a", "b"])])])
            >>> err.matches(MultipleRootsError)
            True
            >>> err.matches(DiagnosticCode.CYCLIC_DEPENDENCY)
            False
        """
        if _matches_one(self, kind):
            return True
        return any(
            e.matches(kind) if isinstance(e, MultiError) else _matches_one(e, kind)
            for e in self.errors
        )

    def flatten(self) -> tuple[BaseException, ...]:
        """Return the leaf errors, expanding nested aggregates in order."""
        leaves: list[BaseException] = []
        for error in self.errors:
            if isinstance(error, MultiError):
                leaves.extend(error.flatten())
            else:
                leaves.append(error)
        return tuple(leaves)


def _matches_one(error: BaseException, kind: type[BaseException] | DiagnosticCode) -> bool:
    if isinstance(kind, DiagnosticCode):
        return getattr(error, "code", None) is kind
    return isinstance(error, kind)
