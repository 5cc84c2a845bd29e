"""Tests for the package root: exports and version."""

import tsortengine


class TestPublicAPI:
    """Package-level exports."""

    def test_all_exports_resolve(self) -> None:
        """Every name in __all__ is importable from the package."""
        for name in tsortengine.__all__:
            assert hasattr(tsortengine, name), name

    def test_version_is_string(self) -> None:
        """__version__ comes from metadata or the dev fallback."""
        assert isinstance(tsortengine.__version__, str)
        assert tsortengine.__version__

    def test_errors_share_base(self) -> None:
        """Every exported error derives from TopoSortError."""
        for cls in (
            tsortengine.MultiError,
            tsortengine.CyclicDependencyError,
            tsortengine.MultipleRootsError,
            tsortengine.InvalidNameError,
        ):
            assert issubclass(cls, tsortengine.TopoSortError)
