"""Tests for config: SortConfig validation and RootDetection."""

import dataclasses

import pytest

from tsortengine.config import DEFAULT_CONFIG, RootDetection, SortConfig
from tsortengine.constants import MIN_NAME_LENGTH


class TestSortConfig:
    """SortConfig defaults and validation."""

    def test_defaults(self) -> None:
        """Defaults match the documented behavior."""
        config = SortConfig()
        assert config.root_detection is RootDetection.COMPONENTS
        assert config.allow_multiple_roots is False
        assert config.min_name_length == MIN_NAME_LENGTH == 2
        assert config == DEFAULT_CONFIG

    def test_frozen(self) -> None:
        """Configs are immutable."""
        config = SortConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.min_name_length = 5  # type: ignore[misc]

    @pytest.mark.parametrize("length", [0, -1])
    def test_min_name_length_must_be_positive(self, length: int) -> None:
        """Non-positive lengths are rejected at construction."""
        with pytest.raises(ValueError, match="min_name_length must be positive"):
            SortConfig(min_name_length=length)

    def test_strategy_from_string(self) -> None:
        """Strategy names are coerced to RootDetection."""
        config = SortConfig(root_detection="subtree-delta")  # type: ignore[arg-type]
        assert config.root_detection is RootDetection.SUBTREE_DELTA

    def test_unknown_strategy(self) -> None:
        """Unknown strategy names are rejected."""
        with pytest.raises(ValueError, match="unknown root_detection strategy"):
            SortConfig(root_detection="bfs")  # type: ignore[arg-type]

    def test_root_detection_values(self) -> None:
        """StrEnum members compare equal to their names."""
        assert RootDetection.COMPONENTS == "components"
        assert str(RootDetection.SUBTREE_DELTA) == "subtree-delta"
