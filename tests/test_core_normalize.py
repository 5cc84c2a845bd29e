"""Tests for core.normalize: case folding and name validation of relations."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from tests.strategies import invalid_names, valid_names
from tsortengine.core.normalize import canonical_key, normalize_relations
from tsortengine.diagnostics import InvalidNameError, MultiError


class TestNormalizeRelations:
    """Unit tests for normalize_relations."""

    def test_keys_are_casefolded(self) -> None:
        """Relations are rewritten into the canonical key space."""
        normalized = normalize_relations({"Barbara": "Nick", "Nick": "Sophie"})
        assert normalized.relations == {"barbara": "nick", "nick": "sophie"}

    def test_first_spelling_wins(self) -> None:
        """The side table keeps the first spelling encountered."""
        normalized = normalize_relations({"jONas": "Jonas"})
        assert normalized.relations == {"jonas": "jonas"}
        assert normalized.names == {"jonas": "jONas"}
        assert normalized.original("jonas") == "jONas"

    def test_folding_collision_keeps_last_relation(self) -> None:
        """Two children folding to one key keep the later relation."""
        normalized = normalize_relations({"Ruby": "Nick", "RUBY": "Jonas"})
        assert normalized.relations == {"ruby": "jonas"}
        assert normalized.names["ruby"] == "Ruby"

    def test_casefold_beyond_lower(self) -> None:
        """Folding handles letters that lower() keeps distinct."""
        assert canonical_key("Straße") == canonical_key("STRASSE")

    def test_empty(self) -> None:
        """Empty input is valid."""
        normalized = normalize_relations({})
        assert normalized.relations == {}
        assert normalized.names == {}

    def test_invalid_names_collected(self) -> None:
        """Every invalid name is reported, in encounter order."""
        with pytest.raises(MultiError) as exc_info:
            normalize_relations({"J0nas": "Nick", "Sophie": "X"})
        errors = list(exc_info.value)
        assert [type(e) for e in errors] == [InvalidNameError, InvalidNameError]
        assert [e.name for e in errors] == ["J0nas", "X"]
        assert str(exc_info.value) == 'invalid name: "J0nas" (and 1 other error)'

    def test_invalid_name_reported_once(self) -> None:
        """A repeated invalid name is validated once."""
        with pytest.raises(MultiError) as exc_info:
            normalize_relations({"Nick": "X", "Sophie": "X"})
        assert [e.name for e in exc_info.value] == ["X"]

    def test_min_length_configurable(self) -> None:
        """Single letters pass with min_name_length=1."""
        normalized = normalize_relations({"B": "A"}, min_name_length=1)
        assert normalized.relations == {"b": "a"}

    @given(
        names=st.lists(valid_names, min_size=2, max_size=6, unique_by=str.casefold),
        bad=st.lists(invalid_names, min_size=1, max_size=4, unique_by=str.casefold),
    )
    def test_all_invalid_names_surface(self, names: list[str], bad: list[str]) -> None:
        """PROPERTY: Each distinct invalid name yields exactly one error."""
        data = {name: names[0] for name in names[1:]}
        for i, name in enumerate(bad):
            data[name] = names[i % len(names)]
        with pytest.raises(MultiError) as exc_info:
            normalize_relations(data)
        assert exc_info.value.matches(InvalidNameError)
        assert [e.name for e in exc_info.value] == bad
