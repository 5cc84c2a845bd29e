"""Intensive property tests for the sort pipeline.

Marked ``fuzz``: skipped in normal runs, run with ``pytest -m fuzz``.
"""

import pytest
from hypothesis import HealthCheck, event, given, settings
from hypothesis import strategies as st

from tsortengine import CyclicDependencyError, MultiError, sort
from tsortengine.analysis.graph import build_vertices, topological_sort

pytestmark = pytest.mark.fuzz


@st.composite
def random_relations(draw: st.DrawFn) -> dict[int, int]:
    """Arbitrary child -> parent mappings over a small key space."""
    size = draw(st.integers(min_value=1, max_value=40))
    return draw(
        st.dictionaries(
            st.integers(min_value=0, max_value=size),
            st.integers(min_value=0, max_value=size),
            max_size=size,
        )
    )


def _has_cycle(relations: dict[int, int]) -> bool:
    # Every child has one parent: follow parents until a repeat or the top.
    for start in relations:
        seen = {start}
        key = start
        while key in relations:
            key = relations[key]
            if key in seen:
                return True
            seen.add(key)
    return False


@given(relations=random_relations())
@settings(max_examples=1500, suppress_health_check=[HealthCheck.too_slow])
def test_cycles_detected_exactly_when_present(relations: dict[int, int]) -> None:
    """PROPERTY: The sorter finds a cycle iff following parents repeats a key."""
    result = topological_sort(build_vertices(relations))
    expected = _has_cycle(relations)
    event(f"cyclic={expected}")
    assert result.has_cycles == expected


@given(relations=random_relations())
@settings(max_examples=1500, suppress_health_check=[HealthCheck.too_slow])
def test_sort_either_orders_or_raises(relations: dict[int, int]) -> None:
    """PROPERTY: Success yields a valid order; cycles always raise."""
    try:
        order = sort(relations)
    except MultiError as err:
        assert err
        assert err.matches(CyclicDependencyError) == _has_cycle(relations)
        return
    position = {key: i for i, key in enumerate(order)}
    assert len(position) == len(order)
    for child, parent in relations.items():
        assert position[parent] < position[child]
