# tests/unit/test_components.py

import pytest
from pyrsistent import pmap

from portal_intel.components import Field, Portal, Position
from portal_intel.state import State, make_state
from tests.test_utils import endpoint, make_link


def test_position_equality_is_exact() -> None:
    assert Position(10000000, 20000000) == Position(10000000, 20000000)
    assert Position(10000000, 20000000) != Position(10000001, 20000000)
    assert hash(Position(1, 2)) == hash(Position(1, 2))


def test_position_to_latlng() -> None:
    assert Position(10000000, 20000000).to_latlng() == (10.0, 20.0)
    assert Position(-33868800, 151209300).to_latlng() == (-33.8688, 151.2093)


def test_position_from_latlng_rounds() -> None:
    assert Position.from_latlng(51.5007292, -0.1246254) == Position(51500729, -124625)


def test_field_requires_three_points() -> None:
    with pytest.raises(ValueError):
        Field(points=(endpoint("A", (1, 1)), endpoint("B", (2, 2))))  # type: ignore[arg-type]


def test_field_points_stored_as_tuple() -> None:
    field = Field(points=[endpoint("A", (1, 1)), endpoint("B", (2, 2)), endpoint("C", (3, 3))])  # type: ignore[arg-type]
    assert isinstance(field.points, tuple)
    assert hash(field) == hash(
        Field(points=(endpoint("A", (1, 1)), endpoint("B", (2, 2)), endpoint("C", (3, 3))))
    )


def test_make_state_builds_parallel_stores() -> None:
    state = make_state(
        portals=[("A", Position(1, 1), Portal(res_count=3))],
        links={"L": make_link(("A", (1, 1)), ("B", (2, 2)))},
    )
    assert state.portal["A"].res_count == 3
    assert state.position["A"] == Position(1, 1)
    assert "L" in state.link
    assert len(state.field) == 0


def test_description_skips_empty_stores() -> None:
    state = State(portal=pmap({"A": Portal()}), position=pmap({"A": Position(0, 0)}))
    assert set(state.description.keys()) == {"portal", "position"}
    assert State().description == pmap()
