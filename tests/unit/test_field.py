# tests/unit/test_field.py

import pytest
from pyrsistent import pmap

from grid_minefield.components import Field, Position, make_field
from grid_minefield.renderer.text import field_from_text
from grid_minefield.types import Tile
from tests.test_utils import SCENARIO_LAYOUT


def test_in_bounds() -> None:
    field = make_field(2, 3)
    assert field.in_bounds(Position(1, 2))
    assert not field.in_bounds(Position(2, 0))
    assert not field.in_bounds(Position(0, 3))
    assert not field.in_bounds(Position(-1, 0))
    assert not field.in_bounds(Position(0, -1))


def test_tile_at_out_of_bounds_raises() -> None:
    field = make_field(2, 2)
    with pytest.raises(IndexError):
        field.tile_at(Position(0, 2))
    with pytest.raises(IndexError):
        field.tile_at(Position(-1, 0))


def test_positions_are_row_major() -> None:
    field = make_field(2, 2)
    assert list(field.positions()) == [
        Position(0, 0),
        Position(0, 1),
        Position(1, 0),
        Position(1, 1),
    ]


def test_goal_property() -> None:
    assert field_from_text(SCENARIO_LAYOUT).goal == Position(1, 1)
    with pytest.raises(ValueError):
        _ = make_field(2, 2).goal


def test_with_tile_returns_new_field() -> None:
    field = make_field(2, 2)
    changed = field.with_tile(Position(1, 1), Tile.HAZARD)
    assert changed.tile_at(Position(1, 1)) == Tile.HAZARD
    assert field.tile_at(Position(1, 1)) == Tile.EMPTY
    with pytest.raises(IndexError):
        field.with_tile(Position(5, 5), Tile.HAZARD)


def test_tiles_must_cover_every_cell() -> None:
    with pytest.raises(ValueError):
        Field(3, 3, pmap())
    partial = make_field(2, 2).tiles.remove(Position(1, 1))
    with pytest.raises(ValueError):
        Field(2, 2, partial)
    extra = make_field(2, 2).tiles.set(Position(2, 0), Tile.EMPTY)
    with pytest.raises(ValueError):
        Field(2, 2, extra)
    assert Field(2, 2, make_field(2, 2).tiles).tile_at(Position(1, 1)) == Tile.EMPTY
