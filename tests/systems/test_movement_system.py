from dataclasses import replace

from pyrsistent import pset

from grid_minefield.components import Position
from grid_minefield.systems.movement import movement_system
from grid_minefield.types import Outcome, Tile
from tests.test_utils import make_state


def test_move_marks_cell_visited() -> None:
    state = make_state()
    new_state = movement_system(state, Position(0, 1))
    assert new_state.position == Position(0, 1)
    assert new_state.visited == pset([Position(0, 0), Position(0, 1)])
    assert new_state.cell_at(Position(0, 1)) == Tile.VISITED
    # terrain is a separate layer
    assert new_state.field is state.field
    assert state.cell_at(Position(0, 1)) == Tile.EMPTY


def test_move_back_onto_visited_cell() -> None:
    state = make_state(position=(0, 1))
    new_state = movement_system(state, Position(0, 0))
    assert new_state.position == Position(0, 0)
    assert new_state.visited == state.visited


def test_no_move_when_terminal() -> None:
    state = replace(make_state(), outcome=Outcome.FELL)
    assert movement_system(state, Position(0, 1)) is state


def test_no_move_out_of_bounds() -> None:
    state = make_state()
    assert movement_system(state, Position(0, 5)) is state
