"""Boundary system.

Leaving the field is a legitimate outcome rather than an error: a candidate
with a negative coordinate or beyond the declared size ends the session as
``EXITED``. The bounds are checked explicitly before any tile lookup.
"""

from dataclasses import replace

from grid_minefield.components import Position
from grid_minefield.state import State
from grid_minefield.types import Outcome
from grid_minefield.utils.grid import is_in_bounds
from grid_minefield.utils.terminal import is_terminal_state


def boundary_system(state: State, next_pos: Position) -> State:
    if is_terminal_state(state):
        return state
    if not is_in_bounds(state, next_pos):
        return replace(state, outcome=Outcome.EXITED)
    return state
