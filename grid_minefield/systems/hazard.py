from dataclasses import replace

from grid_minefield.components import Position
from grid_minefield.state import State
from grid_minefield.types import Outcome, Tile
from grid_minefield.utils.grid import tile_at
from grid_minefield.utils.terminal import is_terminal_state


def hazard_system(state: State, next_pos: Position) -> State:
    """Stepping onto a hazard ends the session as ``FELL``."""
    if is_terminal_state(state):
        return state
    if tile_at(state, next_pos) == Tile.HAZARD:
        return replace(state, outcome=Outcome.FELL)
    return state
