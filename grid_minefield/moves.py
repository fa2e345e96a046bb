"""Built-in movement functions.

A *move function* maps (state, action) -> the candidate ``Position`` the
player attempts to enter. Candidates are not clamped: a step off the edge
yields a position with a negative or too-large coordinate, which the
boundary system turns into a forfeit.

Contract (``MoveFn``):

* Must not mutate ``State``.
* Must return exactly one ``Position``.
"""

from typing import Dict, Tuple
from grid_minefield.actions import Action
from grid_minefield.components import Position
from grid_minefield.state import State
from grid_minefield.types import MoveFn

DELTAS: Dict[Action, Tuple[int, int]] = {
    Action.UP: (-1, 0),
    Action.DOWN: (1, 0),
    Action.LEFT: (0, -1),
    Action.RIGHT: (0, 1),
}


def default_move_fn(state: State, action: Action) -> Position:
    """Single-tile cardinal step without bounds wrapping."""
    pos = state.position
    d_row, d_column = DELTAS[action]
    return Position(pos.row + d_row, pos.column + d_column)


# Move function registry for per-session assignment
MOVE_FN_REGISTRY: Dict[str, MoveFn] = {
    "default": default_move_fn,
}
"""Registry of built-in movement function names to callables."""
