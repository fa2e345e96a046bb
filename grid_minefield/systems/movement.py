"""Player movement system.

Moves the player onto ``next_pos`` and records it in the visited layer.
Only runs while the session is still ``PLAYING``: boundary, hazard and goal
systems run first and leave the position untouched when they end the game.
"""

from dataclasses import replace

from grid_minefield.components import Position
from grid_minefield.state import State
from grid_minefield.utils.grid import is_in_bounds
from grid_minefield.utils.terminal import is_terminal_state


def movement_system(state: State, next_pos: Position) -> State:
    """Move the player one tile.

    Args:
        state (State): Current state.
        next_pos (Position): Destination, an ``EMPTY`` or ``VISITED`` cell.

    Returns:
        State: Same state if terminal or out of bounds, otherwise updated
        with the new position added to ``visited``.
    """
    if is_terminal_state(state) or not is_in_bounds(state, next_pos):
        return state
    return replace(state, position=next_pos, visited=state.visited.add(next_pos))
