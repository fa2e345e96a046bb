"""Terminal condition systems.

``goal_system`` sets the ``WON`` outcome when the player enters the goal
cell. ``outcome_message_system`` attaches the single human-readable
sentence for whichever terminal outcome was reached.
"""

from dataclasses import replace

from grid_minefield.components import Position
from grid_minefield.state import State
from grid_minefield.types import Outcome, Tile
from grid_minefield.utils.grid import tile_at
from grid_minefield.utils.terminal import OUTCOME_MESSAGES, is_terminal_state


def goal_system(state: State, next_pos: Position) -> State:
    """Set ``WON`` if ``next_pos`` is the goal.

    Skips evaluation if the state is already terminal.
    """
    if is_terminal_state(state):
        return state
    if tile_at(state, next_pos) == Tile.GOAL:
        return replace(state, outcome=Outcome.WON)
    return state


def outcome_message_system(state: State) -> State:
    """Set the outcome sentence on terminal states (idempotent)."""
    if not is_terminal_state(state):
        return state
    message = OUTCOME_MESSAGES[state.outcome]
    if state.message == message:
        return state
    return replace(state, message=message)
