"""State reducer and step orchestration.

This module wires the traversal systems together to implement a single
*turn* given a player intent. :func:`step` is the only public entry point
for gameplay progression and is pure: it returns a *new*
:class:`grid_minefield.state.State`.

Ordering:

1. ``boundary_system``: off-grid candidates end the game as ``EXITED``
   before any tile is looked up.
2. ``hazard_system``: a hazard ends the game as ``FELL``.
3. ``goal_system``: the goal ends the game as ``WON``.
4. ``movement_system``: any other cell is entered and marked visited.
5. The turn counter advances and the outcome sentence is attached.
"""

import logging
from dataclasses import replace
from typing import Optional

from grid_minefield.actions import Action, MOVE_ACTIONS
from grid_minefield.state import State
from grid_minefield.types import Outcome
from grid_minefield.systems.boundary import boundary_system
from grid_minefield.systems.hazard import hazard_system
from grid_minefield.systems.movement import movement_system
from grid_minefield.systems.terminal import goal_system, outcome_message_system
from grid_minefield.utils.terminal import INVALID_INPUT_MESSAGE, is_terminal_state

logger = logging.getLogger(__name__)


def step(state: State, action: Optional[Action]) -> State:
    """Advance the session by one intent.

    Args:
        state (State): Previous immutable session state.
        action (Action | None): Player intent. ``None`` stands for input that
            could not be recognized as a direction.

    Returns:
        State: Next state. A terminal input state is returned unchanged. An
            unrecognized intent leaves the position, turn and outcome
            untouched and only sets ``message`` to the input hint.
    """
    if is_terminal_state(state):
        return state

    if action is None or action not in MOVE_ACTIONS:
        logger.debug("Ignoring unrecognized intent %r", action)
        return replace(state, message=INVALID_INPUT_MESSAGE)

    next_pos = state.move_fn(state, action)
    state = replace(state, message=None)

    state = boundary_system(state, next_pos)
    state = hazard_system(state, next_pos)
    state = goal_system(state, next_pos)
    state = movement_system(state, next_pos)

    return _after_step(state, action)


def _after_step(state: State, action: Action) -> State:
    """Finalize an accepted intent: bump the turn and report any outcome."""
    state = replace(state, turn=state.turn + 1)
    state = outcome_message_system(state)
    if is_terminal_state(state):
        logger.info("Session ended with %s after %d turns", state.outcome, state.turn)
    else:
        logger.debug("Turn %d: %s to %s", state.turn, action, state.position)
    return state


def forfeit(state: State) -> State:
    """End a playing session as if the player had walked off the field."""
    if is_terminal_state(state):
        return state
    logger.info("Session forfeited after %d turns", state.turn)
    return outcome_message_system(replace(state, outcome=Outcome.EXITED))
