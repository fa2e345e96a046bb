"""Terminal condition helpers and outcome sentences."""

from typing import Dict

from grid_minefield.state import State
from grid_minefield.types import Outcome

INVALID_INPUT_MESSAGE = (
    "Invalid input. Type U for UP, D for DOWN, L for LEFT, or R for RIGHT"
)

OUTCOME_MESSAGES: Dict[Outcome, str] = {
    Outcome.EXITED: "You have left the field. Come back and try again later.",
    Outcome.FELL: "You fell in a hole! You lose!",
    Outcome.WON: "You won! You found the hat!",
}


def is_terminal_state(state: State) -> bool:
    """Return True once the session has reached a terminal outcome."""
    return state.is_terminal


def is_win(state: State) -> bool:
    return state.outcome == Outcome.WON


def is_loss(state: State) -> bool:
    """Falling and leaving the field both count as a loss."""
    return state.outcome in (Outcome.FELL, Outcome.EXITED)
