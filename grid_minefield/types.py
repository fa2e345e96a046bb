"""Common type aliases and enumerations.

``MoveFn`` is the pluggable movement extension point stored in the
``State``. ``Tile`` tags the terrain cells and ``Outcome`` is the traversal
state machine's phase.
"""

from enum import StrEnum, auto
from typing import Callable, TYPE_CHECKING


# Forward declaration for MoveFn typing to avoid circular imports:
if TYPE_CHECKING:
    from grid_minefield.state import State
    from grid_minefield.actions import Action
    from grid_minefield.components import Position

MoveFn = Callable[["State", "Action"], "Position"]


class Tile(StrEnum):
    """Cell tags. Exactly one per in-bounds cell.

    ``VISITED`` marks the start cell on a freshly generated field and any
    cell the player has occupied when the field is read through a state.
    """

    EMPTY = auto()
    HAZARD = auto()
    GOAL = auto()
    VISITED = auto()


class Outcome(StrEnum):
    """Traversal phase. ``PLAYING`` is initial; all others are terminal."""

    PLAYING = auto()
    EXITED = auto()
    FELL = auto()
    WON = auto()


TERMINAL_OUTCOMES = frozenset({Outcome.EXITED, Outcome.FELL, Outcome.WON})
