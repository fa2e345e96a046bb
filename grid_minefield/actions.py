"""Action enumerations.

Defines the human readable :class:`Action` (string enum) used internally
and a stable integer :class:`GymAction` mapping for Gymnasium compatibility.

``MOVE_ACTIONS`` is the canonical ordered list of movement actions.
``parse_action`` turns a line typed at the console into an ``Action``.
"""

from enum import IntEnum, StrEnum, auto
from typing import Dict, Optional


class Action(StrEnum):
    """String enum of player intents.

    Members:
        UP, DOWN, LEFT, RIGHT: Movement directions.
    """

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()


MOVE_ACTIONS = [Action.UP, Action.DOWN, Action.LEFT, Action.RIGHT]


class GymAction(IntEnum):
    """Stable integer mapping for integration with Gymnasium ``Discrete`` spaces."""

    UP = 0  # start at 0 for explicitness
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()


ACTION_KEYS: Dict[str, Action] = {
    "u": Action.UP,
    "d": Action.DOWN,
    "l": Action.LEFT,
    "r": Action.RIGHT,
}


def parse_action(text: str) -> Optional[Action]:
    """Map a typed command to an ``Action``.

    Case-insensitive and whitespace tolerant. Returns ``None`` for anything
    that is not one of ``u``, ``d``, ``l``, ``r``.
    """
    return ACTION_KEYS.get(text.strip().lower())
