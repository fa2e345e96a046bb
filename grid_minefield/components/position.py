"""Position component.

Immutable integer grid coordinates. The player's current cell lives in
``State.position``; the visited layer is a set of these.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        row: Row index (0 at top).
        column: Column index (0 at left).
    """

    row: int
    column: int


START = Position(0, 0)
"""Every field starts the player in the upper left corner."""
