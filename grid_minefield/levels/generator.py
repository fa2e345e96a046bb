"""Random candidate fields.

:func:`generate_candidate` produces a field that honours the placement
rules but has *not* been checked for solvability; see
:mod:`grid_minefield.levels.minefield` for the validated loop.

Placement rules:

* ``(0, 0)`` is the start cell and holds ``VISITED``.
* The goal may only appear past the midpoint of either axis and never in
  the first row or column. Each eligible cell rolls a 1 in ``GOAL_ODDS``
  chance until one hits.
* Every other cell is a hazard with probability ``hazard_chance / 100``.
* Without a hit during the scan the goal is forced into the bottom right
  corner, so exactly one goal always exists.
"""

import logging
import random

from pyrsistent import pmap

from grid_minefield.components import Field, Position, START
from grid_minefield.types import Tile

logger = logging.getLogger(__name__)

GOAL_ODDS = 7


def is_goal_eligible(rows: int, columns: int, pos: Position) -> bool:
    """Whether the scan may roll for the goal at ``pos``."""
    past_midpoint = pos.row > rows / 2 or pos.column > columns / 2
    return past_midpoint and pos.row != 0 and pos.column != 0


def generate_candidate(
    rows: int, columns: int, hazard_chance: int, rng: random.Random
) -> Field:
    """Generate one unvalidated field.

    Args:
        rows (int): Number of rows, at least 1.
        columns (int): Number of columns, at least 1.
        hazard_chance (int): Percentage in ``[0, 100]`` for each non-goal cell.
        rng (random.Random): Source of randomness.

    Returns:
        Field: Candidate with exactly one ``GOAL`` and ``VISITED`` at the start.
    """
    tiles: dict[Position, Tile] = {}
    goal_placed = False

    for row in range(rows):
        for column in range(columns):
            pos = Position(row, column)
            if pos == START:
                tiles[pos] = Tile.VISITED
                continue

            if not goal_placed and is_goal_eligible(rows, columns, pos):
                if rng.randrange(GOAL_ODDS) == 0:
                    tiles[pos] = Tile.GOAL
                    goal_placed = True
                    continue

            if rng.randrange(100) < hazard_chance:
                tiles[pos] = Tile.HAZARD
            else:
                tiles[pos] = Tile.EMPTY

    if not goal_placed:
        tiles[Position(rows - 1, columns - 1)] = Tile.GOAL

    logger.debug(
        "Generated %dx%d candidate (goal forced to corner: %s)",
        rows,
        columns,
        not goal_placed,
    )
    return Field(rows=rows, columns=columns, tiles=pmap(tiles))
