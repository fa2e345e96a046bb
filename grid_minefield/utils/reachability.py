"""Breadth-first graph search over a field.

:func:`is_reachable` is the acceptance test for generated candidates. It
floods from the start cell across ``EMPTY`` cells and reports whether the
goal turns up as a neighbour. Neighbours in the last row or last column are
never considered, neither for expansion nor as the goal, so only goals
strictly inside that boundary validate.

:func:`shortest_path` is an ordinary full-bounds BFS used for hints.
"""

from collections import deque
from typing import Iterator, Optional

from grid_minefield.components import Field, Position, START
from grid_minefield.types import Tile


def neighbors(pos: Position) -> Iterator[Position]:
    """Yield orthogonal neighbours in search order: down, right, up, left.

    Up and left are only produced while the coordinate stays non-negative.
    Upper bounds are left to the caller.
    """
    yield Position(pos.row + 1, pos.column)
    yield Position(pos.row, pos.column + 1)
    if pos.row > 0:
        yield Position(pos.row - 1, pos.column)
    if pos.column > 0:
        yield Position(pos.row, pos.column - 1)


def is_reachable(field: Field) -> bool:
    """Return True if the goal can be reached from the start cell.

    The search works on its own visited set; ``field`` is immutable and
    therefore untouched.
    """
    queue: deque[Position] = deque([START])
    visited: set[Position] = set()

    while queue:
        pos = queue.popleft()
        visited.add(pos)
        for nxt in neighbors(pos):
            if nxt.row >= field.rows - 1 or nxt.column >= field.columns - 1:
                continue
            tile = field.tiles[nxt]
            if tile == Tile.GOAL:
                return True
            if tile == Tile.EMPTY and nxt not in visited:
                queue.append(nxt)
    return False


def shortest_path(
    field: Field, start: Position = START, goal: Optional[Position] = None
) -> list[Position]:
    """Finds the shortest path from start to goal avoiding hazards.

    Returns the path including both endpoints, or [] if unreachable. ``goal``
    defaults to the field's goal cell.
    """
    if goal is None:
        goal = field.goal
    if start == goal:
        return [start]
    queue: deque[Position] = deque([start])
    prev: dict[Position, Position] = {}
    seen: set[Position] = {start}

    while queue:
        pos = queue.popleft()
        for nxt in neighbors(pos):
            if not field.in_bounds(nxt) or nxt in seen:
                continue
            if field.tiles[nxt] == Tile.HAZARD:
                continue
            prev[nxt] = pos
            seen.add(nxt)
            if nxt == goal:
                queue.clear()
                break
            if field.tiles[nxt] != Tile.GOAL:
                queue.append(nxt)

    # Reconstruct path
    path: list[Position] = []
    if goal in seen:
        p = goal
        while p != start:
            path.append(p)
            p = prev[p]
        path.append(start)
        path.reverse()
    return path
