"""Plain text rendering.

Glyphs:

* ``*``: start cell and the player's path
* ``O``: hazard (a hole)
* ``^``: goal (the hat)
* ``░``: untouched field
"""

from typing import Dict, Iterable, Union

from pyrsistent import pmap

from grid_minefield.components import Field, Position
from grid_minefield.state import State
from grid_minefield.types import Tile

GLYPHS: Dict[Tile, str] = {
    Tile.VISITED: "*",
    Tile.HAZARD: "O",
    Tile.GOAL: "^",
    Tile.EMPTY: "░",
}

GLYPH_TO_TILE: Dict[str, Tile] = {glyph: tile for tile, glyph in GLYPHS.items()}


def render_text(source: Union[State, Field]) -> str:
    """Render a state (terrain plus visited layer) or bare terrain.

    Returns:
        str: ``rows`` lines joined by newlines, no trailing newline.
    """
    if isinstance(source, State):
        field = source.field
        cell_at = source.cell_at
    else:
        field = source
        cell_at = source.tile_at
    lines = []
    for row in range(field.rows):
        lines.append(
            "".join(GLYPHS[cell_at(Position(row, column))] for column in range(field.columns))
        )
    return "\n".join(lines)


def field_from_text(lines: Union[str, Iterable[str]]) -> Field:
    """Build a field from glyph rows, the inverse of :func:`render_text`.

    Args:
        lines: Either a newline separated string or an iterable of rows.
            Blank lines are ignored.

    Raises:
        ValueError: On unknown glyphs, rows of different lengths, an empty
            layout, or a goal count other than one.
    """
    if isinstance(lines, str):
        lines = lines.splitlines()
    rows = [line for line in (raw.strip() for raw in lines) if line]
    if not rows:
        raise ValueError("Field layout is empty")

    columns = len(rows[0])
    tiles: dict[Position, Tile] = {}
    for r, line in enumerate(rows):
        if len(line) != columns:
            raise ValueError(
                f"Row {r} has {len(line)} cells, expected {columns}"
            )
        for c, glyph in enumerate(line):
            if glyph not in GLYPH_TO_TILE:
                raise ValueError(f"Unknown glyph {glyph!r} at {(r, c)}")
            tiles[Position(r, c)] = GLYPH_TO_TILE[glyph]

    goals = sum(1 for tile in tiles.values() if tile == Tile.GOAL)
    if goals != 1:
        raise ValueError(f"Field must hold exactly one goal, found {goals}")
    return Field(rows=len(rows), columns=columns, tiles=pmap(tiles))
