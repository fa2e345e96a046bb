"""Terrain layer of a minefield.

A :class:`Field` is fixed once generated: tiles never change after
construction. Player progress is tracked separately in
``State.visited`` and only combined with the terrain when a state is
inspected or rendered.
"""

from dataclasses import dataclass
from typing import Iterator

from pyrsistent import PMap, pmap

from grid_minefield.components.position import Position
from grid_minefield.types import Tile


@dataclass(frozen=True)
class Field:
    """Immutable ``rows`` x ``columns`` grid of tiles.

    Attributes:
        rows (int): Number of rows.
        columns (int): Number of columns.
        tiles (PMap[Position, Tile]): Tile per in-bounds position.

    Raises:
        ValueError: If ``tiles`` does not hold exactly one tile per cell.
    """

    rows: int
    columns: int
    tiles: PMap[Position, Tile]

    def __post_init__(self) -> None:
        if self.rows < 1 or self.columns < 1:
            raise ValueError(f"Field size must be at least 1x1, got {self.rows}x{self.columns}")
        missing = [pos for pos in self.positions() if pos not in self.tiles]
        if missing or len(self.tiles) != self.rows * self.columns:
            raise ValueError(
                f"Tiles must cover every cell of a {self.rows}x{self.columns} field exactly"
            )

    def in_bounds(self, pos: Position) -> bool:
        """Explicit bounds check against the declared size."""
        return 0 <= pos.row < self.rows and 0 <= pos.column < self.columns

    def tile_at(self, pos: Position) -> Tile:
        if not self.in_bounds(pos):
            raise IndexError(
                f"Out of bounds: {(pos.row, pos.column)} for field {self.rows}x{self.columns}"
            )
        return self.tiles[pos]

    def positions(self) -> Iterator[Position]:
        """Yield every position in row-major order."""
        for row in range(self.rows):
            for column in range(self.columns):
                yield Position(row, column)

    def positions_of(self, tile: Tile) -> list[Position]:
        return [pos for pos in self.positions() if self.tiles.get(pos) == tile]

    @property
    def goal(self) -> Position:
        """The single goal cell.

        Raises:
            ValueError: If the field does not hold exactly one goal.
        """
        goals = self.positions_of(Tile.GOAL)
        if len(goals) != 1:
            raise ValueError(f"Field must hold exactly one goal, found {len(goals)}")
        return goals[0]

    def with_tile(self, pos: Position, tile: Tile) -> "Field":
        """Return a copy with ``pos`` set to ``tile``."""
        self.tile_at(pos)
        return Field(rows=self.rows, columns=self.columns, tiles=self.tiles.set(pos, tile))


def make_field(rows: int, columns: int, fill: Tile = Tile.EMPTY) -> Field:
    """Field filled with ``fill`` everywhere (no start marker, no goal)."""
    tiles = {
        Position(row, column): fill for row in range(rows) for column in range(columns)
    }
    return Field(rows=rows, columns=columns, tiles=pmap(tiles))
