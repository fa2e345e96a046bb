"""Grid helpers shared by systems."""

from grid_minefield.components import Position
from grid_minefield.state import State
from grid_minefield.types import Tile


def is_in_bounds(state: State, pos: Position) -> bool:
    """Check if ``pos`` lies within the field's declared size."""
    return state.field.in_bounds(pos)


def tile_at(state: State, pos: Position) -> Tile:
    """Terrain tile at an in-bounds ``pos`` (visited layer ignored)."""
    return state.field.tile_at(pos)
