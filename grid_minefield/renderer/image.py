"""RGBA image rendering.

Each cell becomes a flat colored square; the player's cell gets an outline.
The frame is assembled as a NumPy array and handed to Pillow.
"""

from typing import Dict, Optional, Tuple

import numpy as np
from PIL import Image

from grid_minefield.components import Position
from grid_minefield.state import State
from grid_minefield.types import Tile

DEFAULT_RESOLUTION = 320
DEFAULT_OUTLINE_PERCENT = 0.1

Color = Tuple[int, int, int, int]
ColorMap = Dict[Tile, Color]

DEFAULT_COLOR_MAP: ColorMap = {
    Tile.EMPTY: (96, 160, 72, 255),
    Tile.HAZARD: (40, 32, 24, 255),
    Tile.GOAL: (232, 192, 48, 255),
    Tile.VISITED: (196, 176, 140, 255),
}

PLAYER_COLOR: Color = (200, 40, 40, 255)


def cell_size_for(state: State, resolution: int) -> int:
    """Square cell size so that ``columns`` cells fit into ``resolution``."""
    return max(1, resolution // state.columns)


def render(
    state: State,
    resolution: int = DEFAULT_RESOLUTION,
    color_map: Optional[ColorMap] = None,
    outline_percent: float = DEFAULT_OUTLINE_PERCENT,
) -> Image.Image:
    """Renders the state as a PIL Image of ``rows * cell`` x ``columns * cell``."""
    if color_map is None:
        color_map = DEFAULT_COLOR_MAP
    cell_size = cell_size_for(state, resolution)

    cells = np.zeros((state.rows, state.columns, 4), dtype=np.uint8)
    for row in range(state.rows):
        for column in range(state.columns):
            cells[row, column] = color_map[state.cell_at(Position(row, column))]

    pixels = np.repeat(np.repeat(cells, cell_size, axis=0), cell_size, axis=1)

    if state.field.in_bounds(state.position):
        border = max(1, int(cell_size * outline_percent))
        y0 = state.position.row * cell_size
        x0 = state.position.column * cell_size
        y1, x1 = y0 + cell_size, x0 + cell_size
        pixels[y0 : y0 + border, x0:x1] = PLAYER_COLOR
        pixels[y1 - border : y1, x0:x1] = PLAYER_COLOR
        pixels[y0:y1, x0 : x0 + border] = PLAYER_COLOR
        pixels[y0:y1, x1 - border : x1] = PLAYER_COLOR

    return Image.fromarray(pixels)


class ImageRenderer:
    resolution: int
    color_map: ColorMap
    outline_percent: float

    def __init__(
        self,
        resolution: int = DEFAULT_RESOLUTION,
        color_map: Optional[ColorMap] = None,
        outline_percent: float = DEFAULT_OUTLINE_PERCENT,
    ):
        self.resolution = resolution
        self.color_map = color_map or DEFAULT_COLOR_MAP
        self.outline_percent = outline_percent

    def render(self, state: State) -> Image.Image:
        return render(
            state,
            resolution=self.resolution,
            color_map=self.color_map,
            outline_percent=self.outline_percent,
        )
