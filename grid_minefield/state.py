"""Core immutable ``State`` dataclass.

This module defines the frozen :class:`State` object that represents one
game session at a single turn. :func:`grid_minefield.step.step` is a pure
function that takes a previous ``State`` plus an ``Action`` and returns a
*new* ``State``; no mutation happens in-place.

Design notes:

* The terrain (:class:`grid_minefield.components.Field`) is fixed at
  generation time and shared between validation and play without aliasing
  risk, since neither side can modify it.
* Player progress is a separate persistent set (``visited``). The two layers
  are combined only by :meth:`State.cell_at`, which renderers use.
* ``outcome`` is ``PLAYING`` until one terminal outcome is reached. The
  reducer short-circuits on terminal states.
"""

from dataclasses import dataclass
from typing import Any, Optional
from pyrsistent import PMap, PSet, pmap, pset

from grid_minefield.components import Field, Position, START
from grid_minefield.types import MoveFn, Outcome, Tile, TERMINAL_OUTCOMES


@dataclass(frozen=True)
class State:
    """Immutable minefield session state.

    Attributes:
        field (Field): Terrain layer.
        move_fn (MoveFn): Movement candidate function used to resolve intents.
        position (Position): Current player cell.
        visited (PSet[Position]): Cells the player has occupied, start included.
        outcome (Outcome): Traversal phase.
        turn (int): Number of accepted move intents.
        message (str | None): Last informational or terminal message.
        seed (int | None): Seed the field was generated from, if any.
    """

    field: Field
    move_fn: "MoveFn"
    position: Position = START
    visited: PSet[Position] = pset([START])

    # Status
    outcome: Outcome = Outcome.PLAYING
    turn: int = 0
    message: Optional[str] = None

    # RNG
    seed: Optional[int] = None

    @property
    def rows(self) -> int:
        return self.field.rows

    @property
    def columns(self) -> int:
        return self.field.columns

    @property
    def is_terminal(self) -> bool:
        return self.outcome in TERMINAL_OUTCOMES

    def cell_at(self, pos: Position) -> Tile:
        """Tile at ``pos`` with the visited layer applied.

        Raises:
            IndexError: If ``pos`` lies outside the field.
        """
        tile = self.field.tile_at(pos)
        if tile == Tile.EMPTY and pos in self.visited:
            return Tile.VISITED
        return tile

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse serialization of populated fields.

        Returns:
            PMap[str, Any]: Field name to value for every field that is not
            ``None``; the terrain is summarized by its dimensions.
        """
        description: PMap[str, Any] = pmap()
        for name in self.__dataclass_fields__:
            value = getattr(self, name)
            if value is None:
                continue
            if name == "field":
                value = pmap({"rows": self.rows, "columns": self.columns})
            description = description.set(name, value)
        return description


def create_initial_state(
    field: Field, move_fn: MoveFn, seed: Optional[int] = None
) -> State:
    """Start a session on ``field`` with the player on the start cell."""
    return State(field=field, move_fn=move_fn, seed=seed)
