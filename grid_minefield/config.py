"""Session configuration.

A frozen :class:`FieldConfig` carries the construction parameters that are
supplied once at program start. Defaults mirror the classic game: a 10x10
field with 45% hazard density.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from grid_minefield.levels.minefield import (
    DEFAULT_COLUMNS,
    DEFAULT_HAZARD_CHANCE,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_ROWS,
    validate_parameters,
)


@dataclass(frozen=True)
class FieldConfig:
    rows: int = DEFAULT_ROWS
    columns: int = DEFAULT_COLUMNS
    hazard_chance: int = DEFAULT_HAZARD_CHANCE
    seed: Optional[int] = None
    max_attempts: int = DEFAULT_MAX_ATTEMPTS

    def validate(self) -> "FieldConfig":
        """Raise ``ValueError`` if the generator cannot honour this config."""
        validate_parameters(
            self.rows, self.columns, self.hazard_chance, self.max_attempts
        )
        return self

    def generator_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for :func:`grid_minefield.levels.minefield.generate`."""
        return asdict(self)
