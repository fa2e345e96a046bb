"""Validated minefield generation.

Generation is a retry loop: draw a candidate with
:func:`grid_minefield.levels.generator.generate_candidate`, keep it if
:func:`grid_minefield.utils.reachability.is_reachable` accepts it,
otherwise discard it and draw again with the same parameters. Attempts share
nothing except the random stream, and the loop is capped so an unlucky
configuration fails loudly instead of spinning forever.
"""

import logging
import random
from typing import Optional

from grid_minefield.components import Field, Position
from grid_minefield.levels.generator import generate_candidate, is_goal_eligible
from grid_minefield.moves import default_move_fn
from grid_minefield.state import State, create_initial_state
from grid_minefield.types import MoveFn
from grid_minefield.utils.reachability import is_reachable

logger = logging.getLogger(__name__)

DEFAULT_ROWS = 10
DEFAULT_COLUMNS = 10
DEFAULT_HAZARD_CHANCE = 45
DEFAULT_MAX_ATTEMPTS = 100_000


class GenerationError(RuntimeError):
    """No solvable field was found within the attempt cap."""

    def __init__(self, rows: int, columns: int, hazard_chance: int, attempts: int):
        super().__init__(
            f"No solvable {rows}x{columns} field with {hazard_chance}% hazards "
            f"after {attempts} attempts"
        )
        self.rows = rows
        self.columns = columns
        self.hazard_chance = hazard_chance
        self.attempts = attempts


def has_solvable_goal_cell(rows: int, columns: int) -> bool:
    """Whether any goal placement could ever pass the reachability check.

    The validator ignores the last row and column, so the goal has to land on
    an eligible cell strictly inside them.
    """
    return any(
        is_goal_eligible(rows, columns, Position(row, column))
        for row in range(1, rows - 1)
        for column in range(1, columns - 1)
    )


def validate_parameters(
    rows: int, columns: int, hazard_chance: int, max_attempts: int = DEFAULT_MAX_ATTEMPTS
) -> None:
    """Reject parameters the generation loop cannot satisfy.

    Raises:
        ValueError: On non-positive sizes, a hazard chance outside
            ``[0, 100]``, a non-positive attempt cap, or dimensions that leave
            no goal cell the validator can reach.
    """
    if rows < 1 or columns < 1:
        raise ValueError(f"Field size must be at least 1x1, got {rows}x{columns}")
    if not 0 <= hazard_chance <= 100:
        raise ValueError(f"Hazard chance must be within [0, 100], got {hazard_chance}")
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be positive, got {max_attempts}")
    if not has_solvable_goal_cell(rows, columns):
        raise ValueError(f"A {rows}x{columns} field can never be solvable")


def generate_valid_field(
    rows: int = DEFAULT_ROWS,
    columns: int = DEFAULT_COLUMNS,
    hazard_chance: int = DEFAULT_HAZARD_CHANCE,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> Field:
    """Generate a field whose goal is reachable from the start.

    Args:
        rows (int): Number of rows.
        columns (int): Number of columns.
        hazard_chance (int): Hazard percentage in ``[0, 100]``.
        rng (random.Random | None): Random source; built from ``seed`` if absent.
        seed (int | None): Seed used when ``rng`` is not supplied.
        max_attempts (int): Cap on candidates drawn before giving up.

    Returns:
        Field: A candidate accepted by ``is_reachable``.

    Raises:
        ValueError: If the parameters are invalid (see ``validate_parameters``).
        GenerationError: If every attempt up to ``max_attempts`` was unsolvable.
    """
    validate_parameters(rows, columns, hazard_chance, max_attempts)
    if rng is None:
        rng = random.Random(seed)

    for attempt in range(1, max_attempts + 1):
        candidate = generate_candidate(rows, columns, hazard_chance, rng)
        if is_reachable(candidate):
            logger.info(
                "Accepted %dx%d field after %d attempt(s)", rows, columns, attempt
            )
            return candidate
        logger.debug("Discarding unsolvable candidate %d", attempt)

    raise GenerationError(rows, columns, hazard_chance, max_attempts)


def generate(
    rows: int = DEFAULT_ROWS,
    columns: int = DEFAULT_COLUMNS,
    hazard_chance: int = DEFAULT_HAZARD_CHANCE,
    seed: Optional[int] = None,
    move_fn: MoveFn = default_move_fn,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    rng: Optional[random.Random] = None,
) -> State:
    """Generate a validated field and start a session on it.

    ``rng`` takes precedence over ``seed`` for drawing the field; ``seed`` is
    still recorded on the state.
    """
    field = generate_valid_field(
        rows=rows,
        columns=columns,
        hazard_chance=hazard_chance,
        rng=rng,
        seed=seed,
        max_attempts=max_attempts,
    )
    return create_initial_state(field, move_fn=move_fn, seed=seed)
