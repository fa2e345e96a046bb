"""Console front end.

Generates a validated field and runs the turn loop: show the field, read a
direction, apply it, until one terminal outcome has been reported.
"""

import argparse
import logging
import sys
from typing import Callable, List, Optional

from grid_minefield.actions import parse_action
from grid_minefield.config import FieldConfig
from grid_minefield.levels.minefield import GenerationError, generate
from grid_minefield.renderer.text import GLYPHS, render_text
from grid_minefield.state import State
from grid_minefield.step import forfeit, step
from grid_minefield.types import Tile
from grid_minefield.utils.reachability import shortest_path
from grid_minefield.utils.terminal import OUTCOME_MESSAGES

logger = logging.getLogger(__name__)

PROMPT = "Which way do you want to go? "

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


def setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grid-minefield",
        description="Find the hat without falling into a hole.",
    )
    parser.add_argument("--rows", type=int, default=FieldConfig.rows, help="Field rows")
    parser.add_argument(
        "--columns", type=int, default=FieldConfig.columns, help="Field columns"
    )
    parser.add_argument(
        "--hazard-chance",
        type=int,
        default=FieldConfig.hazard_chance,
        help="Percent chance (0-100) of a hole on each cell",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--max-attempts",
        type=int,
        default=FieldConfig.max_attempts,
        help="Give up after this many unsolvable fields",
    )
    parser.add_argument(
        "--hint", action="store_true", help="Show a safe route before playing"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )
    return parser


def config_from_args(args: argparse.Namespace) -> FieldConfig:
    return FieldConfig(
        rows=args.rows,
        columns=args.columns,
        hazard_chance=args.hazard_chance,
        seed=args.seed,
        max_attempts=args.max_attempts,
    ).validate()


def render_hint(state: State) -> str:
    """The field with one safe route to the goal drawn in path glyphs."""
    path = shortest_path(state.field)
    hinted = state.field
    for pos in path:
        if hinted.tile_at(pos) == Tile.EMPTY:
            hinted = hinted.with_tile(pos, Tile.VISITED)
    return render_text(hinted)


def play(
    state: State,
    input_fn: Optional[InputFn] = None,
    output_fn: Optional[OutputFn] = None,
) -> State:
    """Run the blocking turn loop until the session ends.

    Every playing turn renders the field and waits for the next command.
    Unrecognized commands print the input hint and leave the state as is.
    End of input counts as leaving the field.

    Returns:
        State: The terminal state.
    """
    input_fn = input_fn or input
    output_fn = output_fn or print
    while not state.is_terminal:
        output_fn(render_text(state))
        try:
            line = input_fn(PROMPT)
        except EOFError:
            logger.info("Input closed, forfeiting")
            state = forfeit(state)
            break
        state = step(state, parse_action(line))
        if not state.is_terminal and state.message:
            output_fn(state.message)

    output_fn(OUTCOME_MESSAGES[state.outcome])
    return state


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        config = config_from_args(args)
    except ValueError as e:
        parser.error(str(e))

    logger.info(
        "Generating %dx%d field with %d%% hazards",
        config.rows,
        config.columns,
        config.hazard_chance,
    )
    try:
        state = generate(**config.generator_kwargs())
    except GenerationError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.hint:
        print(f"Safe route ({GLYPHS[Tile.VISITED]}):")
        print(render_hint(state))
        print()

    play(state)
    return 0
