# tests/unit/test_moves.py

import pytest
from typing import Tuple

from grid_minefield.actions import Action
from grid_minefield.components import Position
from grid_minefield.moves import MOVE_FN_REGISTRY, default_move_fn
from tests.test_utils import make_state

OPEN_3X3 = ["*░░", "░^░", "░░░"]


@pytest.mark.parametrize(
    "start, action, expected",
    [
        ((1, 1), Action.UP, (0, 1)),
        ((1, 1), Action.DOWN, (2, 1)),
        ((1, 1), Action.LEFT, (1, 0)),
        ((1, 1), Action.RIGHT, (1, 2)),
        # off-grid candidates are not clamped
        ((0, 0), Action.UP, (-1, 0)),
        ((0, 0), Action.LEFT, (0, -1)),
        ((2, 2), Action.DOWN, (3, 2)),
        ((2, 2), Action.RIGHT, (2, 3)),
    ],
)
def test_default_move_fn(
    start: Tuple[int, int], action: Action, expected: Tuple[int, int]
) -> None:
    state = make_state(OPEN_3X3, position=start)
    assert default_move_fn(state, action) == Position(*expected)


def test_default_move_fn_does_not_change_state() -> None:
    state = make_state(OPEN_3X3, position=(1, 0))
    default_move_fn(state, Action.RIGHT)
    assert state.position == Position(1, 0)


def test_registry_exposes_default() -> None:
    assert MOVE_FN_REGISTRY["default"] is default_move_fn
