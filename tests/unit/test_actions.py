# tests/unit/test_actions.py

import pytest
from typing import Optional

from grid_minefield.actions import Action, GymAction, MOVE_ACTIONS, parse_action


@pytest.mark.parametrize(
    "text, expected",
    [
        ("u", Action.UP),
        ("d", Action.DOWN),
        ("l", Action.LEFT),
        ("r", Action.RIGHT),
        ("U", Action.UP),
        ("R", Action.RIGHT),
        ("  d \n", Action.DOWN),
        ("", None),
        ("x", None),
        ("up", None),
        ("ud", None),
    ],
)
def test_parse_action(text: str, expected: Optional[Action]) -> None:
    assert parse_action(text) == expected


def test_gym_action_indices_follow_move_actions() -> None:
    assert [MOVE_ACTIONS[g] for g in GymAction] == [
        Action.UP,
        Action.DOWN,
        Action.LEFT,
        Action.RIGHT,
    ]
    assert [int(g) for g in GymAction] == [0, 1, 2, 3]
