from dataclasses import replace
from typing import List, Optional, Sequence

import pytest

from grid_minefield.actions import Action
from grid_minefield.components import Position
from grid_minefield.state import State
from grid_minefield.step import forfeit, step
from grid_minefield.types import Outcome
from grid_minefield.utils.terminal import INVALID_INPUT_MESSAGE, OUTCOME_MESSAGES
from tests.test_utils import SCENARIO_LAYOUT, make_state


def run(state: State, actions: Sequence[Optional[Action]]) -> List[State]:
    states: List[State] = []
    for action in actions:
        state = step(state, action)
        states.append(state)
    return states


def test_right_then_down_wins() -> None:
    states = run(make_state(SCENARIO_LAYOUT), [Action.RIGHT, Action.DOWN])
    assert [s.outcome for s in states] == [Outcome.PLAYING, Outcome.WON]
    assert states[0].position == Position(0, 1)
    assert states[1].message == OUTCOME_MESSAGES[Outcome.WON]


def test_down_from_start_falls() -> None:
    states = run(make_state(SCENARIO_LAYOUT), [Action.DOWN])
    assert [s.outcome for s in states] == [Outcome.FELL]
    assert states[0].message == OUTCOME_MESSAGES[Outcome.FELL]
    # terminal moves do not relocate the player
    assert states[0].position == Position(0, 0)


@pytest.mark.parametrize(
    "layout",
    [
        SCENARIO_LAYOUT,
        ["*░░", "░░░", "░░^"],
        ["*O", "O^"],
    ],
)
def test_up_from_start_exits(layout: List[str]) -> None:
    state = step(make_state(layout), Action.UP)
    assert state.outcome == Outcome.EXITED
    assert state.message == OUTCOME_MESSAGES[Outcome.EXITED]


def test_left_from_start_exits() -> None:
    assert step(make_state(), Action.LEFT).outcome == Outcome.EXITED


def test_walking_off_far_edge_exits() -> None:
    state = step(make_state(position=(0, 1)), Action.RIGHT)
    assert state.outcome == Outcome.EXITED


def test_invalid_intent_keeps_playing() -> None:
    state = make_state()
    new_state = step(state, None)
    assert new_state.outcome == Outcome.PLAYING
    assert new_state.position == state.position
    assert new_state.turn == state.turn
    assert new_state.message == INVALID_INPUT_MESSAGE
    # the hint is cleared by the next accepted move
    assert step(new_state, Action.RIGHT).message is None


def test_turn_counts_accepted_intents() -> None:
    states = run(make_state(), [Action.RIGHT, None, Action.LEFT, Action.RIGHT])
    assert [s.turn for s in states] == [1, 1, 2, 3]


def test_terminal_state_is_returned_unchanged() -> None:
    state = step(make_state(), Action.DOWN)
    assert step(state, Action.RIGHT) is state
    assert step(state, None) is state


def test_traversal_is_deterministic() -> None:
    layout = [
        "*░░░░",
        "░O░O░",
        "░░^░░",
        "O░O░O",
        "░OOO░",
    ]
    actions = [
        Action.RIGHT,
        Action.RIGHT,
        None,
        Action.LEFT,
        Action.RIGHT,
        Action.DOWN,
        Action.DOWN,
    ]
    first = run(make_state(layout), actions)
    second = run(make_state(layout), actions)
    assert first == second
    assert [s.outcome for s in first][-1] == Outcome.WON


def test_input_state_is_not_mutated() -> None:
    state = make_state()
    step(state, Action.RIGHT)
    assert state.position == Position(0, 0)
    assert state.visited == make_state().visited


def test_custom_move_fn_is_used() -> None:
    state = make_state(move_fn=lambda s, a: Position(1, 1))
    assert step(state, Action.UP).outcome == Outcome.WON


def test_forfeit() -> None:
    state = forfeit(make_state())
    assert state.outcome == Outcome.EXITED
    assert state.message == OUTCOME_MESSAGES[Outcome.EXITED]
    won = replace(make_state(), outcome=Outcome.WON)
    assert forfeit(won) is won
