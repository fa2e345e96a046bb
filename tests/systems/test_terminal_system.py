from dataclasses import replace

from grid_minefield.components import Position
from grid_minefield.systems.boundary import boundary_system
from grid_minefield.systems.hazard import hazard_system
from grid_minefield.systems.terminal import goal_system, outcome_message_system
from grid_minefield.types import Outcome
from grid_minefield.utils.terminal import OUTCOME_MESSAGES, is_loss, is_win
from tests.test_utils import make_state


def test_boundary_exits_on_negative_row() -> None:
    state = make_state()
    assert boundary_system(state, Position(-1, 0)).outcome == Outcome.EXITED


def test_boundary_exits_past_declared_size() -> None:
    state = make_state()
    assert boundary_system(state, Position(0, 2)).outcome == Outcome.EXITED
    assert boundary_system(state, Position(2, 0)).outcome == Outcome.EXITED


def test_boundary_ignores_in_bounds_cells() -> None:
    state = make_state()
    assert boundary_system(state, Position(1, 1)) is state


def test_hazard_system_falls_on_hazard() -> None:
    state = make_state()
    new_state = hazard_system(state, Position(1, 0))
    assert new_state.outcome == Outcome.FELL
    assert is_loss(new_state)


def test_hazard_system_ignores_empty() -> None:
    state = make_state()
    assert hazard_system(state, Position(0, 1)) is state


def test_goal_system_wins_on_goal() -> None:
    state = make_state()
    new_state = goal_system(state, Position(1, 1))
    assert new_state.outcome == Outcome.WON
    assert is_win(new_state)


def test_goal_system_ignores_other_cells() -> None:
    state = make_state()
    assert goal_system(state, Position(0, 1)).outcome == Outcome.PLAYING


def test_terminal_state_short_circuits_systems() -> None:
    state = replace(make_state(), outcome=Outcome.EXITED)
    # no tile lookup happens for an off-grid candidate once terminal
    assert hazard_system(state, Position(-1, 0)) is state
    assert goal_system(state, Position(5, 5)) is state
    assert boundary_system(state, Position(-1, 0)) is state


def test_outcome_message_system() -> None:
    state = make_state()
    assert outcome_message_system(state) is state
    for outcome in (Outcome.EXITED, Outcome.FELL, Outcome.WON):
        ended = outcome_message_system(replace(state, outcome=outcome))
        assert ended.message == OUTCOME_MESSAGES[outcome]
        assert outcome_message_system(ended) is ended
