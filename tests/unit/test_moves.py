import pytest
from typing import Tuple

from sokoban_universe.actions import ACTION_DELTAS, Action, GymAction, MOVE_ACTIONS, to_action
from sokoban_universe.components import Position
from sokoban_universe.moves import default_move_fn
from tests.test_utils import make_sokoban_state


@pytest.mark.parametrize(
    "start, action, expected",
    [
        ((2, 2), Action.UP, (2, 1)),
        ((2, 2), Action.DOWN, (2, 3)),
        ((2, 2), Action.LEFT, (1, 2)),
        ((2, 2), Action.RIGHT, (3, 2)),
        # no bounds checking here; the systems reject these
        ((0, 0), Action.LEFT, (-1, 0)),
        ((0, 0), Action.UP, (0, -1)),
        ((4, 4), Action.DOWN, (4, 5)),
        ((4, 4), Action.RIGHT, (5, 4)),
    ],
)
def test_default_move_fn(
    start: Tuple[int, int], action: Action, expected: Tuple[int, int]
) -> None:
    state, ids = make_sokoban_state(start)
    assert default_move_fn(state, ids["agent_id"], action) == Position(*expected)


def test_deltas_are_unit_vectors() -> None:
    assert set(ACTION_DELTAS) == set(MOVE_ACTIONS)
    for dx, dy in ACTION_DELTAS.values():
        assert abs(dx) + abs(dy) == 1


@pytest.mark.parametrize(
    "direction, expected",
    [
        (Action.UP, Action.UP),
        ("down", Action.DOWN),
        ("LEFT", Action.LEFT),
        ((1, 0), Action.RIGHT),
        ((0, -1), Action.UP),
    ],
)
def test_to_action(direction: object, expected: Action) -> None:
    assert to_action(direction) == expected  # type: ignore[arg-type]


@pytest.mark.parametrize("direction", ["north", (1, 1), (0, 0), (2, 0), 3])
def test_to_action_rejects_non_unit_directions(direction: object) -> None:
    with pytest.raises(ValueError):
        to_action(direction)  # type: ignore[arg-type]


def test_gym_action_names_match_actions() -> None:
    assert [a.name for a in GymAction] == [a.name for a in MOVE_ACTIONS]
    assert GymAction.UP == 0
