from dataclasses import replace

import pytest

from sokoban_universe.components import Position
from sokoban_universe.levels import Level, from_state, to_state
from sokoban_universe.levels.factories import create_agent, create_box, create_target, create_wall
from sokoban_universe.objectives import default_objective_fn


def _small_level() -> Level:
    level = Level(width=4, height=2, objective_fn=default_objective_fn)
    level.add((0, 0), create_wall())
    level.add((1, 0), create_agent())
    level.add_many([((2, 1), create_target()), ((2, 1), create_box())])
    return level


def test_to_state_allocates_row_major_ids() -> None:
    state = to_state(_small_level())
    assert dict(state.position) == {
        0: Position(0, 0),
        1: Position(1, 0),
        2: Position(2, 1),
        3: Position(2, 1),
    }
    assert set(state.blocking) == {0}
    assert set(state.agent) == {1}
    assert set(state.target) == {2}
    assert set(state.pushable) == {3}
    assert set(state.entity) == {0, 1, 2, 3}


def test_to_state_is_deterministic() -> None:
    assert to_state(_small_level()) == to_state(_small_level())


def test_round_trip_keeps_layout() -> None:
    level = _small_level()
    level.moves = 3
    level.pushes = 1
    state = to_state(level)
    back = from_state(state)
    assert (back.width, back.height) == (4, 2)
    assert (back.moves, back.pushes, back.win) == (3, 1, False)
    assert [o.target is not None for o in back.objects_at((2, 1))] == [True, False]
    assert [o.pushable is not None for o in back.objects_at((2, 1))] == [False, True]
    assert to_state(back) == state


def test_from_state_drops_out_of_bounds() -> None:
    state = to_state(_small_level())
    moved = state.position.set(3, Position(9, 9))
    back = from_state(replace(state, position=moved))
    boxes = back.positions_where(lambda o: o.pushable is not None)
    assert boxes == []
    assert back.positions_where(lambda o: o.target is not None) == [(2, 1)]


def test_level_bounds() -> None:
    level = Level(width=2, height=2)
    with pytest.raises(IndexError):
        level.add((2, 0), create_box())
    with pytest.raises(IndexError):
        level.objects_at((0, -1))
    with pytest.raises(ValueError):
        Level(width=0, height=3)
