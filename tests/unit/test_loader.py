import json
import logging
from pathlib import Path

import pytest

from sokoban_universe.actions import Action
from sokoban_universe.components import Position
from sokoban_universe.levels import (
    InvalidLevelError,
    TileCode,
    finalize_level,
    level_from_xsb,
    load_level,
    load_level_file,
    parse_xsb,
    to_tiles,
)
from sokoban_universe.objectives import boxes_on_target
from sokoban_universe.step import resolve_move
from sokoban_universe.types import MoveOutcome
from sokoban_universe.utils.ecs import positions_of
from tests.test_utils import assert_legal


TINY = [
    ["W", "W", "W", "W", "W"],
    ["W", "P", "B", "T", "W"],
    ["W", "W", "W", "W", "W"],
]


def test_load_plain_rows() -> None:
    state = load_level(TINY)
    assert (state.width, state.height) == (5, 3)
    assert positions_of(state, state.agent) == [Position(1, 1)]
    assert positions_of(state, state.pushable) == [Position(2, 1)]
    assert positions_of(state, state.target) == [Position(3, 1)]
    assert len(state.blocking) == 12
    assert (state.moves, state.pushes, state.win) == (0, 0, False)
    assert_legal(state)


def test_load_mapping_with_size() -> None:
    state = load_level({"width": 5, "height": 3, "tiles": TINY})
    assert state == load_level(TINY)


def test_box_on_target_code_creates_both() -> None:
    state = load_level([["P", "BT", "B", "T"]])
    assert positions_of(state, state.target) == [Position(1, 0), Position(3, 0)]
    assert positions_of(state, state.pushable) == [Position(1, 0), Position(2, 0)]
    assert len(boxes_on_target(state)) == 1


def test_loading_is_deterministic() -> None:
    assert load_level(TINY) == load_level(TINY)


@pytest.mark.parametrize(
    "description, fragment",
    [
        ([], "no rows"),
        ({"width": 3}, "no 'tiles'"),
        ("WPBT", "list of rows"),
        (["WPBT"], "Row 0"),
        ([[]], "empty"),
        ([["P", "B"], ["T"]], "Row 1 has 1 cells, expected 2"),
        ({"width": 4, "height": 1, "tiles": [["P", "B", "T"]]}, "Declared size 4x1"),
        ([["P", "X"]], "Unknown cell code 'X' at (1, 0)"),
        ([["P", 1]], "Unknown cell code 1 at (1, 0)"),
        ([["B", "T"]], "exactly one player, found 0"),
        ([["P", "P", "B", "T"]], "exactly one player, found 2"),
    ],
)
def test_invalid_descriptions(description: object, fragment: str) -> None:
    with pytest.raises(InvalidLevelError) as exc_info:
        load_level(description)  # type: ignore[arg-type]
    assert fragment in str(exc_info.value)


def test_invalid_level_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        load_level([["X"]])


def test_no_boxes_warns(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="sokoban_universe.levels.loader"):
        state = load_level([["P", ".", "T"]])
    assert len(state.pushable) == 0
    assert "no boxes" in caplog.text


def test_more_boxes_than_targets_warns(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="sokoban_universe.levels.loader"):
        load_level([["P", "B", ".", "B", "T"]])
    assert "2 boxes but only 1 targets" in caplog.text


def test_balanced_level_does_not_warn(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="sokoban_universe.levels.loader"):
        load_level(TINY)
    assert caplog.records == []


XSB = """\
; a comment line
#####
#@$.#
#####
"""


def test_parse_xsb_pads_and_strips() -> None:
    rows = parse_xsb("\n;title\n####\n#@$.#\n #####\n\n")
    assert rows == ["####  ", "#@$.# ", " #####"]


def test_parse_xsb_rejects_empty() -> None:
    with pytest.raises(InvalidLevelError):
        parse_xsb("; only a comment\n\n")


def test_xsb_matches_tiles() -> None:
    level = level_from_xsb(XSB)
    assert (level.width, level.height) == (5, 3)
    assert level.positions_where(lambda o: o.agent is not None) == [(1, 1)]
    assert level.positions_where(lambda o: o.pushable is not None) == [(2, 1)]
    assert level.positions_where(lambda o: o.target is not None) == [(3, 1)]


def test_xsb_player_on_target() -> None:
    level = level_from_xsb("#+$*#")
    assert level.positions_where(lambda o: o.agent is not None) == [(1, 0)]
    assert level.positions_where(lambda o: o.target is not None) == [(1, 0), (3, 0)]


def test_xsb_unknown_character() -> None:
    with pytest.raises(InvalidLevelError, match="Unknown cell code 'x'"):
        level_from_xsb("#@x.#")


def test_load_json_file(tmp_path: Path) -> None:
    path = tmp_path / "level.json"
    path.write_text(json.dumps({"width": 5, "height": 3, "tiles": TINY}), encoding="utf-8")
    assert load_level_file(path) == load_level(TINY)


def test_load_xsb_file(tmp_path: Path) -> None:
    path = tmp_path / "level.xsb"
    path.write_text(XSB, encoding="utf-8")
    state = load_level_file(str(path))
    assert positions_of(state, state.agent) == [Position(1, 1)]
    assert len(state.blocking) == 12


def test_load_broken_json_file(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(InvalidLevelError, match="not valid JSON"):
        load_level_file(path)


def test_load_missing_file(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        load_level_file(tmp_path / "missing.json")


def test_to_tiles_inverts_load() -> None:
    tiles = [["W", "P", "BT", "B", "T", "."]]
    assert to_tiles(load_level(tiles)) == tiles
    assert to_tiles(load_level(TINY)) == TINY


def test_to_tiles_player_on_target() -> None:
    state = finalize_level(level_from_xsb("#+$.#"))
    with pytest.raises(ValueError, match="Player on target"):
        to_tiles(state)


def test_tile_codes() -> None:
    assert [c.value for c in TileCode] == ["W", "P", "B", "T", "BT", "."]


def test_already_solved_level_loads_won(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="sokoban_universe.levels.loader"):
        state = load_level([["P", "BT", "."]])
    assert state.win
    assert "already solved" in caplog.text
    assert not load_level(TINY).win


def test_to_tiles_after_walking_onto_target() -> None:
    state = load_level([["P", "T", "B", "T"]])
    assert to_tiles(state) == [["P", "T", "B", "T"]]
    moved, outcome = resolve_move(state, Action.RIGHT)
    assert outcome == MoveOutcome.ACTOR_MOVED
    with pytest.raises(ValueError, match=r"Player on target at \(1, 0\)"):
        to_tiles(moved)
