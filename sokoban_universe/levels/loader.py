"""Level description parsing.

Two textual formats are understood:

* **Tile grids**, the JSON level file format: ``{"width": W, "height": H,
  "tiles": [[code, ...], ...]}`` (or just the list of rows) with the codes of
  :class:`TileCode`.
* **XSB**, the community plain-text Sokoban format (``#`` wall, ``@`` player,
  ``+`` player on target, ``$`` box, ``*`` box on target, ``.`` target,
  space / ``-`` / ``_`` floor). Lines starting with ``;`` are comments.

Every malformed description fails fast with :class:`InvalidLevelError`;
nothing is repaired silently. Levels that load but look unwinnable (no boxes,
more boxes than targets) are only logged.

The reverse direction, :func:`to_tiles`, only covers states the tile format
can express. It is meant for freshly loaded or authored levels: once the
player steps onto a target during play there is no tile code for that cell and
it raises ``ValueError``.
"""

from __future__ import annotations

import json
import logging
from enum import StrEnum
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Sequence, Tuple, Union

from sokoban_universe.components import Position
from sokoban_universe.invariants import state_violations
from sokoban_universe.objectives import default_objective_fn
from sokoban_universe.state import State
from sokoban_universe.systems.terminal import win_system
from sokoban_universe.types import ObjectiveFn
from sokoban_universe.utils.ecs import entities_with_components_at
from .convert import to_state
from .entity_spec import EntitySpec
from .factories import create_agent, create_box, create_target, create_wall
from .grid import Level

logger = logging.getLogger(__name__)


class InvalidLevelError(ValueError):
    """Raised when a level description cannot be turned into a legal level."""


class TileCode(StrEnum):
    """Cell codes of the tile grid format."""

    WALL = "W"
    PLAYER = "P"
    BOX = "B"
    TARGET = "T"
    BOX_ON_TARGET = "BT"
    EMPTY = "."


TILE_FACTORIES: Dict[TileCode, Tuple[Callable[[], EntitySpec], ...]] = {
    TileCode.WALL: (create_wall,),
    TileCode.PLAYER: (create_agent,),
    TileCode.BOX: (create_box,),
    TileCode.TARGET: (create_target,),
    TileCode.BOX_ON_TARGET: (create_target, create_box),
    TileCode.EMPTY: (),
}

XSB_FACTORIES: Dict[str, Tuple[Callable[[], EntitySpec], ...]] = {
    "#": (create_wall,),
    "@": (create_agent,),
    "+": (create_target, create_agent),
    "$": (create_box,),
    "*": (create_target, create_box),
    ".": (create_target,),
    " ": (),
    "-": (),
    "_": (),
}

LevelDescription = Union[Mapping[str, Any], Sequence[Sequence[str]]]


def _extract_rows(description: LevelDescription) -> List[List[str]]:
    if isinstance(description, Mapping):
        if "tiles" not in description:
            raise InvalidLevelError("Level description has no 'tiles'")
        raw_rows = description["tiles"]
    else:
        raw_rows = description

    if isinstance(raw_rows, str) or not isinstance(raw_rows, Sequence):
        raise InvalidLevelError("Tiles must be a list of rows")
    if len(raw_rows) == 0:
        raise InvalidLevelError("Level has no rows")

    rows: List[List[str]] = []
    for y, row in enumerate(raw_rows):
        if isinstance(row, str) or not isinstance(row, Sequence):
            raise InvalidLevelError(f"Row {y} must be a list of cell codes")
        rows.append(list(row))

    width = len(rows[0])
    if width == 0:
        raise InvalidLevelError("Level rows are empty")
    for y, row in enumerate(rows):
        if len(row) != width:
            raise InvalidLevelError(
                f"Row {y} has {len(row)} cells, expected {width}"
            )

    if isinstance(description, Mapping):
        declared = (description.get("width", width), description.get("height", len(rows)))
        if declared != (width, len(rows)):
            raise InvalidLevelError(
                f"Declared size {declared[0]}x{declared[1]} does not match "
                f"tiles {width}x{len(rows)}"
            )
    return rows


def _build_level(
    rows: Sequence[Sequence[str]],
    factories: Mapping[str, Tuple[Callable[[], EntitySpec], ...]],
    objective_fn: ObjectiveFn,
) -> Level:
    level = Level(width=len(rows[0]), height=len(rows), objective_fn=objective_fn)
    for y, row in enumerate(rows):
        for x, code in enumerate(row):
            if not isinstance(code, str) or code not in factories:
                raise InvalidLevelError(f"Unknown cell code {code!r} at ({x}, {y})")
            level.add_many([((x, y), factory()) for factory in factories[code]])

    players = level.positions_where(lambda obj: obj.agent is not None)
    if len(players) != 1:
        raise InvalidLevelError(f"Level must have exactly one player, found {len(players)}")
    return level


def level_from_tiles(
    description: LevelDescription, objective_fn: ObjectiveFn = default_objective_fn
) -> Level:
    """Parse a tile grid description into an authoring ``Level``.

    Raises:
        InvalidLevelError: Empty or ragged rows, size mismatch, unknown code,
            or not exactly one player.
    """
    rows = _extract_rows(description)
    return _build_level(rows, {code.value: f for code, f in TILE_FACTORIES.items()}, objective_fn)


def parse_xsb(text: str) -> List[str]:
    """Split XSB text into rectangular rows.

    Comment lines (``;``) and blank lines around the board are dropped and
    short rows are padded with floor. Characters are validated later by
    :func:`level_from_xsb`.
    """
    lines = [
        line.rstrip("\r\n")
        for line in text.splitlines()
        if not line.lstrip().startswith(";")
    ]
    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()
    if not lines:
        raise InvalidLevelError("XSB text contains no board")
    width = max(len(line) for line in lines)
    return [line.ljust(width) for line in lines]


def level_from_xsb(text: str, objective_fn: ObjectiveFn = default_objective_fn) -> Level:
    """Parse XSB text into an authoring ``Level``.

    Raises:
        InvalidLevelError: No board, unknown character, or not exactly one player.
    """
    rows = parse_xsb(text)
    return _build_level(rows, XSB_FACTORIES, objective_fn)


def finalize_level(level: Level) -> State:
    """Convert an authoring ``Level`` to a ``State`` and check it is legal.

    The objective is evaluated once here, so a level whose boxes all start on
    targets comes back with ``win`` already set.

    Raises:
        InvalidLevelError: If the built state breaks an invariant (e.g. a box
            stacked on a wall through hand authoring).
    """
    state = to_state(level)
    problems = state_violations(state)
    if problems:
        raise InvalidLevelError("; ".join(problems))

    box_count, target_count = len(state.pushable), len(state.target)
    if box_count == 0:
        logger.warning("Level %dx%d has no boxes and can never be solved", state.width, state.height)
    elif box_count > target_count:
        logger.warning(
            "Level %dx%d has %d boxes but only %d targets",
            state.width,
            state.height,
            box_count,
            target_count,
        )

    state = win_system(state, min(state.agent))
    if state.win:
        logger.warning("Level %dx%d is already solved", state.width, state.height)
    return state


def load_level(
    description: LevelDescription, objective_fn: ObjectiveFn = default_objective_fn
) -> State:
    """Parse a tile grid description straight into a playable ``State``."""
    return finalize_level(level_from_tiles(description, objective_fn))


def load_level_file(
    path: Union[str, Path], objective_fn: ObjectiveFn = default_objective_fn
) -> State:
    """Load a level from a JSON file (``.json``) or an XSB text file (anything else).

    Raises:
        InvalidLevelError: If the content does not parse or is not a legal level.
        OSError: If the file cannot be read.
    """
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() != ".json":
        return finalize_level(level_from_xsb(text, objective_fn))
    try:
        description = json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidLevelError(f"{path}: not valid JSON ({e})") from e
    return load_level(description, objective_fn)


def _tile_code_at(state: State, pos: Position) -> TileCode:
    if entities_with_components_at(state, pos, state.blocking):
        return TileCode.WALL
    has_target = bool(entities_with_components_at(state, pos, state.target))
    if entities_with_components_at(state, pos, state.agent):
        if has_target:
            raise ValueError(
                f"Player on target at ({pos.x}, {pos.y}) has no tile code"
            )
        return TileCode.PLAYER
    if entities_with_components_at(state, pos, state.pushable):
        return TileCode.BOX_ON_TARGET if has_target else TileCode.BOX
    return TileCode.TARGET if has_target else TileCode.EMPTY


def to_tiles(state: State) -> List[List[str]]:
    """Serialize a state back to tile-code rows.

    Inverse of :func:`load_level` for states whose player is not on a target,
    which holds for every tile-grid level as loaded but not for every state
    reached during play.

    Raises:
        ValueError: If the player stands on a target, which the tile format
            cannot express.
    """
    return [
        [_tile_code_at(state, Position(x, y)).value for x in range(state.width)]
        for y in range(state.height)
    ]
