"""Built-in level set.

Three hand-authored tile grids ramping from a single push to a level that
needs boxes steered around corners. Each entry is a plain description in the
JSON level file format so it can be fed to any loader entry point.
"""

from __future__ import annotations

from typing import Any, Dict, List

from sokoban_universe.objectives import default_objective_fn
from sokoban_universe.state import State
from sokoban_universe.types import ObjectiveFn
from .loader import load_level

LEVEL_TILES: List[Dict[str, Any]] = [
    # L1: one box, straight push
    {
        "width": 7,
        "height": 5,
        "tiles": [
            ["W", "W", "W", "W", "W", "W", "W"],
            ["W", ".", ".", ".", ".", ".", "W"],
            ["W", ".", "P", "B", ".", "T", "W"],
            ["W", ".", ".", ".", ".", ".", "W"],
            ["W", "W", "W", "W", "W", "W", "W"],
        ],
    },
    # L2: two parallel corridors split by a pillar
    {
        "width": 8,
        "height": 7,
        "tiles": [
            ["W", "W", "W", "W", "W", "W", "W", "W"],
            ["W", ".", ".", ".", ".", ".", ".", "W"],
            ["W", ".", "B", ".", ".", "T", ".", "W"],
            ["W", "P", ".", ".", "W", ".", ".", "W"],
            ["W", ".", "B", ".", ".", "T", ".", "W"],
            ["W", ".", ".", ".", ".", ".", ".", "W"],
            ["W", "W", "W", "W", "W", "W", "W", "W"],
        ],
    },
    # L3: corner targets need a push in each axis
    {
        "width": 8,
        "height": 7,
        "tiles": [
            ["W", "W", "W", "W", "W", "W", "W", "W"],
            ["W", "T", ".", ".", ".", ".", "T", "W"],
            ["W", ".", "B", ".", ".", "B", ".", "W"],
            ["W", ".", ".", "P", ".", ".", ".", "W"],
            ["W", ".", ".", "B", ".", ".", ".", "W"],
            ["W", ".", ".", "T", ".", ".", ".", "W"],
            ["W", "W", "W", "W", "W", "W", "W", "W"],
        ],
    },
]

TOTAL_LEVELS = len(LEVEL_TILES)


def level_description(index: int) -> Dict[str, Any]:
    """Return the description of level ``index`` (0-based).

    Raises:
        ValueError: If ``index`` is not in ``range(TOTAL_LEVELS)``.
    """
    if not 0 <= index < TOTAL_LEVELS:
        raise ValueError(f"No level {index}; the catalogue has {TOTAL_LEVELS}")
    return LEVEL_TILES[index]


def build_level(index: int, objective_fn: ObjectiveFn = default_objective_fn) -> State:
    """Load level ``index`` into a fresh ``State``."""
    return load_level(level_description(index), objective_fn=objective_fn)
