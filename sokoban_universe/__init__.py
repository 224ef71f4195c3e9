"""Sokoban Universe: a turn-based Sokoban rules engine.

The puzzle is an immutable ECS :class:`~sokoban_universe.state.State`;
pure systems validate moves and pushes, and :class:`PuzzleEngine` wraps the
reducer in a small command interface (``attempt_move``, ``is_solved``,
``snapshot``) for presentation layers.
"""

from sokoban_universe.actions import Action
from sokoban_universe.engine import PuzzleEngine
from sokoban_universe.levels.loader import InvalidLevelError, load_level
from sokoban_universe.snapshot import BoxView, EngineSnapshot
from sokoban_universe.types import EngineMode, MoveOutcome

__all__ = [
    "Action",
    "BoxView",
    "EngineMode",
    "EngineSnapshot",
    "InvalidLevelError",
    "MoveOutcome",
    "PuzzleEngine",
    "load_level",
]
