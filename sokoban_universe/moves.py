"""Movement candidate function.

Maps (state, entity id, action) to the single adjacent tile the entity will
try to enter. The caller (the reducer) decides whether that tile is entered,
pushed into, or blocked; this function never checks bounds or terrain.
"""

from sokoban_universe.actions import ACTION_DELTAS, Action
from sokoban_universe.components import Position
from sokoban_universe.state import State
from sokoban_universe.types import EntityID


def default_move_fn(state: State, eid: EntityID, action: Action) -> Position:
    """Single-tile cardinal step without bounds wrapping."""
    dx, dy = ACTION_DELTAS[action]
    return state.position[eid].offset(dx, dy)
