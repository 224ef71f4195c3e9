"""Agent movement system.

Moves the agent to ``next_pos`` when the tile is in bounds and free of walls
and boxes. Tiles holding a box are handled by the push system, which the
reducer tries first; reaching this system with a box ahead means the push was
impossible and the move is blocked.

Returns the original ``State`` if movement is not possible; otherwise a new
``State`` with the updated position.
"""

from dataclasses import replace

from sokoban_universe.components import Position
from sokoban_universe.state import State
from sokoban_universe.types import EntityID
from sokoban_universe.utils.grid import is_blocked_at


def movement_system(state: State, entity_id: EntityID, next_pos: Position) -> State:
    """Move agent one tile if allowed.

    Args:
        state (State): Current state.
        entity_id (EntityID): Agent entity id (ignored if not an agent).
        next_pos (Position): Desired destination position.

    Returns:
        State: Same state if blocked / invalid or updated with new position.
    """
    if entity_id not in state.agent:
        return state

    if is_blocked_at(state, next_pos, check_pushable=True):
        return state

    return replace(state, position=state.position.set(entity_id, next_pos))
