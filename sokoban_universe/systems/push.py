"""Push interaction system.

Lets the agent push the box in front of it one tile further along the
movement vector. A push is validated completely before anything is written:
the tile behind the box must be in bounds and hold neither a wall nor another
box, so a chain of two boxes can never be pushed.
"""

from dataclasses import replace
from sokoban_universe.state import State
from sokoban_universe.components import Position
from sokoban_universe.types import EntityID
from sokoban_universe.utils.ecs import first_entity_with_components_at
from sokoban_universe.utils.grid import is_blocked_at, compute_destination


def push_system(state: State, eid: EntityID, next_pos: Position) -> State:
    """Attempt to push the box at ``next_pos``.

    Args:
        state (State): Current immutable state.
        eid (EntityID): Entity initiating the push (must have a position).
        next_pos (Position): Adjacent position the entity is trying to move into.

    Returns:
        State: Updated state with the agent and the box advanced if the push
        succeeds; the original ``state`` object otherwise (including when
        there is nothing to push).
    """
    current_pos = state.position.get(eid)
    if current_pos is None:
        return state

    box_id = first_entity_with_components_at(state, next_pos, state.pushable)
    if box_id is None:
        return state  # Nothing to push

    push_to = compute_destination(state, current_pos, next_pos)
    if push_to is None:
        return state  # Box against the grid edge

    if is_blocked_at(state, push_to, check_pushable=True):
        return state  # Wall or another box behind

    new_position = state.position.set(box_id, push_to).set(eid, next_pos)
    return replace(state, position=new_position)
