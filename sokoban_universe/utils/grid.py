"""Grid math / collision helpers.

Predicates used by the movement & push systems. Functions here are pure and
lightweight; they never inspect the agent, only static terrain and boxes.
"""

from typing import Optional
from sokoban_universe.components import Position
from sokoban_universe.state import State
from sokoban_universe.utils.ecs import entities_with_components_at


def is_in_bounds(state: State, pos: Position) -> bool:
    """Return True if ``pos`` lies within the level rectangle."""
    return 0 <= pos.x < state.width and 0 <= pos.y < state.height


def is_wall_at(state: State, pos: Position) -> bool:
    """Return True if a ``Blocking`` entity occupies ``pos``."""
    return len(entities_with_components_at(state, pos, state.blocking)) > 0


def is_box_at(state: State, pos: Position) -> bool:
    """Return True if a ``Pushable`` entity occupies ``pos``."""
    return len(entities_with_components_at(state, pos, state.pushable)) > 0


def is_blocked_at(state: State, pos: Position, check_pushable: bool = True) -> bool:
    """Return True if ``pos`` cannot be entered.

    Arguments:
        state: World state.
        pos: Candidate destination.
        check_pushable: If True, a box also blocks. Pass False to ask about
            terrain only.
    """
    if not is_in_bounds(state, pos) or is_wall_at(state, pos):
        return True
    return check_pushable and is_box_at(state, pos)


def compute_destination(
    state: State, current_pos: Position, next_pos: Position
) -> Optional[Position]:
    """Compute push destination given the pusher and the pushed positions.

    Returns the square beyond ``next_pos`` along the movement direction or
    ``None`` if that square lies outside the grid.
    """
    dx = next_pos.x - current_pos.x
    dy = next_pos.y - current_pos.y
    destination = next_pos.offset(dx, dy)
    if not is_in_bounds(state, destination):
        return None
    return destination
