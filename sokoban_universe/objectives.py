"""Objective predicate functions and registry.

Each objective function answers: *"Is the level solved?"* They are pure
predicates over a :class:`State` and an ``agent_id``. The reducer evaluates
``state.objective_fn`` after every accepted move to decide whether to set
``state.win``.

A box is on target when a ``Target`` entity shares its position. The flag is
recomputed here on every call rather than stored on the box.
"""

from typing import Dict, List
from sokoban_universe.state import State
from sokoban_universe.types import EntityID, ObjectiveFn
from sokoban_universe.utils.ecs import entities_with_components_at


def is_box_on_target(state: State, box_id: EntityID) -> bool:
    """True if a target shares the box's current position."""
    pos = state.position.get(box_id)
    if pos is None:
        return False
    return len(entities_with_components_at(state, pos, state.target)) > 0


def boxes_on_target(state: State) -> List[EntityID]:
    """Ids of boxes currently resting on a target, sorted."""
    return sorted(eid for eid in state.pushable if is_box_on_target(state, eid))


def boxes_off_target(state: State) -> List[EntityID]:
    """Ids of boxes not resting on a target, sorted."""
    return sorted(eid for eid in state.pushable if not is_box_on_target(state, eid))


def all_boxes_on_target_objective_fn(state: State, agent_id: EntityID) -> bool:
    """At least one box exists and every box is on a target.

    A level without boxes is never solved, so an empty level cannot be won on
    load.
    """
    if len(state.pushable) == 0:
        return False
    return len(boxes_off_target(state)) == 0


default_objective_fn: ObjectiveFn = all_boxes_on_target_objective_fn


OBJECTIVE_FN_REGISTRY: Dict[str, ObjectiveFn] = {
    "default": default_objective_fn,
    "push": all_boxes_on_target_objective_fn,
}
"""Name → objective predicate mapping for level configuration."""
