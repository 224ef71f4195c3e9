"""Legal-state checks.

:func:`state_violations` lists every rule a puzzle state breaks. A state
produced by the loader or by the reducer must always come back clean; the
loader calls it on every freshly built level.
"""

from collections import Counter
from typing import List

from sokoban_universe.components import Position
from sokoban_universe.state import State
from sokoban_universe.utils.ecs import entities_with_components_at
from sokoban_universe.utils.grid import is_in_bounds


def state_violations(state: State) -> List[str]:
    """Return human readable descriptions of broken invariants (empty if legal)."""
    problems: List[str] = []

    if len(state.agent) != 1:
        problems.append(f"expected exactly one agent, found {len(state.agent)}")

    for eid, pos in sorted(state.position.items()):
        if not is_in_bounds(state, pos):
            problems.append(f"entity {eid} out of bounds at ({pos.x}, {pos.y})")

    for eid in sorted(state.agent):
        pos = state.position.get(eid)
        if pos is None:
            problems.append(f"agent {eid} has no position")
            continue
        if entities_with_components_at(state, pos, state.blocking):
            problems.append(f"agent on wall at ({pos.x}, {pos.y})")
        if entities_with_components_at(state, pos, state.pushable):
            problems.append(f"agent shares ({pos.x}, {pos.y}) with a box")

    box_positions: Counter[Position] = Counter()
    for eid in sorted(state.pushable):
        pos = state.position.get(eid)
        if pos is None:
            problems.append(f"box {eid} has no position")
            continue
        box_positions[pos] += 1
        if entities_with_components_at(state, pos, state.blocking):
            problems.append(f"box {eid} on wall at ({pos.x}, {pos.y})")

    for pos, count in sorted(box_positions.items()):
        if count > 1:
            problems.append(f"{count} boxes stacked at ({pos.x}, {pos.y})")

    return problems


def is_legal_state(state: State) -> bool:
    return not state_violations(state)
