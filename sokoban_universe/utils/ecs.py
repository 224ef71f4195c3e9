"""ECS convenience queries.

Helper functions for looking up which entities occupy a tile without putting
iteration logic into systems. All functions are pure and operate on the
immutable :class:`sokoban_universe.state.State` snapshot.

``entities_at`` goes through a reverse index of ``State.position`` that is
cached per position store: the store is a hashable ``PMap`` and every accepted
move produces a new one, so a stale index can never be served.
"""

from functools import lru_cache
from typing import Dict, FrozenSet, List, Mapping, Optional, Set

from sokoban_universe.components import Position
from sokoban_universe.state import State
from sokoban_universe.types import EntityID


@lru_cache(maxsize=4096)
def _position_index(
    position_store: Mapping[EntityID, Position],
) -> Mapping[Position, FrozenSet[EntityID]]:
    index: Dict[Position, Set[EntityID]] = {}
    for eid, pos in position_store.items():
        index.setdefault(pos, set()).add(eid)
    return {pos: frozenset(eids) for pos, eids in index.items()}


def entities_at(state: State, pos: Position) -> FrozenSet[EntityID]:
    """Return entity IDs whose position equals ``pos``."""
    return _position_index(state.position).get(pos, frozenset())


def entities_with_components_at(
    state: State, pos: Position, *component_stores: Mapping[EntityID, object]
) -> List[EntityID]:
    """Return IDs at ``pos`` possessing all provided component stores, sorted."""
    ids_at_pos = set(entities_at(state, pos))
    for store in component_stores:
        ids_at_pos &= set(store.keys())
    return sorted(ids_at_pos)


def first_entity_with_components_at(
    state: State, pos: Position, *component_stores: Mapping[EntityID, object]
) -> Optional[EntityID]:
    """Return the lowest matching ID at ``pos`` or ``None``."""
    matches = entities_with_components_at(state, pos, *component_stores)
    return matches[0] if matches else None


def positions_of(
    state: State, component_store: Mapping[EntityID, object]
) -> List[Position]:
    """Sorted positions of every positioned entity in ``component_store``."""
    return sorted(
        state.position[eid] for eid in component_store if eid in state.position
    )
