from __future__ import annotations

from typing import Any, Dict

from pyrsistent import pmap

from sokoban_universe.entity import Entity, entity_id_generator
from sokoban_universe.state import State
from sokoban_universe.types import EntityID
from sokoban_universe.components.properties import Position as PositionComp
from sokoban_universe.levels.grid import Level
from sokoban_universe.levels.entity_spec import EntitySpec, COMPONENT_TO_FIELD


def _init_store_maps() -> Dict[str, Dict[EntityID, Any]]:
    """
    Initialize mutable component-store maps mirroring State; converted to pmaps later.
    """
    stores: Dict[str, Dict[EntityID, Any]] = {
        store_name: {} for store_name in COMPONENT_TO_FIELD.values()
    }
    stores["position"] = {}
    return stores


def to_state(level: Level) -> State:
    """
    Convert a Level into an immutable State.

    Cells are visited row by row (y, then x) and objects in insertion order, so
    entity ids are deterministic: converting the same level twice yields equal
    states.
    """
    entity: Dict[EntityID, Entity] = {}
    stores = _init_store_maps()
    next_eid = entity_id_generator()

    for y in range(level.height):
        for x in range(level.width):
            for obj in level.grid[y][x]:
                eid = next(next_eid)
                entity[eid] = Entity()
                for store_name, comp in obj.iter_components():
                    stores[store_name][eid] = comp
                stores["position"][eid] = PositionComp(x, y)

    return State(
        width=level.width,
        height=level.height,
        objective_fn=level.objective_fn,
        entity=pmap(entity),
        agent=pmap(stores["agent"]),
        blocking=pmap(stores["blocking"]),
        pushable=pmap(stores["pushable"]),
        target=pmap(stores["target"]),
        position=pmap(stores["position"]),
        moves=level.moves,
        pushes=level.pushes,
        win=level.win,
        message=level.message,
    )


def _entity_spec_from_state(state: State, eid: EntityID) -> EntitySpec:
    kwargs: Dict[str, Any] = {}
    for _, store_name in COMPONENT_TO_FIELD.items():
        store = getattr(state, store_name)
        kwargs[store_name] = store.get(eid)
    return EntitySpec(**kwargs)


def from_state(state: State) -> Level:
    """
    Convert an immutable State back into a mutable Level (grid of EntitySpec).

    Positioned entities are placed into `Level.grid[y][x]` in ascending eid
    order; entities without a position or outside the grid are dropped.
    """
    level = Level(
        width=state.width,
        height=state.height,
        objective_fn=state.objective_fn,
        moves=state.moves,
        pushes=state.pushes,
        win=state.win,
        message=state.message,
    )

    for eid in sorted(state.position.keys()):
        pos = state.position[eid]
        if not (0 <= pos.x < level.width and 0 <= pos.y < level.height):
            continue
        level.add((pos.x, pos.y), _entity_spec_from_state(state, eid))

    return level
