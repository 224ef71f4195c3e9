from typing import TypedDict

from pyrsistent import pmap

from sokoban_universe.components import (
    Agent,
    Blocking,
    Position,
    Pushable,
    Target,
)
from sokoban_universe.entity import Entity, new_entity_id
from sokoban_universe.invariants import state_violations
from sokoban_universe.objectives import default_objective_fn
from sokoban_universe.state import State
from sokoban_universe.types import EntityID, ObjectiveFn


class SokobanEntities(TypedDict):
    agent_id: EntityID
    box_ids: list[EntityID]
    wall_ids: list[EntityID]
    target_ids: list[EntityID]


def make_sokoban_state(
    agent_pos: tuple[int, int],
    box_positions: list[tuple[int, int]] | None = None,
    wall_positions: list[tuple[int, int]] | None = None,
    target_positions: list[tuple[int, int]] | None = None,
    width: int = 5,
    height: int = 5,
    objective_fn: ObjectiveFn = default_objective_fn,
) -> tuple[State, SokobanEntities]:
    """Agent plus any number of boxes, walls and targets, built directly as ECS stores."""
    pos: dict[EntityID, Position] = {}
    entity: dict[EntityID, Entity] = {}
    pushable: dict[EntityID, Pushable] = {}
    blocking: dict[EntityID, Blocking] = {}
    target: dict[EntityID, Target] = {}

    agent_id = new_entity_id()
    pos[agent_id] = Position(*agent_pos)
    entity[agent_id] = Entity()

    box_ids: list[EntityID] = []
    for bpos in box_positions or []:
        bid = new_entity_id()
        pos[bid] = Position(*bpos)
        pushable[bid] = Pushable()
        entity[bid] = Entity()
        box_ids.append(bid)

    wall_ids: list[EntityID] = []
    for wpos in wall_positions or []:
        wid = new_entity_id()
        pos[wid] = Position(*wpos)
        blocking[wid] = Blocking()
        entity[wid] = Entity()
        wall_ids.append(wid)

    target_ids: list[EntityID] = []
    for tpos in target_positions or []:
        tid = new_entity_id()
        pos[tid] = Position(*tpos)
        target[tid] = Target()
        entity[tid] = Entity()
        target_ids.append(tid)

    state = State(
        width=width,
        height=height,
        objective_fn=objective_fn,
        entity=pmap(entity),
        agent=pmap({agent_id: Agent()}),
        blocking=pmap(blocking),
        pushable=pmap(pushable),
        target=pmap(target),
        position=pmap(pos),
    )
    return state, SokobanEntities(
        agent_id=agent_id, box_ids=box_ids, wall_ids=wall_ids, target_ids=target_ids
    )


def border(width: int, height: int) -> list[tuple[int, int]]:
    """Wall ring around a ``width`` x ``height`` grid."""
    cells: set[tuple[int, int]] = set()
    for x in range(width):
        cells.add((x, 0))
        cells.add((x, height - 1))
    for y in range(height):
        cells.add((0, y))
        cells.add((width - 1, y))
    return sorted(cells)


def assert_entity_positions(
    state: State, expected: dict[EntityID, tuple[int, int]],
) -> None:
    """Check that expected entities are at the right positions."""
    for eid, (x, y) in expected.items():
        actual = state.position.get(eid)
        assert actual == Position(x, y), (
            f"Entity {eid} expected at {(x, y)}, got {actual}"
        )


def assert_legal(state: State) -> None:
    problems = state_violations(state)
    assert problems == [], problems
