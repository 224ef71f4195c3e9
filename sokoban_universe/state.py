"""Core immutable ECS `State` dataclass.

This module defines the frozen :class:`State` object that represents the
whole puzzle at a single turn. Systems are pure functions that take a previous
``State`` plus inputs (an ``Action``) and return a *new* ``State``; no
mutation happens in-place. A rejected move returns the very same object, which
makes "nothing changed" an identity check.

Design notes:

* Component stores are **persistent maps** (``pyrsistent.PMap``) keyed by
    ``EntityID``. Absence of a key means the entity does not possess that
    component.
* Walls (``blocking``) and targets (``target``) are created at load time and
    their positions never change afterwards. Only the agent and the boxes
    (``pushable``) move.
* Whether a box sits on a target is derived from ``position`` on demand (see
    :mod:`sokoban_universe.objectives`); it is never stored.
* ``win`` is the terminal marker. The reducer short-circuits on it.
"""

from dataclasses import dataclass
from typing import Any, Optional
from pyrsistent import PMap, pmap

from sokoban_universe.entity import Entity
from sokoban_universe.components import (
    Agent,
    Blocking,
    Position,
    Pushable,
    Target,
)
from sokoban_universe.types import EntityID, ObjectiveFn


@dataclass(frozen=True)
class State:
    """Immutable ECS puzzle state.

    Instances are *value objects*; every accepted move creates a new
    ``State``. Only persistent data lives here (no caches or handles).

    Attributes:
        width (int): Grid width in tiles.
        height (int): Grid height in tiles.
        objective_fn (ObjectiveFn): Predicate evaluated after each accepted move to set ``win``.
        entity (PMap[EntityID, Entity]): Registry of allocated entities.
        agent (PMap[EntityID, Agent]): The player marker.
        blocking (PMap[EntityID, Blocking]): Walls.
        pushable (PMap[EntityID, Pushable]): Boxes.
        target (PMap[EntityID, Target]): Goal tiles.
        position (PMap[EntityID, Position]): Current grid position of every entity.
        moves (int): Number of accepted moves, pushes included.
        pushes (int): Number of accepted moves that pushed a box.
        win (bool): True once the objective is met; terminal.
        message (str | None): Optional informational / terminal message.
    """

    # Level
    width: int
    height: int
    objective_fn: "ObjectiveFn"

    # Entity
    entity: PMap[EntityID, Entity] = pmap()

    # Components
    agent: PMap[EntityID, Agent] = pmap()
    blocking: PMap[EntityID, Blocking] = pmap()
    pushable: PMap[EntityID, Pushable] = pmap()
    target: PMap[EntityID, Target] = pmap()
    position: PMap[EntityID, Position] = pmap()

    # Status
    moves: int = 0
    pushes: int = 0
    win: bool = False
    message: Optional[str] = None

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse serialization of non-empty fields.

        Returns a persistent map of field name to value, skipping empty
        component maps and the objective callable (replaced by its name).
        Useful for diagnostics without dumping empty stores.
        """
        description: PMap[str, Any] = pmap()
        for field in self.__dataclass_fields__:
            value = getattr(self, field)
            if field == "objective_fn":
                value = getattr(value, "__name__", repr(value))
            elif isinstance(value, type(pmap())) and len(value) == 0:
                continue
            description = description.set(field, value)
        return description
