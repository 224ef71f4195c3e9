"""Entity primitives & ID generation.

The engine models each *thing* on the board (the player, a box, a wall, a
target) as an ``EntityID`` plus the component dataclasses stored under that
id in the persistent maps of :class:`sokoban_universe.state.State`.

IDs are *not* recycled. A level loader allocates ids from a fresh counter so
that loading the same description twice yields identical states.

Examples
--------
>>> from sokoban_universe.entity import entity_id_generator
>>> ids = entity_id_generator()
>>> next(ids), next(ids)
(0, 1)
"""

from dataclasses import dataclass
from typing import Iterator

from sokoban_universe.types import EntityID


@dataclass(frozen=True)
class Entity:
    """Registry marker for an allocated entity id."""

    pass


def entity_id_generator(start: EntityID = 0) -> Iterator[EntityID]:
    """Yield an infinite sequence of monotonically increasing entity IDs."""
    eid = start
    while True:
        yield eid
        eid += 1


_entity_id_gen = entity_id_generator()


def new_entity_id() -> EntityID:
    """Return a newly allocated process-wide unique entity ID."""
    return next(_entity_id_gen)
