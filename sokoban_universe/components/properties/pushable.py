from dataclasses import dataclass


@dataclass(frozen=True)
class Pushable:
    """Marker for a box.

    A push happens when the agent moves into a tile occupied by a pushable
    entity; the box travels one more tile in the same direction if that tile
    is in bounds and holds neither a wall nor another box. Boxes never push
    each other.
    """

    pass
