"""Position component.

Immutable integer grid coordinates. Stored in ``State.position`` keyed by
entity id. Every entity on the board has exactly one position.
"""

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Position:
    """Grid coordinate.

    Attributes:
        x: Column index (0 at left).
        y: Row index (0 at top).
    """

    x: int
    y: int

    def offset(self, dx: int, dy: int) -> "Position":
        """Return the position shifted by ``(dx, dy)``."""
        return Position(self.x + dx, self.y + dy)
