"""Target component.

Marks a goal tile. Targets are static and never block movement; a box is
*on target* whenever a target entity shares its position. That flag is always
derived from the current positions and never stored.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Target:
    """Marker (no fields)."""

    pass
