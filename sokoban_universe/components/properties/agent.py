"""Agent marker component.

Presence of :class:`Agent` designates the player entity that moves and
pushes. A valid level has exactly one; the reducer uses the first one found
if none is passed explicitly.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Agent:
    """Marker (no fields)."""

    pass
