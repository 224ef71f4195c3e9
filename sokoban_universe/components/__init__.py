"""sokoban_universe.components
=================================

Aggregate import surface for the ECS component dataclasses used by the engine.

The symbols re-exported here let downstream code import components from a
single place, e.g.::

    from sokoban_universe.components import Position, Pushable, Target

All component classes are simple ``@dataclass`` value objects; they carry no
behavior beyond their fields and are read by systems during a step.
"""

from .properties import Agent
from .properties import Blocking
from .properties import Position
from .properties import Pushable
from .properties import Target

__all__ = [
    "Agent",
    "Blocking",
    "Position",
    "Pushable",
    "Target",
]
