"""Property component aggregates.

This module re-exports the *property* components that describe what an
entity is: the player (:class:`Agent`), static walls (:class:`Blocking`),
boxes (:class:`Pushable`), goal tiles (:class:`Target`) and where it is
(:class:`Position`). Systems read these dataclasses to validate moves and to
evaluate the objective.

All properties are immutable dataclasses; moving an entity means storing a
new :class:`Position` for it in the next ``State``.
"""

from .agent import Agent
from .blocking import Blocking
from .position import Position
from .pushable import Pushable
from .target import Target

__all__ = [
    "Agent",
    "Blocking",
    "Position",
    "Pushable",
    "Target",
]
