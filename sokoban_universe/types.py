"""Common type aliases and enumerations.

``ObjectiveFn`` is the extension point stored on the ``State`` to allow a
pluggable win condition. ``MoveOutcome`` and ``EngineMode`` describe the
result of a move request and the lifecycle of a puzzle engine.
"""

from enum import StrEnum, auto
from typing import Callable, TYPE_CHECKING


# Forward declaration for ObjectiveFn typing to avoid circular imports:
if TYPE_CHECKING:
    from sokoban_universe.state import State

EntityID = int

ObjectiveFn = Callable[["State", "EntityID"], bool]


class MoveOutcome(StrEnum):
    """Result of a single move request.

    Members:
        ACTOR_MOVED: The actor stepped into an empty cell.
        BOX_PUSHED: The actor stepped forward pushing one box ahead of it.
        BLOCKED: Wall, grid edge or an unpushable box; nothing moved.
        ALREADY_COMPLETED: The level is solved and no longer accepts moves.
    """

    ACTOR_MOVED = auto()
    BOX_PUSHED = auto()
    BLOCKED = auto()
    ALREADY_COMPLETED = auto()

    @property
    def accepted(self) -> bool:
        return self in (MoveOutcome.ACTOR_MOVED, MoveOutcome.BOX_PUSHED)

    @property
    def rejected(self) -> bool:
        return not self.accepted


class EngineMode(StrEnum):
    """Engine lifecycle. ``COMPLETED`` is terminal."""

    PLAYABLE = auto()
    COMPLETED = auto()
