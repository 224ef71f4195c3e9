"""Action enumerations.

Defines the human readable :class:`Action` (string enum) used internally and
a stable integer :class:`GymAction` mapping for Gymnasium compatibility.

``MOVE_ACTIONS`` is the canonical ordered list of movement actions and
``ACTION_DELTAS`` maps each of them to its unit ``(dx, dy)`` vector. ``y``
grows downwards, so ``UP`` is ``(0, -1)``.
"""

from enum import IntEnum, StrEnum, auto
from typing import Dict, Tuple, Union


class Action(StrEnum):
    """String enum of player actions (the four cardinal directions)."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()


MOVE_ACTIONS = [Action.UP, Action.DOWN, Action.LEFT, Action.RIGHT]

ACTION_DELTAS: Dict[Action, Tuple[int, int]] = {
    Action.UP: (0, -1),
    Action.DOWN: (0, 1),
    Action.LEFT: (-1, 0),
    Action.RIGHT: (1, 0),
}

DirectionLike = Union[Action, str, Tuple[int, int]]


class GymAction(IntEnum):
    """Stable integer mapping for integration with Gymnasium ``Discrete`` spaces."""

    UP = 0  # start at 0 for explicitness
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()


def to_action(direction: DirectionLike) -> Action:
    """Normalize an ``Action``, its string value or a unit delta to ``Action``.

    Raises:
        ValueError: If ``direction`` is not one of the four unit directions.
    """
    if isinstance(direction, Action):
        return direction
    if isinstance(direction, str):
        try:
            return Action(direction.lower())
        except ValueError:
            raise ValueError(f"Unknown direction: {direction!r}") from None
    if isinstance(direction, tuple):
        for action, delta in ACTION_DELTAS.items():
            if delta == direction:
                return action
    raise ValueError(f"Not a unit direction: {direction!r}")
