"""Read-only views of a puzzle state for presentation layers.

A snapshot holds plain positions and derived flags only; it shares nothing
mutable with the engine, compares by value, and is cheap to diff between
turns.
"""

from dataclasses import dataclass
from typing import Tuple

from sokoban_universe.components import Position
from sokoban_universe.objectives import is_box_on_target
from sokoban_universe.state import State
from sokoban_universe.utils.ecs import positions_of


@dataclass(frozen=True)
class BoxView:
    position: Position
    on_target: bool


@dataclass(frozen=True)
class EngineSnapshot:
    """Renderable view of a puzzle.

    Attributes:
        width: Grid width in tiles.
        height: Grid height in tiles.
        actor: Player position.
        boxes: Boxes sorted by position, each with its derived ``on_target`` flag.
        targets: Target positions, sorted.
        walls: Wall positions, sorted.
        moves: Accepted moves so far.
        pushes: Accepted moves that pushed a box.
        solved: Whether the level has been completed.
    """

    width: int
    height: int
    actor: Position
    boxes: Tuple[BoxView, ...]
    targets: Tuple[Position, ...]
    walls: Tuple[Position, ...]
    moves: int = 0
    pushes: int = 0
    solved: bool = False

    @property
    def boxes_on_target(self) -> int:
        return sum(1 for box in self.boxes if box.on_target)


def take_snapshot(state: State) -> EngineSnapshot:
    """Build an :class:`EngineSnapshot` from ``state``.

    Raises:
        ValueError: If the state has no positioned agent.
    """
    agent_id = min(state.agent.keys(), default=None)
    if agent_id is None or agent_id not in state.position:
        raise ValueError("State contains no positioned agent")

    boxes = sorted(
        (
            BoxView(position=state.position[eid], on_target=is_box_on_target(state, eid))
            for eid in state.pushable
            if eid in state.position
        ),
        key=lambda box: box.position,
    )
    return EngineSnapshot(
        width=state.width,
        height=state.height,
        actor=state.position[agent_id],
        boxes=tuple(boxes),
        targets=tuple(positions_of(state, state.target)),
        walls=tuple(positions_of(state, state.blocking)),
        moves=state.moves,
        pushes=state.pushes,
        solved=state.win,
    )
