from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

from sokoban_universe.objectives import default_objective_fn
from sokoban_universe.types import ObjectiveFn
from .entity_spec import EntitySpec

# Grid coordinate alias (x, y)
Position = Tuple[int, int]


@dataclass
class Level:
    """
    Grid-centric, authoring-time level representation.
    - `grid[y][x]` is a list of `EntitySpec` instances at that cell.
    - Level stores the objective_fn and simple meta (moves/pushes/win/message).
    - This module is State-agnostic. Use the converter (levels.convert.to_state / from_state)
      to bridge between Level and the immutable ECS State.
    """

    width: int
    height: int
    objective_fn: ObjectiveFn = default_objective_fn

    # 2D array of cells: each cell holds a list of EntitySpec
    grid: List[List[List[EntitySpec]]] = field(init=False)

    # Optional meta (carried through conversion)
    moves: int = 0
    pushes: int = 0
    win: bool = False
    message: Optional[str] = None

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Level size must be positive: {self.width}x{self.height}")
        self.grid = [[[] for _ in range(self.width)] for _ in range(self.height)]

    # -------- Grid editing API (purely authoring-time) --------

    def add(self, pos: Position, obj: EntitySpec) -> None:
        """
        Place an EntitySpec into the cell at pos (x, y).
        """
        x, y = pos
        self._check_bounds(x, y)
        self.grid[y][x].append(obj)

    def add_many(self, items: List[Tuple[Position, EntitySpec]]) -> None:
        """
        Place multiple EntitySpec instances. Each entry is (pos, obj).
        """
        for pos, obj in items:
            self.add(pos, obj)

    def objects_at(self, pos: Position) -> List[EntitySpec]:
        """
        Return a shallow copy of the list of objects at pos.
        """
        x, y = pos
        self._check_bounds(x, y)
        return list(self.grid[y][x])

    def positions_where(self, predicate: Callable[[EntitySpec], bool]) -> List[Position]:
        """
        Return every (x, y) holding at least one object matching predicate, row by row.
        """
        return [
            (x, y)
            for y in range(self.height)
            for x in range(self.width)
            if any(predicate(o) for o in self.grid[y][x])
        ]

    # -------- Internal helpers --------

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"Out of bounds: {(x, y)} for grid {self.width}x{self.height}"
            )
