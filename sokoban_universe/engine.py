"""Stateful façade over the pure reducer.

:class:`PuzzleEngine` is the command interface a presentation layer talks
to. It holds the current immutable :class:`~sokoban_universe.state.State` and
swaps it for the next one on every accepted move; callers can read state but
never write it.

Lifecycle: ``PLAYABLE`` until the objective holds, then ``COMPLETED`` for
good. The objective is also checked on the state the engine is built from, so
a level that starts solved is ``COMPLETED`` immediately. Restarting means
building a new engine from the initial state (:meth:`PuzzleEngine.restarted`).

Example:

``engine = PuzzleEngine.from_description({"tiles": [["W", "P", "B", "T", "W"]]})``
``engine.attempt_move("right")  # MoveOutcome.BOX_PUSHED``
"""

from typing import Any, Optional

from sokoban_universe.actions import DirectionLike, to_action
from sokoban_universe.levels.loader import load_level
from sokoban_universe.objectives import default_objective_fn
from sokoban_universe.snapshot import EngineSnapshot, take_snapshot
from sokoban_universe.state import State
from sokoban_universe.step import resolve_move
from sokoban_universe.systems.terminal import win_system
from sokoban_universe.types import EngineMode, EntityID, MoveOutcome, ObjectiveFn
from sokoban_universe.utils.terminal import is_valid_state


class PuzzleEngine:
    """Owns one level's state and serializes moves against it.

    The engine is single-threaded; callers issue one move per input event.
    """

    def __init__(self, state: State, agent_id: Optional[EntityID] = None):
        if agent_id is None:
            agent_id = min(state.agent.keys(), default=None)
        if agent_id is None or not is_valid_state(state, agent_id):
            raise ValueError("State contains no positioned agent")
        state = win_system(state, agent_id)
        self._initial_state = state
        self._state = state
        self._agent_id: EntityID = agent_id

    @classmethod
    def from_description(
        cls, description: Any, objective_fn: ObjectiveFn = default_objective_fn
    ) -> "PuzzleEngine":
        """Load a level description (see :func:`~sokoban_universe.levels.loader.load_level`).

        Raises:
            InvalidLevelError: If the description is malformed.
        """
        return cls(load_level(description, objective_fn=objective_fn))

    @property
    def state(self) -> State:
        return self._state

    @property
    def agent_id(self) -> EntityID:
        return self._agent_id

    @property
    def mode(self) -> EngineMode:
        return EngineMode.COMPLETED if self._state.win else EngineMode.PLAYABLE

    def attempt_move(self, direction: DirectionLike) -> MoveOutcome:
        """Try to move the player one tile.

        Args:
            direction: An ``Action``, its name (``"up"``) or a unit ``(dx, dy)``.

        Returns:
            MoveOutcome: ``ACTOR_MOVED`` / ``BOX_PUSHED`` when applied;
            ``BLOCKED`` or ``ALREADY_COMPLETED`` when the state was left as is.

        Raises:
            ValueError: If ``direction`` is not a unit direction.
        """
        action = to_action(direction)
        self._state, outcome = resolve_move(self._state, action, self._agent_id)
        return outcome

    def is_solved(self) -> bool:
        """True iff at least one box exists and all boxes are on targets."""
        return bool(self._state.objective_fn(self._state, self._agent_id))

    def snapshot(self) -> EngineSnapshot:
        return take_snapshot(self._state)

    def restarted(self) -> "PuzzleEngine":
        """Return a fresh engine at this level's initial state."""
        return PuzzleEngine(self._initial_state, self._agent_id)

    def __repr__(self) -> str:
        return (
            f"PuzzleEngine({self._state.width}x{self._state.height}, "
            f"mode={self.mode.value}, moves={self._state.moves})"
        )
