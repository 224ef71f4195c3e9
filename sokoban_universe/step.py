"""State reducer and move orchestration.

This module wires the systems together to implement a single *turn*
transition for a directional ``Action``. :func:`resolve_move` is the only
public mutation entry point for gameplay progression and is pure: it returns
a *new* :class:`sokoban_universe.state.State` together with the
:class:`~sokoban_universe.types.MoveOutcome`.

Ordering:

1. Terminal states short-circuit with ``ALREADY_COMPLETED``.
2. ``push_system`` is tried first; a successful push is a ``BOX_PUSHED``.
3. Otherwise ``movement_system`` tries a plain step (``ACTOR_MOVED``).
4. If neither changed the state the move is ``BLOCKED`` and the *input* state
   object is returned untouched.
5. After an accepted move the counters are bumped and ``win_system`` runs.
"""

from dataclasses import replace
from typing import Optional, Tuple

from sokoban_universe.actions import Action, MOVE_ACTIONS
from sokoban_universe.moves import default_move_fn
from sokoban_universe.state import State
from sokoban_universe.systems.movement import movement_system
from sokoban_universe.systems.push import push_system
from sokoban_universe.systems.terminal import win_system
from sokoban_universe.types import EntityID, MoveOutcome
from sokoban_universe.utils.terminal import is_terminal_state, is_valid_state


def resolve_move(
    state: State, action: Action, agent_id: Optional[EntityID] = None
) -> Tuple[State, MoveOutcome]:
    """Apply one directional move and report what happened.

    Args:
        state (State): Previous immutable state.
        action (Action): Directional ``Action`` to apply.
        agent_id (EntityID | None): Explicit agent entity id. If ``None`` the
            lowest id in ``state.agent`` is used.

    Returns:
        Tuple[State, MoveOutcome]: Next state and outcome. For rejected
        outcomes the returned state is ``state`` itself.

    Raises:
        ValueError: If there is no agent or the action is not a move.
    """
    if action not in MOVE_ACTIONS:
        raise ValueError(f"Action is not valid: {action!r}")

    if agent_id is None and (agent_id := min(state.agent.keys(), default=None)) is None:
        raise ValueError("State contains no agent")

    if not is_valid_state(state, agent_id):
        raise ValueError(f"Agent {agent_id} has no position")

    if is_terminal_state(state):
        return state, MoveOutcome.ALREADY_COMPLETED

    next_pos = default_move_fn(state, agent_id, action)

    pushed_state = push_system(state, agent_id, next_pos)
    if pushed_state is not state:
        return _after_move(pushed_state, agent_id, pushed=True), MoveOutcome.BOX_PUSHED

    moved_state = movement_system(state, agent_id, next_pos)
    if moved_state is not state:
        return _after_move(moved_state, agent_id, pushed=False), MoveOutcome.ACTOR_MOVED

    return state, MoveOutcome.BLOCKED


def step(state: State, action: Action, agent_id: Optional[EntityID] = None) -> State:
    """Advance the puzzle by one action, discarding the outcome.

    See :func:`resolve_move` for arguments and errors.
    """
    next_state, _ = resolve_move(state, action, agent_id)
    return next_state


def _after_move(state: State, agent_id: EntityID, pushed: bool) -> State:
    """Bump counters and evaluate the objective after an accepted move."""
    state = replace(
        state,
        moves=state.moves + 1,
        pushes=state.pushes + (1 if pushed else 0),
    )
    return win_system(state, agent_id)
