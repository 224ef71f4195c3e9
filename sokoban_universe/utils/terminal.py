"""Terminal condition helper predicates."""

from sokoban_universe.state import State
from sokoban_universe.types import EntityID


def is_valid_state(state: State, agent_id: EntityID) -> bool:
    """Return True if the agent exists and has a position."""
    return agent_id in state.agent and state.position.get(agent_id) is not None


def is_terminal_state(state: State) -> bool:
    """Return True once the level has been won."""
    return state.win
