"""Terminal condition system.

Sets ``state.win`` exactly once when the objective is met. The flag is
terminal: the reducer refuses further moves once it is set.
"""

from dataclasses import replace
from sokoban_universe.state import State
from sokoban_universe.types import EntityID
from sokoban_universe.utils.terminal import is_terminal_state, is_valid_state

WIN_MESSAGE = "Level complete!"


def win_system(state: State, agent_id: EntityID) -> State:
    """Set ``win`` flag if objective function returns True for agent.

    Skips evaluation if state already terminal or agent invalid.
    """
    if not is_valid_state(state, agent_id) or is_terminal_state(state):
        return state

    if state.objective_fn(state, agent_id):
        return replace(state, win=True, message=WIN_MESSAGE)
    return state
