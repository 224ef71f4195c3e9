"""Gymnasium environment wrapper for Sokoban Universe.

Provides a structured observation pairing an integer-coded board with an info
dictionary (status counters and environment config). Reward is the change in
the number of boxes on targets, plus a bonus when the level is solved.
``terminated`` is ``True`` on a solve, ``truncated`` when the step budget runs
out first.

Board codes (``np.int8``): 0 floor, 1 wall, 2 box, 3 target, 4 player,
5 box on target, 6 player on target.

Usage:

``env = SokobanEnv(GameConfig(start_level=1), max_steps=100)``

The environment is purposely *not* vectorized; wrap externally if needed.
"""

import string

import gymnasium as gym
import numpy as np
from typing import Any, Callable, Dict, Optional, Tuple

from sokoban_universe.actions import Action, GymAction
from sokoban_universe.config import GameConfig, resolve_level_source, resolve_objective
from sokoban_universe.objectives import boxes_on_target
from sokoban_universe.state import State
from sokoban_universe.step import resolve_move

ObsType = Dict[str, Any]

FLOOR, WALL, BOX, TARGET, PLAYER, BOX_ON_TARGET, PLAYER_ON_TARGET = range(7)

SOLVE_BONUS = 1.0
DEFAULT_MAX_STEPS = 200

# Objective function names are identifiers
TEXT_CHARSET = string.ascii_letters + string.digits + "_"


def board_array(state: State) -> np.ndarray:
    """Encode ``state`` as an ``(height, width)`` int8 board."""
    board = np.full((state.height, state.width), FLOOR, dtype=np.int8)
    for eid in state.blocking:
        pos = state.position[eid]
        board[pos.y, pos.x] = WALL
    for eid in state.target:
        pos = state.position[eid]
        board[pos.y, pos.x] = TARGET
    for eid in state.pushable:
        pos = state.position[eid]
        board[pos.y, pos.x] = BOX_ON_TARGET if board[pos.y, pos.x] == TARGET else BOX
    for eid in state.agent:
        pos = state.position[eid]
        board[pos.y, pos.x] = PLAYER_ON_TARGET if board[pos.y, pos.x] == TARGET else PLAYER
    return board


def env_status_observation_dict(state: State) -> Dict[str, Any]:
    """Status portion of observation (phase and counters)."""
    return {
        "phase": "win" if state.win else "ongoing",
        "moves": int(state.moves),
        "pushes": int(state.pushes),
        "boxes_on_target": len(boxes_on_target(state)),
        "num_boxes": len(state.pushable),
    }


def env_config_observation_dict(state: State) -> Dict[str, Any]:
    """Config portion of observation (objective name, dimensions)."""
    objective_fn_name = getattr(state.objective_fn, "__name__", str(state.objective_fn))
    return {
        "objective_fn": objective_fn_name,
        "width": state.width,
        "height": state.height,
    }


class SokobanEnv(gym.Env[ObsType, np.integer]):
    """Gymnasium ``Env`` over a single Sokoban level.

    The action space is ``Discrete(len(GymAction))``; see
    :mod:`sokoban_universe.actions`. Every ``reset`` reloads the same level.
    """

    metadata: Dict[str, Any] = {"render_modes": []}

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        max_steps: int = DEFAULT_MAX_STEPS,
        initial_state_fn: Optional[Callable[[], State]] = None,
    ):
        """Create a new environment instance.

        Arguments:
            config: Level source / level index / objective to play. Ignored
                when ``initial_state_fn`` is given.
            max_steps: Step budget before the episode is truncated.
            initial_state_fn: Zero-arg callable returning a fully built ``State``.
        """
        from gymnasium import spaces

        if max_steps <= 0:
            raise ValueError("max_steps must be positive")

        if initial_state_fn is None:
            config = config or GameConfig()
            source = resolve_level_source(config)
            objective_fn = resolve_objective(config.objective)
            level_index = config.start_level

            def _build_configured_level() -> State:
                return source.build(level_index, objective_fn)

            initial_state_fn = _build_configured_level

        self._initial_state_fn = initial_state_fn
        self._max_steps = max_steps

        # Runtime state
        self.state: Optional[State] = None
        self._steps = 0

        # The level fixes the board shape
        probe = self._initial_state_fn()
        self.width: int = probe.width
        self.height: int = probe.height

        def int_box(low: int, high: int) -> spaces.Box:
            return spaces.Box(
                low=np.array(low, dtype=np.int64),
                high=np.array(high, dtype=np.int64),
                shape=(),
                dtype=np.int64,
            )

        self.observation_space = spaces.Dict(
            {
                "board": spaces.Box(
                    low=FLOOR,
                    high=PLAYER_ON_TARGET,
                    shape=(self.height, self.width),
                    dtype=np.int8,
                ),
                "info": spaces.Dict(
                    {
                        "status": spaces.Dict(
                            {
                                "phase": spaces.Text(max_length=32, charset=TEXT_CHARSET),
                                "moves": int_box(0, 1_000_000_000),
                                "pushes": int_box(0, 1_000_000_000),
                                "boxes_on_target": int_box(0, 1_000_000),
                                "num_boxes": int_box(0, 1_000_000),
                            }
                        ),
                        "config": spaces.Dict(
                            {
                                "objective_fn": spaces.Text(max_length=128, charset=TEXT_CHARSET),
                                "width": int_box(1, 10_000),
                                "height": int_box(1, 10_000),
                            }
                        ),
                    }
                ),
            }
        )

        self.action_space = spaces.Discrete(len(GymAction))

        self.reset()

    def reset(
        self, *, seed: Optional[int] = None, options: Optional[Dict[str, object]] = None
    ) -> Tuple[ObsType, Dict[str, object]]:
        """Start a new episode on a fresh copy of the level."""
        super().reset(seed=seed)
        self.state = self._initial_state_fn()
        self._steps = 0
        return self._get_obs(), {}

    def step(
        self, action: np.integer
    ) -> Tuple[ObsType, float, bool, bool, Dict[str, object]]:
        """Apply one environment step.

        Arguments:
            action: Integer index into ``GymAction``.

        Returns:
            (observation, reward, terminated, truncated, info)
        """
        assert self.state is not None

        if not 0 <= int(action) < len(GymAction):
            raise ValueError(f"Invalid action: {action}")
        move = Action[GymAction(int(action)).name]

        prev_on_target = len(boxes_on_target(self.state))
        was_won = self.state.win
        self.state, outcome = resolve_move(self.state, move)
        self._steps += 1

        reward = float(len(boxes_on_target(self.state)) - prev_on_target)
        if self.state.win and not was_won:
            reward += SOLVE_BONUS
        terminated = self.state.win
        truncated = not terminated and self._steps >= self._max_steps
        return self._get_obs(), reward, terminated, truncated, {"outcome": outcome.value}

    def state_info(self) -> Dict[str, Dict[str, Any]]:
        """Return structured ``info`` sub-dict used in observations."""
        assert self.state is not None
        return {
            "status": env_status_observation_dict(self.state),
            "config": env_config_observation_dict(self.state),
        }

    def _get_obs(self) -> ObsType:
        assert self.state is not None
        return {"board": board_array(self.state), "info": self.state_info()}
