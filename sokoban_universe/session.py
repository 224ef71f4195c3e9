"""Play session: the current puzzle plus progression through a level source.

:class:`GameSession` is what a front end drives between screens. It loads
levels from the configured :class:`~sokoban_universe.config.LevelSource`,
forwards move intents to the current :class:`PuzzleEngine`, records completed
levels in an explicit :class:`GameProgress`, and restarts or advances levels
by building fresh engines.
"""

from __future__ import annotations

import logging
from typing import Optional

from sokoban_universe.actions import DirectionLike
from sokoban_universe.config import GameConfig, resolve_level_source, resolve_objective
from sokoban_universe.engine import PuzzleEngine
from sokoban_universe.progress import GameProgress
from sokoban_universe.types import EngineMode, MoveOutcome

logger = logging.getLogger(__name__)


class GameSession:
    """Tracks the active level and progress for one player."""

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        progress: Optional[GameProgress] = None,
    ) -> None:
        """Load the configured source and start on the current level.

        Raises:
            ValueError: Unknown level source / objective, or ``progress`` sized
                for a different number of levels than the source has.
        """
        self._config = config or GameConfig()
        self._source = resolve_level_source(self._config)
        self._objective_fn = resolve_objective(self._config.objective)
        if progress is None:
            progress = GameProgress.new(self._source.total_levels, self._config.start_level)
        elif progress.total_levels != self._source.total_levels:
            raise ValueError(
                f"Progress tracks {progress.total_levels} levels but source "
                f"{self._source.name!r} has {self._source.total_levels}"
            )
        self._progress = progress
        self._engine = self._load(progress.current_level)

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def progress(self) -> GameProgress:
        return self._progress

    @property
    def engine(self) -> PuzzleEngine:
        return self._engine

    @property
    def current_level(self) -> int:
        return self._progress.current_level

    def start_level(self, index: int) -> PuzzleEngine:
        """Select level ``index`` and load it from scratch."""
        self._progress = self._progress.select(index)
        self._engine = self._load(index)
        return self._engine

    def move(self, direction: DirectionLike) -> MoveOutcome:
        """Forward a move intent; record the level once the engine locks."""
        outcome = self._engine.attempt_move(direction)
        if outcome.rejected:
            logger.debug("Move %s on level %d rejected: %s", direction, self.current_level, outcome)
            return outcome

        if self._engine.mode == EngineMode.COMPLETED:
            self._progress = self._progress.mark_completed()
            snap = self._engine.snapshot()
            logger.info(
                "Level %d completed in %d moves (%d pushes)",
                self.current_level,
                snap.moves,
                snap.pushes,
            )
        return outcome

    def restart(self) -> PuzzleEngine:
        """Discard the current attempt and start the same level again."""
        logger.info("Restarting level %d", self.current_level)
        self._engine = self._engine.restarted()
        return self._engine

    def continue_to_next(self) -> Optional[PuzzleEngine]:
        """Load the level after the current one, or return ``None`` on the last."""
        nxt = self._progress.next_level()
        if nxt is None:
            logger.info(
                "No level after %d; %d of %d completed",
                self.current_level,
                self._progress.completed_count,
                self._progress.total_levels,
            )
            return None
        return self.start_level(nxt)

    def _load(self, index: int) -> PuzzleEngine:
        state = self._source.build(index, self._objective_fn)
        logger.info(
            "Loaded level %d from %r (%dx%d, %d boxes)",
            index,
            self._source.name,
            state.width,
            state.height,
            len(state.pushable),
        )
        return PuzzleEngine(state)
