"""Level progression across a play session.

:class:`GameProgress` is an immutable value: which level is selected, how
many exist, and which have been completed. Every update returns a new value;
whoever drives the session passes it along explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Tuple


@dataclass(frozen=True)
class GameProgress:
    current_level: int
    total_levels: int
    completed: Tuple[bool, ...]

    def __post_init__(self) -> None:
        if self.total_levels <= 0:
            raise ValueError("total_levels must be positive")
        if len(self.completed) != self.total_levels:
            raise ValueError(
                f"completed has {len(self.completed)} flags for {self.total_levels} levels"
            )
        self._check_index(self.current_level)

    @classmethod
    def new(cls, total_levels: int, current_level: int = 0) -> "GameProgress":
        """Fresh progress with nothing completed."""
        return cls(
            current_level=current_level,
            total_levels=total_levels,
            completed=(False,) * total_levels,
        )

    def select(self, index: int) -> "GameProgress":
        """Return progress with ``index`` as the current level."""
        self._check_index(index)
        return replace(self, current_level=index)

    def mark_completed(self, index: Optional[int] = None) -> "GameProgress":
        """Return progress with ``index`` (default: current level) completed."""
        if index is None:
            index = self.current_level
        self._check_index(index)
        flags = list(self.completed)
        flags[index] = True
        return replace(self, completed=tuple(flags))

    def is_completed(self, index: int) -> bool:
        self._check_index(index)
        return self.completed[index]

    @property
    def completed_count(self) -> int:
        return sum(self.completed)

    @property
    def all_completed(self) -> bool:
        return all(self.completed)

    def next_level(self) -> Optional[int]:
        """Index after the current level, or ``None`` on the last one."""
        nxt = self.current_level + 1
        return nxt if nxt < self.total_levels else None

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self.total_levels:
            raise ValueError(f"Level index {index} out of range 0..{self.total_levels - 1}")
