"""Blocking component.

Marks static terrain (walls) that neither the agent nor a pushed box may
enter. Blocking entities never move.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Blocking:
    """Marker (no data)."""

    pass
