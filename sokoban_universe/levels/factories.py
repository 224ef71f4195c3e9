"""Convenience factory functions for authoring ``EntitySpec`` objects.

Each helper returns a preconfigured :class:`EntitySpec` for one kind of
board object. These are mutable authoring-time blueprints converted into
immutable ECS entities by ``levels.convert.to_state``.
"""

from __future__ import annotations

from sokoban_universe.components.properties import (
    Agent,
    Blocking,
    Pushable,
    Target,
)
from .entity_spec import EntitySpec


def create_agent() -> EntitySpec:
    """The player."""
    return EntitySpec(agent=Agent())


def create_wall() -> EntitySpec:
    """Impassable static wall tile."""
    return EntitySpec(blocking=Blocking())


def create_box() -> EntitySpec:
    """Pushable box."""
    return EntitySpec(pushable=Pushable())


def create_target() -> EntitySpec:
    """Goal tile a box must rest on."""
    return EntitySpec(target=Target())
