"""Authoring-time level model, loaders and the built-in level catalogue.

``Level`` is a mutable grid of :class:`EntitySpec` blueprints; ``to_state``
turns it into the immutable ECS :class:`~sokoban_universe.state.State` the
engine plays on. ``loader`` parses tile-code and plain-text descriptions into
levels, failing with :class:`InvalidLevelError`.
"""

from .convert import from_state, to_state
from .entity_spec import EntitySpec
from .grid import Level
from .loader import (
    InvalidLevelError,
    TileCode,
    finalize_level,
    level_from_tiles,
    level_from_xsb,
    load_level,
    load_level_file,
    parse_xsb,
    to_tiles,
)

__all__ = [
    "EntitySpec",
    "InvalidLevelError",
    "Level",
    "TileCode",
    "finalize_level",
    "from_state",
    "level_from_tiles",
    "level_from_xsb",
    "load_level",
    "load_level_file",
    "parse_xsb",
    "to_state",
    "to_tiles",
]
