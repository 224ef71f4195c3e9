"""Game configuration and the level source registry.

``GameConfig`` selects *where* levels come from and which objective decides
a win. Level families are plugged in as :class:`LevelSource` entries; the
built-in catalogue registers itself as ``"classic"`` when this module is
imported.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from sokoban_universe.levels import catalog
from sokoban_universe.objectives import OBJECTIVE_FN_REGISTRY
from sokoban_universe.state import State
from sokoban_universe.types import ObjectiveFn

DEFAULT_LEVEL_SOURCE = "classic"


@dataclass(frozen=True)
class GameConfig:
    """Session settings.

    Attributes:
        level_source: Name of a registered :class:`LevelSource`.
        start_level: 0-based index of the first level to load.
        objective: Key into ``OBJECTIVE_FN_REGISTRY``.
    """

    level_source: str = DEFAULT_LEVEL_SOURCE
    start_level: int = 0
    objective: str = "default"


@dataclass
class LevelSource:
    """Plugin describing a level family.

    Attributes:
        name: Human-readable name used for lookup.
        total_levels: Number of levels the source provides.
        build: (index, objective_fn) -> fresh ``State`` for that level.
    """

    name: str
    total_levels: int
    build: Callable[[int, ObjectiveFn], State]


_LEVEL_SOURCE_REGISTRY: List[LevelSource] = []
_NAME_INDEX: Dict[str, LevelSource] = {}


def register_level_source(source: LevelSource) -> None:
    if source.name in _NAME_INDEX:
        # Re-registering a name replaces the existing entry in place.
        existing_idx = next(
            i for i, s in enumerate(_LEVEL_SOURCE_REGISTRY) if s.name == source.name
        )
        _LEVEL_SOURCE_REGISTRY[existing_idx] = source
    else:
        _LEVEL_SOURCE_REGISTRY.append(source)
    _NAME_INDEX[source.name] = source


def all_level_sources() -> List[LevelSource]:
    """Return registered sources sorted by name for stable ordering."""
    return sorted(_LEVEL_SOURCE_REGISTRY, key=lambda s: s.name.lower())


def find_level_source_by_name(name: str) -> Optional[LevelSource]:
    return _NAME_INDEX.get(name)


def resolve_level_source(config: GameConfig) -> LevelSource:
    """Return the source named by ``config``.

    Raises:
        ValueError: If no source with that name is registered.
    """
    source = find_level_source_by_name(config.level_source)
    if source is None:
        raise ValueError(f"No registered level source named {config.level_source!r}")
    return source


def resolve_objective(name: str) -> ObjectiveFn:
    """Look up an objective predicate by registry name.

    Raises:
        ValueError: If ``name`` is not in ``OBJECTIVE_FN_REGISTRY``.
    """
    try:
        return OBJECTIVE_FN_REGISTRY[name]
    except KeyError:
        raise ValueError(
            f"Unknown objective {name!r}; expected one of {sorted(OBJECTIVE_FN_REGISTRY)}"
        ) from None


register_level_source(
    LevelSource(
        name=DEFAULT_LEVEL_SOURCE,
        total_levels=catalog.TOTAL_LEVELS,
        build=catalog.build_level,
    )
)
