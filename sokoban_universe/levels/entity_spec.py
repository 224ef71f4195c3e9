from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple, Type

from sokoban_universe.components.properties import (
    Agent,
    Blocking,
    Pushable,
    Target,
)

# Map component class -> State store name (used by convert.py)
COMPONENT_TO_FIELD: Dict[Type[Any], str] = {
    Agent: "agent",
    Blocking: "blocking",
    Pushable: "pushable",
    Target: "target",
}


@dataclass
class EntitySpec:
    """
    Mutable bag of ECS components for authoring (no Position here; the cell
    of the ``Level`` grid it is placed in decides that).
    """

    agent: Optional[Agent] = None
    blocking: Optional[Blocking] = None
    pushable: Optional[Pushable] = None
    target: Optional[Target] = None

    def iter_components(self) -> List[Tuple[str, Any]]:
        """
        Return (store_name, component) for non-None component fields that map to State stores.
        """
        out: List[Tuple[str, Any]] = []
        for _, store_name in COMPONENT_TO_FIELD.items():
            comp = getattr(self, store_name, None)
            if comp is not None:
                out.append((store_name, comp))
        return out


__all__ = ["EntitySpec", "COMPONENT_TO_FIELD"]
