"""Late-bound lookups of other objects' live state."""

import logging
from enum import Enum
from typing import Any, Optional, Protocol

from .geometry import Point, as_point
from .state import ScalePair, as_scale_pair

logger = logging.getLogger("VectorMotion.core.resolver")


class SymbolKind(str, Enum):
    POSITION = "position"
    ANGLE = "angle"
    SCALE = "scale"


class UnresolvedSymbolError(LookupError):
    """A transition references a name that has no published state.

    This is an authoring mistake (typo, or the referenced object is drawn
    after the one referencing it) and is not recovered from.
    """

    def __init__(self, name: str, kind: SymbolKind):
        self.name = name
        self.kind = kind
        super().__init__(f"No {kind.value} published for symbol '{name}'")


class SymbolResolver(Protocol):
    def resolve(self, name: str, kind: SymbolKind) -> Any: ...


class FrameSnapshot:
    """Per-frame map of published object state, queried by name and kind."""

    def __init__(self):
        self._values: dict[SymbolKind, dict[str, Any]] = {kind: {} for kind in SymbolKind}

    def publish(self, name: str, position=None, angle: Optional[float] = None,
                scale=None):
        if position is not None:
            self._values[SymbolKind.POSITION][name] = as_point(position)
        if angle is not None:
            self._values[SymbolKind.ANGLE][name] = float(angle)
        if scale is not None:
            self._values[SymbolKind.SCALE][name] = as_scale_pair(scale)

    def resolve(self, name: str, kind: SymbolKind) -> Any:
        try:
            return self._values[kind][name]
        except KeyError:
            raise UnresolvedSymbolError(name, kind) from None

    def position_of(self, name: str) -> Point:
        return self.resolve(name, SymbolKind.POSITION)

    def angle_of(self, name: str) -> float:
        return self.resolve(name, SymbolKind.ANGLE)

    def scale_of(self, name: str) -> ScalePair:
        return self.resolve(name, SymbolKind.SCALE)

    def names(self) -> set[str]:
        return {name for values in self._values.values() for name in values}

    def clear(self):
        for values in self._values.values():
            values.clear()
