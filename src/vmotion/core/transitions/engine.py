"""Interpolation engine: turn descriptors into per-frame transform values.

Symbolic endpoints are resolved against the resolver on every call, so a
transition towards a moving object follows it frame by frame. The only
value kept between frames is the starting scale of a ``Scaling`` with
``compute_from_once`` set.
"""

import logging
from typing import TYPE_CHECKING

from ..geometry import lerp
from ..resolver import SymbolKind, SymbolResolver
from .descriptors import Rotation, Scaling, SymbolRef, Translation
from .internal import InternalRotation, InternalScaling, InternalTranslation

if TYPE_CHECKING:
    from ..action import Action

logger = logging.getLogger("VectorMotion.core.transitions.engine")


def _resolve(value, kind: SymbolKind, resolver: SymbolResolver):
    if isinstance(value, SymbolRef):
        return resolver.resolve(value.name, kind)
    return value


def compute_translation(internal: InternalTranslation, translation: Translation,
                        t: float, resolver: SymbolResolver):
    start = _resolve(translation.from_, SymbolKind.POSITION, resolver)
    end = _resolve(translation.to, SymbolKind.POSITION, resolver)
    internal.by = lerp(start, end, t)


def compute_rotation(internal: InternalRotation, rotation: Rotation,
                     t: float, resolver: SymbolResolver):
    start = _resolve(rotation.from_, SymbolKind.ANGLE, resolver)
    end = _resolve(rotation.to, SymbolKind.ANGLE, resolver)
    internal.angle = lerp(start, end, t)
    internal.center = _resolve(rotation.center, SymbolKind.POSITION, resolver)


def compute_scaling(internal: InternalScaling, scaling: Scaling, t: float,
                    resolver: SymbolResolver, first_frame: bool):
    if not scaling.compute_from_once:
        start = _resolve(scaling.from_, SymbolKind.SCALE, resolver)
    elif first_frame or internal.cached_from is None:
        start = _resolve(scaling.from_, SymbolKind.SCALE, resolver)
        internal.cached_from = start
    else:
        start = internal.cached_from
    end = _resolve(scaling.to, SymbolKind.SCALE, resolver)
    internal.scale = lerp(tuple(start), tuple(end), t)


def compute_transition(internal, transition, action: "Action", frame: int,
                       resolver: SymbolResolver):
    """Update ``internal`` in place for ``frame``."""
    t = action.interpolation(frame)
    match (transition, internal):
        case (Translation(), InternalTranslation()):
            compute_translation(internal, transition, t, resolver)
        case (Rotation(), InternalRotation()):
            compute_rotation(internal, transition, t, resolver)
        case (Scaling(), InternalScaling()):
            compute_scaling(internal, transition, t, resolver,
                            first_frame=frame == action.first_frame)
        case _:
            raise TypeError(
                f"Cannot compute {type(transition).__name__} "
                f"into {type(internal).__name__}"
            )
    logger.debug(f"frame {frame}: t={t:.4f} {internal!r}")


def compute_transitions(action: "Action", frame: int, resolver: SymbolResolver):
    """Recompute every internal transform of ``action`` for ``frame``."""
    for transition, internal in zip(action.transitions, action.internal_transforms):
        compute_transition(internal, transition, action, frame, resolver)
