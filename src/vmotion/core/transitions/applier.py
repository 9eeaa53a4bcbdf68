"""Apply resolved transforms to a painter's surface in declaration order.

Callers save the surface state before and restore it after each object;
nothing here does that.
"""

from typing import TYPE_CHECKING

from ..painter import Painter
from .internal import InternalRotation, InternalScaling, InternalTranslation

if TYPE_CHECKING:
    from ..action import Action


def perform_transformation(internal, painter: Painter):
    match internal:
        case InternalTranslation(by=by):
            painter.translate(by.x, by.y)
        case InternalRotation(angle=angle, center=center):
            # Center first, then the angle
            painter.translate(center.x, center.y)
            painter.rotate(angle)
        case InternalScaling(scale=scale):
            painter.scale_to(*scale)
        case _:
            raise TypeError(f"Unsupported internal transform: {type(internal).__name__}")


def perform_transformations(action: "Action", painter: Painter):
    for internal in action.internal_transforms:
        perform_transformation(internal, painter)
