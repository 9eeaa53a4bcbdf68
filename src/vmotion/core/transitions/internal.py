"""Resolved per-frame transform values, one per transition descriptor."""

from typing import Optional, Union
from pydantic import BaseModel

from ..geometry import ORIGIN, Point
from ..state import ScalePair
from .descriptors import Rotation, Scaling, Translation


class InternalTranslation(BaseModel):
    by: Point = ORIGIN


class InternalRotation(BaseModel):
    angle: float = 0.0
    center: Point = ORIGIN


class InternalScaling(BaseModel):
    scale: ScalePair = (1.0, 1.0)
    # Snapshot of a symbolic ``from_`` for ``compute_from_once`` scalings
    cached_from: Optional[ScalePair] = None


InternalTransform = Union[InternalTranslation, InternalRotation, InternalScaling]


def create_internal_transform(transition) -> InternalTransform:
    match transition:
        case Translation():
            return InternalTranslation()
        case Rotation():
            return InternalRotation()
        case Scaling():
            return InternalScaling()
        case _:
            raise TypeError(f"Unsupported transition type: {type(transition).__name__}")


def create_internal_transforms(transitions) -> list[InternalTransform]:
    """One default internal transform per descriptor, in the same order."""
    return [create_internal_transform(t) for t in transitions]
