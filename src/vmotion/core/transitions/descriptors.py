"""Declarative transition descriptors.

Authored once and never mutated. Endpoints are either literal values or a
``SymbolRef`` naming another object whose live state is looked up when
the transition is computed.
"""

from typing import Annotated, Literal, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..geometry import ORIGIN, Point, as_point
from ..state import ScalePair, as_scale_pair


class SymbolRef(BaseModel):
    """Named reference to another drawable object's current state."""
    model_config = ConfigDict(frozen=True)

    name: str


def ref(name: str) -> SymbolRef:
    return SymbolRef(name=name)


def _symbol_or(value, convert):
    if isinstance(value, SymbolRef):
        return value
    if isinstance(value, str):
        return SymbolRef(name=value)
    if isinstance(value, dict):
        # JSON round trip: let pydantic pick the union member
        return value
    return convert(value)


class Translation(BaseModel):
    """Move from one point to another."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["translation"] = "translation"
    from_: Union[Point, SymbolRef]
    to: Union[Point, SymbolRef]

    @field_validator("from_", "to", mode="before")
    @classmethod
    def _coerce_point(cls, value):
        return _symbol_or(value, as_point)


class Rotation(BaseModel):
    """Rotate around ``center`` from one angle (radians) to another."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["rotation"] = "rotation"
    from_: Union[float, SymbolRef]
    to: Union[float, SymbolRef]
    center: Union[Point, SymbolRef] = ORIGIN

    @field_validator("from_", "to", mode="before")
    @classmethod
    def _coerce_angle(cls, value):
        return _symbol_or(value, float)

    @field_validator("center", mode="before")
    @classmethod
    def _coerce_center(cls, value):
        return _symbol_or(value, as_point)

    @classmethod
    def to_angle(cls, to, center=ORIGIN) -> "Rotation":
        """Rotation starting at angle 0."""
        return cls(from_=0.0, to=to, center=center)


class Scaling(BaseModel):
    """Scale from one absolute scale to another.

    With ``compute_from_once`` a symbolic ``from_`` is looked up on the
    action's first frame only, so later changes of the referenced object do
    not move the starting scale.
    """
    model_config = ConfigDict(frozen=True)

    kind: Literal["scaling"] = "scaling"
    from_: Union[ScalePair, SymbolRef]
    to: Union[ScalePair, SymbolRef]
    compute_from_once: bool = False

    @field_validator("from_", "to", mode="before")
    @classmethod
    def _coerce_scale(cls, value):
        return _symbol_or(value, as_scale_pair)


Transition = Annotated[
    Union[Translation, Rotation, Scaling],
    Field(discriminator="kind"),
]
