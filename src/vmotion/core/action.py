"""Actions: a frame range plus the transitions animated over it."""

import logging
from typing import Callable
from pydantic import BaseModel, Field, PrivateAttr, field_validator

from .transitions.descriptors import Transition
from .transitions.internal import InternalTransform, create_internal_transform

logger = logging.getLogger("VectorMotion.core.action")


def linear(t: float) -> float:
    return t


class Action(BaseModel):
    """Transitions applied to one object over an inclusive frame range.

    ``easing`` maps the linear fraction of the range to progress; curve
    shapes come from the caller. ``opts`` carries per-action drawing
    options such as ``draw_text_t``.
    """
    frames: tuple[int, int]
    transitions: list[Transition] = Field(default_factory=list)
    easing: Callable[[float], float] = Field(default=linear, exclude=True)
    opts: dict = Field(default_factory=dict)

    _internal: list[InternalTransform] = PrivateAttr(default_factory=list)

    @field_validator("frames")
    @classmethod
    def _check_frames(cls, value: tuple[int, int]) -> tuple[int, int]:
        first, last = value
        if first > last:
            raise ValueError(f"Action frames must be ascending, got {first}..{last}")
        return value

    def model_post_init(self, __context) -> None:
        self._internal = [create_internal_transform(t) for t in self.transitions]

    @property
    def internal_transforms(self) -> list[InternalTransform]:
        return self._internal

    @property
    def first_frame(self) -> int:
        return self.frames[0]

    @property
    def last_frame(self) -> int:
        return self.frames[1]

    def is_active(self, frame: int) -> bool:
        return self.first_frame <= frame <= self.last_frame

    def add_transition(self, transition: Transition) -> InternalTransform:
        """Register a descriptor together with its internal transform."""
        internal = create_internal_transform(transition)
        self.transitions.append(transition)
        self._internal.append(internal)
        return internal

    def interpolation(self, frame: int) -> float:
        """Eased progress in [0, 1] for ``frame``.

        A single-frame action is always at its end state.
        """
        first, last = self.frames
        if last == first:
            return self.easing(1.0)
        t = (frame - first) / (last - first)
        t = min(1.0, max(0.0, t))
        return self.easing(t)
