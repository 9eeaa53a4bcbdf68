"""Per-object geometric state: authored values, multipliers, and applied scale."""

from typing import Optional, Union
from pydantic import BaseModel

ScalePair = tuple[float, float]


def as_scale_pair(value: Union[float, tuple, list]) -> ScalePair:
    if isinstance(value, (tuple, list)):
        sx, sy = value
        return (float(sx), float(sy))
    return (float(value), float(value))


class GeometricState(BaseModel):
    """Mutable drawing state owned by one drawable object.

    ``desired_scale`` is what the author last asked for; ``current_scale``
    is the cumulative scale actually applied to the surface since the last
    ``reset_transform()``. The two are never conflated.
    """
    line_width: float = 2.0
    mul_line_width: float = 1.0
    opacity: float = 1.0
    mul_opacity: float = 1.0
    font_size: float = 12.0
    desired_scale: ScalePair = (1.0, 1.0)
    mul_scale: ScalePair = (1.0, 1.0)
    current_scale: ScalePair = (1.0, 1.0)
    show_action: bool = True

    @property
    def effective_line_width(self) -> float:
        return self.line_width * self.mul_line_width

    @property
    def effective_opacity(self) -> float:
        return self.opacity * self.mul_opacity

    def reset_transform(self):
        """Forget applied scaling; call after the surface state was saved."""
        self.current_scale = (1.0, 1.0)
        self.show_action = True

    def set_multipliers(self, line_width: Optional[float] = None,
                        opacity: Optional[float] = None,
                        scale: Optional[Union[float, ScalePair]] = None):
        if line_width is not None:
            self.mul_line_width = line_width
        if opacity is not None:
            self.mul_opacity = opacity
        if scale is not None:
            self.mul_scale = as_scale_pair(scale)
