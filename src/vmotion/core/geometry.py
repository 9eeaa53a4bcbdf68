"""Point arithmetic and text anchor resolution."""

import logging
from dataclasses import dataclass
from typing import Union

logger = logging.getLogger("VectorMotion.core.geometry")

HALIGN_OFFSETS = {"left": 0.0, "center": 0.5, "centre": 0.5, "right": 1.0}
VALIGNS = ("top", "middle", "baseline", "bottom")


@dataclass(frozen=True)
class Point:
    """A 2D point or vector on the drawing surface."""
    x: float
    y: float

    def __add__(self, other: "Point") -> "Point":
        other = as_point(other)
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        other = as_point(other)
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> "Point":
        return Point(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __neg__(self) -> "Point":
        return Point(-self.x, -self.y)

    def __iter__(self):
        yield self.x
        yield self.y


ORIGIN = Point(0.0, 0.0)


def as_point(value) -> Point:
    if isinstance(value, Point):
        return value
    if isinstance(value, (tuple, list)) and len(value) == 2:
        return Point(float(value[0]), float(value[1]))
    raise TypeError(f"Cannot interpret {value!r} as a point")


def lerp(start, end, t: float):
    """Linear interpolation ``start + t * (end - start)``.

    Works on floats, points and 2-tuples (component-wise).
    """
    if isinstance(start, Point) or isinstance(end, Point):
        start, end = as_point(start), as_point(end)
        return start + t * (end - start)
    if isinstance(start, tuple):
        return tuple(a + t * (b - a) for a, b in zip(start, end))
    return start + t * (end - start)


TextExtents = tuple[float, float, float, float, float, float]


def align_text(pos: Union[Point, tuple], extents: TextExtents,
               halign: str = "left", valign: str = "baseline") -> Point:
    """Resolve the drawing anchor for a string placed at ``pos``.

    ``extents`` is ``(x_bearing, y_bearing, width, height, x_advance, y_advance)``.
    Unknown horizontal alignments fall back to ``left`` and unknown vertical
    ones to ``baseline``.
    """
    pos = as_point(pos)
    _, y_bearing, width, height, _, _ = extents

    if halign not in HALIGN_OFFSETS:
        logger.debug(f"Unknown halign '{halign}', using 'left'")
        halign = "left"
    x = pos.x - width * HALIGN_OFFSETS[halign]

    if valign not in VALIGNS:
        logger.debug(f"Unknown valign '{valign}', using 'baseline'")
        valign = "baseline"
    y_offsets = {
        "top": y_bearing,
        "middle": y_bearing / 2,
        "baseline": 0.0,
        "bottom": height + y_bearing,
    }
    return Point(x, pos.y - y_offsets[valign])
