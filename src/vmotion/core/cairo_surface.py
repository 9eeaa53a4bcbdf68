"""pycairo implementation of the drawing surface."""

import logging
import math
from pathlib import Path
from typing import Optional

import cairo

from .geometry import ORIGIN, Point, TextExtents, align_text, as_point

logger = logging.getLogger("VectorMotion.core.cairo_surface")


class CairoSurface:
    """Wraps a ``cairo.Context``.

    Cairo has no global alpha, so opacity and colour are tracked here and
    folded into ``set_source_rgba``. They are saved and restored together
    with the cairo graphics state.
    """

    def __init__(self, context: cairo.Context):
        self.ctx = context
        self._rgb = (0.0, 0.0, 0.0)
        self._opacity = 1.0
        self._stack: list[tuple[tuple[float, float, float], float]] = []
        self._apply_source()

    @classmethod
    def create(cls, width: int, height: int,
               background: Optional[tuple[float, float, float]] = None) -> "CairoSurface":
        """New ARGB32 canvas with the origin at its centre."""
        image = cairo.ImageSurface(cairo.FORMAT_ARGB32, width, height)
        ctx = cairo.Context(image)
        if background is not None:
            ctx.set_source_rgb(*background)
            ctx.paint()
        ctx.translate(width / 2, height / 2)
        return cls(ctx)

    @property
    def opacity(self) -> float:
        return self._opacity

    def _apply_source(self):
        self.ctx.set_source_rgba(*self._rgb, self._opacity)

    # transforms ----------------------------------------------------------

    def translate(self, x: float, y: float):
        self.ctx.translate(x, y)

    def rotate(self, angle: float):
        self.ctx.rotate(angle)

    def scale(self, sx: float, sy: float):
        self.ctx.scale(sx, sy)

    def save(self):
        self._stack.append((self._rgb, self._opacity))
        self.ctx.save()

    def restore(self):
        self.ctx.restore()
        if self._stack:
            self._rgb, self._opacity = self._stack.pop()
        self._apply_source()

    # style ---------------------------------------------------------------

    def set_line_width(self, width: float):
        self.ctx.set_line_width(width)

    def set_opacity(self, opacity: float):
        self._opacity = opacity
        self._apply_source()

    def set_color(self, r: float, g: float, b: float):
        self._rgb = (r, g, b)
        self._apply_source()

    def set_font_size(self, size: float):
        self.ctx.set_font_size(size)

    # text ----------------------------------------------------------------

    def text_extents(self, text: str) -> TextExtents:
        return tuple(self.ctx.text_extents(text))

    def show_text(self, text: str, pos: Point = ORIGIN, halign: str = "left",
                  valign: str = "baseline", angle: float = 0.0) -> Point:
        anchor = align_text(pos, self.text_extents(text), halign, valign)
        self.ctx.save()
        self.ctx.translate(anchor.x, anchor.y)
        self.ctx.rotate(angle)
        self.ctx.move_to(0, 0)
        self.ctx.show_text(text)
        self.ctx.restore()
        return anchor

    def clip_text_outlines(self, text: str):
        self.ctx.new_path()
        self.ctx.move_to(0, 0)
        self.ctx.text_path(text)
        self.ctx.clip()

    # shapes --------------------------------------------------------------

    def fill_circle(self, center: Point, radius: float):
        self.circle(center, radius, "fill")

    def circle(self, center, radius: float, action: str = "fill"):
        center = as_point(center)
        self.ctx.new_path()
        self.ctx.arc(center.x, center.y, radius, 0, 2 * math.pi)
        if action == "fill":
            self.ctx.fill()
        elif action == "stroke":
            self.ctx.stroke()
        else:
            raise ValueError(f"Unknown circle action: {action}")

    def line(self, start, end):
        start, end = as_point(start), as_point(end)
        self.ctx.new_path()
        self.ctx.move_to(start.x, start.y)
        self.ctx.line_to(end.x, end.y)
        self.ctx.stroke()

    def write_png(self, path: str | Path) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.ctx.get_target().write_to_png(str(path))
        logger.info(f"Wrote frame to {path}")
        return path
