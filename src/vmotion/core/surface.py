"""The drawing surface interface consumed by the animation core."""

from typing import Protocol

from .geometry import Point, TextExtents


class DrawingSurface(Protocol):
    """Primitive 2D canvas. ``CairoSurface`` is the bundled implementation."""

    def translate(self, x: float, y: float) -> None: ...

    def rotate(self, angle: float) -> None: ...

    def scale(self, sx: float, sy: float) -> None: ...

    def set_line_width(self, width: float) -> None: ...

    def set_opacity(self, opacity: float) -> None: ...

    def set_font_size(self, size: float) -> None: ...

    def save(self) -> None: ...

    def restore(self) -> None: ...

    def text_extents(self, text: str) -> TextExtents: ...

    def show_text(self, text: str, pos: Point, halign: str = "left",
                  valign: str = "baseline", angle: float = 0.0) -> Point: ...

    def clip_text_outlines(self, text: str) -> None: ...

    def fill_circle(self, center: Point, radius: float) -> None: ...
