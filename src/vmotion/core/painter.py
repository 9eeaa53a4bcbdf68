"""State-aware drawing calls.

A ``Painter`` binds one drawable object's ``GeometricState`` to a drawing
surface. Line width, opacity and scale requests are recorded in the state,
combined with the object's multipliers, and only the effective value is
forwarded to the surface. Degenerate scaling never raises; it clears
``state.show_action`` so the caller can skip drawing the object.
"""

import logging
from typing import Optional

from .geometry import ORIGIN, Point, align_text, as_point
from .settings import EngineSettings, is_degenerate
from .state import GeometricState, ScalePair
from .surface import DrawingSurface

logger = logging.getLogger("VectorMotion.core.painter")

TEXT_PROGRESS_OPT = "draw_text_t"


class Painter:
    def __init__(self, surface: DrawingSurface,
                 state: Optional[GeometricState] = None,
                 settings: Optional[EngineSettings] = None,
                 opts: Optional[dict] = None):
        self.surface = surface
        self.state = state if state is not None else GeometricState()
        self.settings = settings or EngineSettings()
        self.opts = opts if opts is not None else {}

    def _degenerate(self, value: float) -> bool:
        return is_degenerate(value, self.settings.scale_epsilon)

    # style ---------------------------------------------------------------

    def set_line_width(self, width: float):
        self.state.line_width = width
        self.surface.set_line_width(self.state.effective_line_width)

    def set_opacity(self, opacity: float):
        # No clamping: values outside [0, 1] are the caller's business
        self.state.opacity = opacity
        self.surface.set_opacity(self.state.effective_opacity)

    def set_font_size(self, size: float):
        self.state.font_size = size
        self.surface.set_font_size(size)

    def get_font_size(self) -> float:
        return self.state.font_size

    # transforms ----------------------------------------------------------

    def translate(self, x: float, y: float):
        self.surface.translate(x, y)

    def rotate(self, angle: float):
        self.surface.rotate(angle)

    def scale(self, sx: float, sy: Optional[float] = None):
        """Scale relative to the current scale, honouring ``mul_scale``."""
        if sy is None:
            sy = sx
        state = self.state
        state.desired_scale = (sx, sy)
        mx, my = state.mul_scale
        ex, ey = sx * mx, sy * my
        if self._degenerate(ex) or self._degenerate(ey):
            logger.debug(f"Degenerate scale ({ex}, {ey}), hiding object")
            state.show_action = False
            return
        state.show_action = True
        self.surface.scale(ex, ey)
        cx, cy = state.current_scale
        state.current_scale = (cx * ex, cy * ey)

    def scale_to(self, x: float, y: Optional[float] = None) -> Optional[ScalePair]:
        """Scale to an absolute ``(x, y)`` regardless of earlier scaling.

        Returns the incremental factor applied to the surface, or ``None``
        when the target is degenerate and nothing was applied.
        """
        if y is None:
            y = x
        state = self.state
        state.desired_scale = (x, y)
        # Guard before dividing: a zero target would yield an infinite factor
        if self._degenerate(x) or self._degenerate(y):
            logger.debug(f"Degenerate scale_to ({x}, {y}), hiding object")
            state.show_action = False
            return None
        cx, cy = state.current_scale
        scaling = (x / cx, y / cy)
        state.show_action = True
        self.surface.scale(*scaling)
        state.current_scale = (x, y)
        return scaling

    # text ----------------------------------------------------------------

    def animate_text(self, text: str, pos=ORIGIN, valign: str = "baseline",
                     halign: str = "left", angle: float = 0.0,
                     t: float = 1.0) -> Point:
        """Reveal ``text`` left to right as ``t`` goes from 0 to 1.

        The glyph outlines become the clip region and a circle of radius
        ``t * width`` is filled at the anchor, so no per-frame reshaping of
        the glyphs is needed. From ``t >= 1`` on the text is drawn normally.
        """
        pos = as_point(pos)
        if t >= 1:
            return self.surface.show_text(text, pos, halign=halign,
                                          valign=valign, angle=angle)

        extents = self.surface.text_extents(text)
        anchor = align_text(pos, extents, halign, valign)
        width = extents[2]

        self.surface.save()
        try:
            self.surface.translate(anchor.x, anchor.y)
            self.surface.rotate(angle)
            self.surface.clip_text_outlines(text)
            self.surface.fill_circle(ORIGIN, max(t, 0.0) * width)
        finally:
            self.surface.restore()
        return anchor

    def text(self, text: str, pos=ORIGIN, valign: str = "baseline",
             halign: str = "left", angle: float = 0.0) -> Point:
        t = self.opts.get(TEXT_PROGRESS_OPT, 1.0)
        return self.animate_text(text, pos, valign=valign, halign=halign,
                                 angle=angle, t=t)
