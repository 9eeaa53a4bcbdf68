"""Tests for vmotion.core.cairo_surface — the pycairo backed surface."""

import pytest

cairo = pytest.importorskip("cairo")

from vmotion.core.action import Action  # noqa: E402
from vmotion.core.cairo_surface import CairoSurface  # noqa: E402
from vmotion.core.geometry import ORIGIN, Point  # noqa: E402
from vmotion.core.painter import Painter  # noqa: E402
from vmotion.core.scene import SceneObject, render_frames  # noqa: E402
from vmotion.core.transitions import Translation  # noqa: E402

SIZE = 100


def _pixel(surface: CairoSurface, x: int, y: int) -> bytes:
    target = surface.ctx.get_target()
    target.flush()
    data = target.get_data()
    offset = y * target.get_stride() + x * 4
    return bytes(data[offset:offset + 4])


class TestCairoSurface:
    def test_create_centres_origin(self):
        surface = CairoSurface.create(SIZE, SIZE)
        assert surface.ctx.user_to_device(0, 0) == (SIZE / 2, SIZE / 2)

    def test_fill_circle_paints_centre(self):
        surface = CairoSurface.create(SIZE, SIZE)
        assert _pixel(surface, 50, 50) == b"\x00\x00\x00\x00"
        surface.fill_circle(ORIGIN, 10)
        assert _pixel(surface, 50, 50) != b"\x00\x00\x00\x00"
        assert _pixel(surface, 5, 5) == b"\x00\x00\x00\x00"

    def test_zero_radius_paints_nothing(self):
        surface = CairoSurface.create(SIZE, SIZE)
        surface.fill_circle(ORIGIN, 0.0)
        assert _pixel(surface, 50, 50) == b"\x00\x00\x00\x00"

    def test_opacity_saved_and_restored(self):
        surface = CairoSurface.create(SIZE, SIZE)
        surface.set_opacity(0.8)
        surface.save()
        surface.set_opacity(0.2)
        assert surface.opacity == 0.2
        surface.restore()
        assert surface.opacity == 0.8

    def test_transforms_restored(self):
        surface = CairoSurface.create(SIZE, SIZE)
        surface.save()
        surface.translate(10, 0)
        surface.scale(2, 2)
        surface.rotate(1.0)
        surface.restore()
        assert surface.ctx.user_to_device(0, 0) == (SIZE / 2, SIZE / 2)

    def test_text_extents_shape(self):
        surface = CairoSurface.create(SIZE, SIZE)
        surface.set_font_size(20)
        extents = surface.text_extents("Hello")
        assert len(extents) == 6

    def test_show_text_returns_anchor(self):
        surface = CairoSurface.create(SIZE, SIZE)
        width = surface.text_extents("Hi")[2]
        anchor = surface.show_text("Hi", Point(10, 0), halign="right")
        assert anchor.x == pytest.approx(10 - width)
        assert anchor.y == 0

    def test_circle_rejects_unknown_action(self):
        surface = CairoSurface.create(SIZE, SIZE)
        with pytest.raises(ValueError):
            surface.circle(ORIGIN, 5, "explode")

    def test_write_png(self, tmp_path):
        surface = CairoSurface.create(SIZE, SIZE, background=(1, 1, 1))
        path = surface.write_png(tmp_path / "frames" / "0001.png")
        assert path.exists()
        assert path.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"


class TestCairoIntegration:
    def test_animate_text_on_cairo(self):
        surface = CairoSurface.create(SIZE, SIZE)
        painter = Painter(surface)
        painter.set_font_size(24)
        anchor = painter.animate_text("Hello", ORIGIN, halign="center", t=0.5)
        assert anchor.x <= 0
        # clip region popped again
        assert surface.ctx.user_to_device(0, 0) == (SIZE / 2, SIZE / 2)

    def test_render_moving_dot(self):
        def dot(painter, frame):
            painter.surface.fill_circle(ORIGIN, 3)

        obj = SceneObject(
            name="dot",
            draw=dot,
            action=Action(frames=(1, 3), transitions=[Translation(from_=ORIGIN, to=(40, 0))]),
        )
        frames = dict(render_frames([obj], [1, 3], lambda f: CairoSurface.create(SIZE, SIZE)))
        assert _pixel(frames[1], 50, 50) != b"\x00\x00\x00\x00"
        assert _pixel(frames[3], 50, 50) == b"\x00\x00\x00\x00"
        assert _pixel(frames[3], 90, 50) != b"\x00\x00\x00\x00"
