"""Tests for vmotion.core.state — GeometricState."""

import pytest

from vmotion.core.state import GeometricState, as_scale_pair


class TestGeometricStateDefaults:
    def test_defaults(self):
        s = GeometricState()
        assert s.line_width == 2.0
        assert s.mul_line_width == 1.0
        assert s.opacity == 1.0
        assert s.mul_opacity == 1.0
        assert s.font_size == 12.0
        assert s.desired_scale == (1.0, 1.0)
        assert s.mul_scale == (1.0, 1.0)
        assert s.current_scale == (1.0, 1.0)
        assert s.show_action is True

    def test_effective_values(self):
        s = GeometricState(line_width=4.0, mul_line_width=0.5,
                           opacity=0.8, mul_opacity=0.5)
        assert s.effective_line_width == pytest.approx(2.0)
        assert s.effective_opacity == pytest.approx(0.4)

    def test_effective_opacity_not_clamped(self):
        s = GeometricState(opacity=2.0, mul_opacity=1.0)
        assert s.effective_opacity == 2.0


class TestGeometricStateMutation:
    def test_reset_transform(self):
        s = GeometricState(current_scale=(2.0, 3.0), show_action=False,
                           desired_scale=(2.0, 3.0))
        s.reset_transform()
        assert s.current_scale == (1.0, 1.0)
        assert s.show_action is True
        # authored intent survives
        assert s.desired_scale == (2.0, 3.0)

    def test_set_multipliers(self):
        s = GeometricState()
        s.set_multipliers(line_width=0.5, opacity=0.25, scale=2)
        assert s.mul_line_width == 0.5
        assert s.mul_opacity == 0.25
        assert s.mul_scale == (2.0, 2.0)

    def test_set_multipliers_partial(self):
        s = GeometricState()
        s.set_multipliers(scale=(0.5, 2.0))
        assert s.mul_scale == (0.5, 2.0)
        assert s.mul_opacity == 1.0
        assert s.mul_line_width == 1.0

    def test_serialization_roundtrip(self):
        s = GeometricState(font_size=20.0, current_scale=(2.0, 2.0))
        restored = GeometricState.model_validate_json(s.model_dump_json())
        assert restored == s


class TestAsScalePair:
    def test_scalar(self):
        assert as_scale_pair(3) == (3.0, 3.0)

    def test_pair(self):
        assert as_scale_pair([1, 2]) == (1.0, 2.0)
