"""Tests for models/viewport.py - pan/zoom transform."""

import random

import pytest
from models.viewport import ViewportState, clamp_zoom
from settings.constants import ZOOM_MAX, ZOOM_MIN


class TestZoomClamp:
    @pytest.mark.parametrize("scale, expected", [(0.0, 0.1), (-3, 0.1), (0.05, 0.1), (1.0, 1.0), (5.0, 5.0), (80, 5.0)])
    def test_clamp(self, scale, expected):
        assert clamp_zoom(scale) == expected

    def test_set_scale_returns_applied_value(self):
        viewport = ViewportState()
        assert viewport.set_scale(12) == ZOOM_MAX
        assert viewport.scale == ZOOM_MAX

    def test_constructor_clamps(self):
        assert ViewportState(scale=0).scale == ZOOM_MIN

    def test_scale_stays_in_bounds_for_any_sequence(self):
        rng = random.Random(7)
        viewport = ViewportState()
        for _ in range(500):
            if rng.random() < 0.5:
                viewport.set_scale(rng.uniform(-100, 100))
            else:
                viewport.zoom_at(rng.uniform(0, 800), rng.uniform(0, 600), zoom_in=rng.random() < 0.5)
            assert ZOOM_MIN <= viewport.scale <= ZOOM_MAX


class TestTransform:
    def test_screen_to_diagram(self):
        viewport = ViewportState(scale=2.0, x=100, y=50)
        assert viewport.screen_to_diagram(300, 250) == (100, 100)

    def test_diagram_to_screen_inverse(self):
        viewport = ViewportState(scale=0.5, x=-40, y=10)
        assert viewport.diagram_to_screen(*viewport.screen_to_diagram(123, 456)) == pytest.approx((123, 456))

    def test_pan_is_unbounded(self):
        viewport = ViewportState()
        viewport.set_position(-1e9, 1e9)
        assert (viewport.x, viewport.y) == (-1e9, 1e9)

    def test_zoom_at_keeps_point_under_pointer(self):
        viewport = ViewportState(scale=1.0, x=30, y=-20)
        before = viewport.screen_to_diagram(400, 300)
        viewport.zoom_at(400, 300, zoom_in=True)
        assert viewport.scale == pytest.approx(1.1)
        assert viewport.screen_to_diagram(400, 300) == pytest.approx(before)

    def test_zoom_out_divides(self):
        viewport = ViewportState(scale=1.1)
        viewport.zoom_at(0, 0, zoom_in=False)
        assert viewport.scale == pytest.approx(1.0)

    def test_reset(self):
        viewport = ViewportState(scale=3, x=5, y=5)
        viewport.reset()
        assert (viewport.scale, viewport.x, viewport.y) == (1.0, 0.0, 0.0)

    def test_zoom_percent(self):
        assert ViewportState(scale=1.25).zoom_percent == 125
