"""Tests for the viewport fitter."""

from __future__ import annotations

import numpy as np
import pytest

from transform_lab.engine.config import EngineConfig
from transform_lab.engine.pipeline import run_pipeline
from transform_lab.engine.viewport import Viewport, fit_viewport
from transform_lab.models.operations import Rotate, Scale, Translate


def test_default_viewport_without_points():
    vp = fit_viewport(run_pipeline([], []))
    assert (vp.min_x, vp.max_x, vp.min_y, vp.max_y) == (-5, 5, -5, 5)
    assert vp.width == 10
    assert vp.height == 10


def test_padding_includes_origin(triangle):
    vp = fit_viewport(run_pipeline(triangle, []))
    # bbox with origin is [0, 4] x [0, 4]; padding = 4 * 0.2 + 2
    assert vp.min_x == pytest.approx(-2.8)
    assert vp.max_x == pytest.approx(6.8)
    assert vp.min_y == pytest.approx(-2.8)
    assert vp.max_y == pytest.approx(6.8)
    assert vp.width == pytest.approx(9.6)


def test_padding_uses_larger_extent(square):
    vp = fit_viewport(run_pipeline(square, [Translate(dx=20, dy=0)]))
    # x: [0, 24], y: [0, 4] -> padding 24 * 0.2 + 2 = 6.8
    assert (vp.min_x, vp.max_x) == pytest.approx((-6.8, 30.8))
    assert (vp.min_y, vp.max_y) == pytest.approx((-6.8, 10.8))


def test_encloses_every_step(pentagon):
    history = run_pipeline(
        pentagon,
        [Scale(sx=3, sy=-2, anchor="point", cx=10, cy=10), Rotate(angle=200), Translate(dx=-40, dy=5)],
    )
    vp = fit_viewport(history)
    assert vp.contains(0, 0)
    for step in history:
        for x, y in step.points:
            assert vp.contains(x, y)


def test_viewport_is_stable_across_steps(triangle):
    # Same history -> same viewport, whichever step is on screen
    history = run_pipeline(triangle, [Scale(sx=5, sy=5), Translate(dx=-30, dy=0)])
    assert fit_viewport(history) == fit_viewport(history)
    vp = fit_viewport(history)
    assert vp.min_x < -30 + 5
    assert vp.max_y > 20


def test_custom_config(triangle):
    config = EngineConfig(padding_ratio=0.0, padding_min=1.0, presentation_size=200.0)
    vp = fit_viewport(run_pipeline(triangle, []), config)
    assert (vp.min_x, vp.max_x) == (-1.0, 5.0)
    assert vp.size == 200.0


# ---------------------------------------------------------------------------
# Presentation mapping
# ---------------------------------------------------------------------------

def test_corners_map_to_square():
    vp = Viewport(-2, 8, -4, 6)
    assert vp.map_to_presentation((-2, 6)) == pytest.approx((0, 0))
    assert vp.map_to_presentation((8, -4)) == pytest.approx((100, 100))
    assert vp.map_to_presentation((3, 1)) == pytest.approx((50, 50))


def test_vertical_axis_is_inverted():
    vp = Viewport(-5, 5, -5, 5)
    low = vp.map_to_presentation((0, -4))
    high = vp.map_to_presentation((0, 4))
    assert high.v < low.v
    assert high.u == low.u == 50


def test_map_points_matches_single_mapping():
    vp = Viewport(-3.5, 9, -1, 11.5)
    pts = np.array([[0.0, 0.0], [2.0, -1.0], [8.5, 11.0]])
    mapped = vp.map_points(pts)
    for (x, y), (u, v) in zip(pts, mapped):
        assert (u, v) == pytest.approx(tuple(vp.map_to_presentation((x, y))))


def test_map_to_presentation_accepts_models():
    from transform_lab.models.geometry import Point

    vp = Viewport.default()
    assert vp.map_to_presentation(Point(x=0, y=0)) == (50.0, 50.0)
