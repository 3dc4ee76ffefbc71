"""Tests for shape presets and the circle generator."""

from __future__ import annotations

import math

import pytest

from transform_lab.engine.shapes import PRESET_KINDS, circle_from_params, circle_points, preset_points
from transform_lab.models.geometry import CircleParams


def test_circle_has_36_points_on_radius():
    pts = circle_points(2, -1, 3)
    assert len(pts) == 36
    for p in pts:
        assert math.hypot(p.x - 2, p.y + 1) == pytest.approx(3)


def test_circle_starts_at_angle_zero():
    pts = circle_points(1, 1, 2)
    assert (pts[0].x, pts[0].y) == (3.0, 1.0)
    assert (pts[9].x, pts[9].y) == pytest.approx((1.0, 3.0))


def test_circle_params_fall_back():
    pts = circle_from_params(CircleParams(cx="abc", cy="", r="x"))
    # center (0, 0), radius 1
    assert (pts[0].x, pts[0].y) == (1.0, 0.0)


def test_zero_radius_collapses_onto_center():
    pts = circle_from_params(CircleParams(cx=2, cy=-1, r="0"))
    assert len(pts) == 36
    assert all((p.x, p.y) == (2.0, -1.0) for p in pts)


@pytest.mark.parametrize(
    "kind, count",
    [("line", 2), ("triangle", 3), ("square", 4), ("circle", 36), ("custom", 5)],
)
def test_presets(kind, count):
    assert kind in PRESET_KINDS
    assert len(preset_points(kind)) == count


def test_triangle_preset_coordinates():
    pts = preset_points("triangle")
    assert [(p.x, p.y) for p in pts] == [(1.0, 1.0), (4.0, 1.0), (2.5, 4.0)]


def test_unknown_preset_is_single_origin_point():
    pts = preset_points("hexagon")
    assert [(p.x, p.y) for p in pts] == [(0.0, 0.0)]
