"""Tests for resolving operations into matrices, labels and pivots."""

from __future__ import annotations

import numpy as np
import pytest

from transform_lab.engine.resolve import effective_angle, pivot_of, resolve_matrix, step_label
from transform_lab.models.operations import Reflect, Rotate, Scale, Shear, Translate
from transform_lab.utils import matrix as mx


# ---------------------------------------------------------------------------
# Matrices
# ---------------------------------------------------------------------------

def test_translate_matrix():
    np.testing.assert_array_equal(resolve_matrix(Translate(dx=3, dy="-1.5")), mx.translation(3, -1.5))


def test_shear_and_reflect_matrices():
    np.testing.assert_array_equal(resolve_matrix(Shear(shx=0.5, shy=2)), mx.shear(0.5, 2))
    np.testing.assert_array_equal(resolve_matrix(Reflect(axis="y=-x")), mx.reflection("y=-x"))


def test_scale_about_origin_ignores_stale_pivot():
    op = Scale(sx=3, sy=0.5, anchor="origin", cx=7, cy=-2)
    np.testing.assert_array_equal(resolve_matrix(op), mx.scaling(3, 0.5))
    assert pivot_of(op) is None


def test_rotate_direction():
    assert effective_angle(Rotate(angle=30, direction="CCW")) == 30
    assert effective_angle(Rotate(angle=30, direction="CW")) == -30
    np.testing.assert_allclose(resolve_matrix(Rotate(angle=30, direction="CW")), mx.rotation(-30))


@pytest.mark.parametrize(
    "op",
    [
        Scale(sx=2, sy=3, anchor="point", cx=1.5, cy=-2),
        Scale(sx=-1, sy=0.25, anchor="point", cx=-4, cy=4),
        Rotate(angle=90, direction="CCW", anchor="point", cx=2, cy=2),
        Rotate(angle=137, direction="CW", anchor="point", cx=-3.5, cy=8),
    ],
)
def test_anchored_pivot_is_fixed_point(op):
    cx, cy = pivot_of(op)
    assert mx.apply(resolve_matrix(op), cx, cy) == pytest.approx((cx, cy), abs=1e-9)


def test_anchored_composition_order():
    op = Scale(sx=2, sy=2, anchor="point", cx=1, cy=1)
    expected = mx.multiply(mx.translation(1, 1), mx.multiply(mx.scaling(2, 2), mx.translation(-1, -1)))
    np.testing.assert_allclose(resolve_matrix(op), expected)
    # (3, 1) is 2 units right of the pivot, so it lands 4 units right
    assert mx.apply(resolve_matrix(op), 3, 1) == pytest.approx((5, 1))


# ---------------------------------------------------------------------------
# Fallbacks
# ---------------------------------------------------------------------------

def test_non_numeric_parameters_fall_back():
    np.testing.assert_array_equal(resolve_matrix(Translate(dx="abc", dy="")), mx.identity())
    np.testing.assert_array_equal(resolve_matrix(Scale(sx="?", sy="x")), mx.identity())
    np.testing.assert_array_equal(resolve_matrix(Shear(shx="-", shy="")), mx.identity())
    np.testing.assert_allclose(resolve_matrix(Rotate(angle="nope")), mx.identity())


def test_zero_scale_factor_falls_back_to_one():
    np.testing.assert_array_equal(resolve_matrix(Scale(sx=0, sy="0")), mx.identity())


def test_non_numeric_pivot_falls_back_to_origin():
    op = Rotate(angle=45, anchor="point", cx="left", cy="")
    assert pivot_of(op) == (0.0, 0.0)
    np.testing.assert_allclose(resolve_matrix(op), mx.rotation(45))


# ---------------------------------------------------------------------------
# Labels
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "op, label",
    [
        (Translate(), "Trans(2, 2)"),
        (Translate(dx="3.50", dy=-1), "Trans(3.50, -1)"),
        (Scale(), "Scale(2,2)"),
        (Scale(sx=1.5, sy=2, anchor="point", cx=1, cy=-2), "Scale(1.5,2) @(1,-2)"),
        (Rotate(), "Rot(90°)"),
        (Rotate(angle=45, direction="CW", anchor="point", cx=2, cy=2), "Rot(-45°) @(2,2)"),
        (Shear(), "Shear(1, 0)"),
        (Reflect(axis="y=x"), "Reflect y=x"),
    ],
)
def test_step_labels(op, label):
    assert step_label(op) == label
