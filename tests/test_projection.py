# tests/test_projection.py
"""Tests for plane selection, view fitting and canvas mapping."""

from __future__ import annotations

import math

import numpy as np
import pytest

from frameview.core.frame import Extents, Frame, accumulate_extents
from frameview.core.projection import (
    ProjectionPlane,
    Rectangle,
    fit_roi,
    map_to_canvas,
    plane_bounds,
)


@pytest.mark.parametrize(
    ("plane", "expected"),
    [
        (ProjectionPlane.X, (2.0, 3.0)),
        (ProjectionPlane.Y, (3.0, 1.0)),
        (ProjectionPlane.Z, (1.0, 2.0)),
    ],
)
def test_plane_selects_axes(plane: ProjectionPlane, expected: tuple[float, float]) -> None:
    assert plane.select([1.0, 2.0, 3.0]) == expected


def test_plane_from_value() -> None:
    assert ProjectionPlane("z") is ProjectionPlane.Z
    assert ProjectionPlane.Y.axes == (2, 0)


def test_rectangle_normalized_at_construction() -> None:
    roi = Rectangle(1.0, 2.0, -1.0, -2.0)
    assert (roi.x0, roi.y0, roi.x1, roi.y1) == (-1.0, -2.0, 1.0, 2.0)
    assert roi.width == 2.0
    assert roi.height == 4.0


def test_rectangle_fields_not_resorted_after_assignment() -> None:
    roi = Rectangle(0.0, 0.0, 1.0, 1.0)
    roi.x0 = 5.0
    assert roi.x0 > roi.x1


def test_plane_bounds_uses_plane_axes() -> None:
    ext = Extents(x_min=-1.0, y_min=-2.0, z_min=-3.0, x_max=1.0, y_max=2.0, z_max=3.0)
    assert plane_bounds(ext, ProjectionPlane.X) == (-2.0, 2.0, -3.0, 3.0)
    assert plane_bounds(ext, ProjectionPlane.Y) == (-3.0, 3.0, -1.0, 1.0)
    assert plane_bounds(ext, ProjectionPlane.Z) == (-1.0, 1.0, -2.0, 2.0)


def test_fit_applies_proportional_margin() -> None:
    ext = Extents(x_min=-1.0, y_min=-1.0, z_min=0.0, x_max=2.0, y_max=2.0, z_max=0.0)
    roi = fit_roi(ext, ProjectionPlane.Z, 100, 100)
    assert roi.x0 == pytest.approx(-0.9)
    assert roi.x1 == pytest.approx(2.2)
    assert roi.y0 == pytest.approx(-0.9)
    assert roi.y1 == pytest.approx(2.2)


def test_fit_widens_x_when_x_is_denser() -> None:
    ext = Extents(x_min=-1.0, y_min=-2.0, z_min=0.0, x_max=1.0, y_max=2.0, z_max=0.0)
    roi = fit_roi(ext, ProjectionPlane.Z, 100, 100)
    assert roi.x0 == pytest.approx(-1.9)
    assert roi.x1 == pytest.approx(2.1)
    assert roi.y0 == pytest.approx(-1.8)
    assert roi.y1 == pytest.approx(2.2)


def test_fit_widens_y_when_y_is_denser() -> None:
    ext = Extents(x_min=0.0, y_min=0.0, z_min=0.0, x_max=10.0, y_max=1.0, z_max=0.0)
    roi = fit_roi(ext, ProjectionPlane.Z, 100, 100)
    assert roi.x0 == pytest.approx(0.0)
    assert roi.x1 == pytest.approx(11.0)
    # y: [0, 1.1] widened about 0.55 to the x scale
    assert roi.y0 == pytest.approx(0.55 - 5.5)
    assert roi.y1 == pytest.approx(0.55 + 5.5)


def test_fit_tie_leaves_box_unchanged() -> None:
    ext = Extents(x_min=0.0, y_min=0.0, z_min=0.0, x_max=2.0, y_max=1.0, z_max=0.0)
    roi = fit_roi(ext, ProjectionPlane.Z, 200, 100)
    assert (roi.x0, roi.x1) == (pytest.approx(0.0), pytest.approx(2.2))
    assert (roi.y0, roi.y1) == (pytest.approx(0.0), pytest.approx(1.1))


@pytest.mark.parametrize("plane", list(ProjectionPlane))
@pytest.mark.parametrize(
    ("bounds", "size"),
    [
        (((-1.0, 3.0), (0.5, 2.0), (-4.0, -1.0)), (200, 100)),
        (((0.2, 0.3), (-5.0, 5.0), (1.0, 9.0)), (120, 360)),
        (((-0.01, 1.0), (-0.01, 1.0), (-0.01, 1.0)), (640, 480)),
        (((-7.0, -2.0), (3.0, 4.0), (-1.0, 1.0)), (50, 51)),
    ],
)
def test_fit_preserves_uniform_scale(plane, bounds, size) -> None:
    (x0, x1), (y0, y1), (z0, z1) = bounds
    ext = Extents(x0, y0, z0, x1, y1, z1)
    width, height = size
    roi = fit_roi(ext, plane, width, height)
    assert roi.width / width == pytest.approx(roi.height / height, rel=1e-9)


def test_fit_never_shrinks_either_axis() -> None:
    ext = Extents(x_min=1.0, y_min=1.0, z_min=0.0, x_max=3.0, y_max=2.0, z_max=0.0)
    roi = fit_roi(ext, ProjectionPlane.Z, 100, 300)
    assert roi.x0 == pytest.approx(0.9)
    assert roi.x1 == pytest.approx(3.3)
    assert roi.height > 2.2 - 0.9


def test_fit_updates_given_rectangle_in_place() -> None:
    roi = Rectangle(-1.0, -1.0, 1.0, 1.0)
    result = fit_roi(Extents.seed(), ProjectionPlane.Z, 100, 100, roi=roi)
    assert result is roi
    assert roi.x0 == pytest.approx(-0.009)
    assert roi.x1 == pytest.approx(0.011)


def test_fit_degenerate_inputs_propagate_non_finite() -> None:
    flat = Extents(0.0, 0.0, 0.0, 0.0, 0.0, 0.0)
    assert not fit_roi(flat, ProjectionPlane.Z, 100, 100).is_finite()
    assert not fit_roi(Extents.seed(), ProjectionPlane.Z, 0, 0).is_finite()


def test_map_roi_corners_and_midpoint() -> None:
    roi = Rectangle(-0.9, -0.9, 2.2, 2.2)
    width, height = 200, 100
    c_x0, c_x1 = width * 0.1, width * 0.9
    c_y0, c_y1 = height * 0.1, height * 0.9

    px0, _ = map_to_canvas(roi, roi.x0, 0.0, width, height)
    px1, _ = map_to_canvas(roi, roi.x1, 0.0, width, height)
    _, py_mid = map_to_canvas(roi, 0.0, (roi.y0 + roi.y1) / 2, width, height)

    assert px0 == pytest.approx(c_x0)
    assert px1 == pytest.approx(c_x1)
    assert py_mid == pytest.approx(height - (c_y0 + c_y1) / 2)


def test_map_flips_vertical_axis() -> None:
    roi = Rectangle(0.0, 0.0, 1.0, 1.0)
    _, py_low = map_to_canvas(roi, 0.0, roi.y0, 100, 100)
    _, py_high = map_to_canvas(roi, 0.0, roi.y1, 100, 100)
    assert py_low == pytest.approx(90.0)
    assert py_high == pytest.approx(10.0)


def test_map_zero_width_roi_is_not_finite() -> None:
    roi = Rectangle(1.0, 0.0, 1.0, 1.0)
    px, _ = map_to_canvas(roi, 2.0, 0.5, 100, 100)
    assert not math.isfinite(px)


def test_fitted_roi_centre_maps_to_canvas_centre(identity_frame: Frame) -> None:
    roi = fit_roi(accumulate_extents([identity_frame]), ProjectionPlane.Z, 200, 200)
    centre = map_to_canvas(roi, (roi.x0 + roi.x1) / 2, (roi.y0 + roi.y1) / 2, 200, 200)
    assert centre == (pytest.approx(100.0), pytest.approx(100.0))


def test_unit_frame_origin_position_on_square_canvas(identity_frame: Frame) -> None:
    roi = fit_roi(accumulate_extents([identity_frame]), ProjectionPlane.Z, 200, 200)
    # seed-extended box [-0.01, 1] with proportional margin -> [-0.009, 1.1]
    assert roi.x0 == pytest.approx(-0.009)
    assert roi.x1 == pytest.approx(1.1)
    expected = 0.009 * 160.0 / 1.109 + 20.0
    px, py = map_to_canvas(roi, 0.0, 0.0, 200, 200)
    assert px == pytest.approx(expected)
    assert py == pytest.approx(200.0 - expected)


def test_projected_axis_tips_follow_plane(offset_frame: Frame) -> None:
    roi = Rectangle(0.0, 0.0, 4.0, 4.0)
    for plane in ProjectionPlane:
        u, v = plane.axes
        got = map_to_canvas(roi, *plane.select(offset_frame.x), 100, 100)
        want = map_to_canvas(roi, offset_frame.x[u], offset_frame.x[v], 100, 100)
        assert got == pytest.approx(want)
    assert np.allclose(ProjectionPlane.Y.select(offset_frame.origin), (3.0, 1.0))
