# frameview/core/projection.py
"""Orthographic projection planes, view fitting and canvas mapping.

A projection plane picks two of the three world axes as canvas x/y. The
fitter turns frame extents into a region of interest (ROI) with a margin and
a uniform world-to-pixel scale; the mapper turns ROI coordinates into canvas
pixels with the vertical axis flipped.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

import numpy as np
import numpy.typing as npt

from frameview.config import CANVAS_SCALE
from frameview.core.frame import Extents
from frameview.utils.logger import get_logger

LOGGER = get_logger(__name__)


class ProjectionPlane(str, Enum):
    """Viewing direction: the world axis the view looks along."""

    X = "x"
    Y = "y"
    Z = "z"

    @property
    def axes(self) -> Tuple[int, int]:
        """World axis indices used as (canvas x, canvas y)."""
        return _PLANE_AXES[self]

    def select(self, point: npt.ArrayLike) -> Tuple[float, float]:
        """Pick the two in-plane coordinates of a world point."""
        p = np.asarray(point, dtype=np.float64)
        u, v = self.axes
        return float(p[u]), float(p[v])


# X looks at (y, z), Y at (z, x), Z at (x, y).
_PLANE_AXES: dict[ProjectionPlane, Tuple[int, int]] = {
    ProjectionPlane.X: (1, 2),
    ProjectionPlane.Y: (2, 0),
    ProjectionPlane.Z: (0, 1),
}


@dataclass
class Rectangle:
    """Region of interest with lower-left (x0, y0) and upper-right (x1, y1).

    Corners are ordered at construction only. The fitter assigns the fields
    directly afterwards and does not re-sort them.
    """

    x0: float
    y0: float
    x1: float
    y1: float

    def __post_init__(self) -> None:
        if self.x0 > self.x1:
            self.x0, self.x1 = self.x1, self.x0
        if self.y0 > self.y1:
            self.y0, self.y1 = self.y1, self.y0

    @property
    def width(self) -> float:
        return self.x1 - self.x0

    @property
    def height(self) -> float:
        return self.y1 - self.y0

    def is_finite(self) -> bool:
        return bool(np.all(np.isfinite([self.x0, self.y0, self.x1, self.y1])))


def plane_bounds(extents: Extents, plane: ProjectionPlane) -> Tuple[float, float, float, float]:
    """Return (x0, x1, y0, y1) of the extents as seen on the plane."""
    mins = extents.mins
    maxs = extents.maxs
    u, v = plane.axes
    return float(mins[u]), float(maxs[u]), float(mins[v]), float(maxs[v])


def fit_roi(
    extents: Extents,
    plane: ProjectionPlane,
    width: int,
    height: int,
    margin: float = CANVAS_SCALE,
    roi: Rectangle | None = None,
) -> Rectangle:
    """Fit a ROI around the extents with a margin and uniform scale.

    Args:
        extents: World bounding box of the frames
        plane: Projection plane selecting the two visible axes
        width: Canvas width in pixels
        height: Canvas height in pixels
        margin: Margin fraction, applied proportionally to each bound value
        roi: Rectangle updated in place; a new one is created if None

    Returns:
        The fitted ROI. A zero-size canvas or an extent with zero size on
        both axes is not checked and yields non-finite bounds.
    """
    x0, x1, y0, y1 = plane_bounds(extents, plane)
    if roi is None:
        roi = Rectangle(x0, y0, x1, y1)
    roi.x0, roi.x1, roi.y0, roi.y1 = x0, x1, y0, y1

    # margin scales with the bound value itself, not with the box size
    roi.x0 = roi.x0 - margin * roi.x0
    roi.x1 = roi.x1 + margin * roi.x1
    roi.y0 = roi.y0 - margin * roi.y0
    roi.y1 = roi.y1 + margin * roi.y1

    with np.errstate(divide="ignore", invalid="ignore"):
        x_diff = np.float64(roi.x1 - roi.x0)
        x_scale = x_diff / np.float64(width)
        y_diff = np.float64(roi.y1 - roi.y0)
        y_scale = y_diff / np.float64(height)

        if x_scale < y_scale:
            ratio = y_scale / x_scale
            xm = roi.x0 + x_diff / 2.0
            roi.x0 = float(xm - x_diff * ratio / 2.0)
            roi.x1 = float(xm + ratio * x_diff / 2.0)
        else:
            ratio = x_scale / y_scale
            ym = roi.y0 + y_diff / 2.0
            roi.y0 = float(ym - ratio * y_diff / 2.0)
            roi.y1 = float(ym + ratio * y_diff / 2.0)

    if not roi.is_finite():
        LOGGER.warning("Degenerate fit on plane {}: roi={} canvas={}x{}", plane.name, roi, width, height)
    else:
        LOGGER.debug("Fitted plane {} roi={}", plane.name, roi)
    return roi


def map_to_canvas(
    roi: Rectangle,
    x: float,
    y: float,
    width: int,
    height: int,
    margin: float = CANVAS_SCALE,
) -> Tuple[float, float]:
    """Map ROI coordinates to canvas pixels, flipping the vertical axis."""
    w = np.float64(width)
    h = np.float64(height)
    c_x0 = w * margin
    c_y0 = h * margin
    c_x1 = w * (1.0 - margin)
    c_y1 = h * (1.0 - margin)

    with np.errstate(divide="ignore", invalid="ignore"):
        mapped_x = (x - roi.x0) * (c_x1 - c_x0) / np.float64(roi.x1 - roi.x0) + c_x0
        mapped_y = h - ((y - roi.y0) * (c_y1 - c_y0) / np.float64(roi.y1 - roi.y0) + c_y0)
    return float(mapped_x), float(mapped_y)


__all__ = [
    "ProjectionPlane",
    "Rectangle",
    "fit_roi",
    "map_to_canvas",
    "plane_bounds",
]
