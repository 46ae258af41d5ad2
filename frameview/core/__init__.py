# frameview/core/__init__.py
"""Frame geometry and orthographic projection."""

from __future__ import annotations

from frameview.core.frame import Extents, Frame, accumulate_extents
from frameview.core.projection import (
    ProjectionPlane,
    Rectangle,
    fit_roi,
    map_to_canvas,
    plane_bounds,
)

__all__ = [
    "Extents",
    "Frame",
    "ProjectionPlane",
    "Rectangle",
    "accumulate_extents",
    "fit_roi",
    "map_to_canvas",
    "plane_bounds",
]
