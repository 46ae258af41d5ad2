# frameview/__init__.py
"""Orthographic three-view rendering of 3D reference frames."""

from __future__ import annotations

from frameview.config import Settings, get_settings
from frameview.core import (
    Extents,
    Frame,
    ProjectionPlane,
    Rectangle,
    accumulate_extents,
    fit_roi,
    map_to_canvas,
)
from frameview.render import ProjectedFrameDraw

__all__ = [
    "Extents",
    "Frame",
    "ProjectedFrameDraw",
    "ProjectionPlane",
    "Rectangle",
    "Settings",
    "accumulate_extents",
    "fit_roi",
    "get_settings",
    "map_to_canvas",
]
