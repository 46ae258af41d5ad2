# frameview/canvas/__init__.py
"""Drawing surfaces and their lookup."""

from __future__ import annotations

from frameview.canvas.opencv_canvas import OpenCVCanvas, color_to_bgr
from frameview.canvas.protocols import (
    CanvasLookupError,
    CanvasSetupError,
    CanvasSurface,
    TextDrawError,
)
from frameview.canvas.registry import CanvasRegistry, create_opencv_registry

__all__ = [
    "CanvasLookupError",
    "CanvasRegistry",
    "CanvasSetupError",
    "CanvasSurface",
    "OpenCVCanvas",
    "TextDrawError",
    "color_to_bgr",
    "create_opencv_registry",
]
