# frameview/canvas/opencv_canvas.py
"""Raster canvas backed by a NumPy image and OpenCV drawing primitives."""

from __future__ import annotations

import math
from pathlib import Path
from typing import List, Tuple

import cv2
import numpy as np
import numpy.typing as npt

from frameview.canvas.protocols import TextDrawError
from frameview.config import COLOR_BACKGROUND, FONT_SCALE, LINE_THICKNESS_PX
from frameview.utils.io import ensure_directory
from frameview.utils.logger import get_logger

LOGGER = get_logger(__name__)

# OpenCV images are BGR.
NAMED_COLORS_BGR: dict[str, Tuple[int, int, int]] = {
    "black": (0, 0, 0),
    "white": (255, 255, 255),
    "red": (0, 0, 255),
    "green": (0, 128, 0),
    "blue": (255, 0, 0),
    "gray": (128, 128, 128),
}

# cv2 works on int32 pixel coordinates
_COORD_LIMIT = float(2**20)


def color_to_bgr(color: str) -> Tuple[int, int, int]:
    try:
        return NAMED_COLORS_BGR[color.lower()]
    except KeyError:
        raise ValueError(f"Unknown colour name: {color!r}") from None


def _to_pixel(x: float, y: float) -> Tuple[int, int]:
    px = min(max(x, -_COORD_LIMIT), _COORD_LIMIT)
    py = min(max(y, -_COORD_LIMIT), _COORD_LIMIT)
    return int(round(px)), int(round(py))


class OpenCVCanvas:
    """In-memory drawing surface implementing the ``CanvasSurface`` protocol."""

    def __init__(
        self,
        width: int,
        height: int,
        *,
        background: str = COLOR_BACKGROUND,
        line_thickness: int = LINE_THICKNESS_PX,
        font_scale: float = FONT_SCALE,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas size must be positive, got {width}x{height}")
        self._width = int(width)
        self._height = int(height)
        self._background = color_to_bgr(background)
        self._stroke_bgr = color_to_bgr("black")
        self._line_thickness = int(line_thickness)
        self._font_scale = float(font_scale)
        self._paths: List[List[Tuple[float, float]]] = []
        self._image: npt.NDArray[np.uint8] = np.empty((self._height, self._width, 3), dtype=np.uint8)
        self._image[:] = self._background

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def image(self) -> npt.NDArray[np.uint8]:
        """The BGR image buffer (not copied)."""
        return self._image

    # ────────────── drawing contract ──────────────

    def clear_rect(self, x: float, y: float, w: float, h: float) -> None:
        c0 = max(int(math.floor(x)), 0)
        r0 = max(int(math.floor(y)), 0)
        c1 = min(int(math.ceil(x + w)), self._width)
        r1 = min(int(math.ceil(y + h)), self._height)
        if c1 > c0 and r1 > r0:
            self._image[r0:r1, c0:c1] = self._background

    def set_stroke_style(self, color: str) -> None:
        self._stroke_bgr = color_to_bgr(color)

    def begin_path(self) -> None:
        self._paths = []

    def move_to(self, x: float, y: float) -> None:
        self._paths.append([(float(x), float(y))])

    def line_to(self, x: float, y: float) -> None:
        if not self._paths:
            self._paths.append([])
        self._paths[-1].append((float(x), float(y)))

    def stroke(self) -> None:
        for sub_path in self._paths:
            points = [p for p in sub_path if math.isfinite(p[0]) and math.isfinite(p[1])]
            if len(points) != len(sub_path):
                LOGGER.debug("Skipped {} non-finite path points", len(sub_path) - len(points))
            if len(points) < 2:
                continue
            pts = np.array([_to_pixel(px, py) for px, py in points], dtype=np.int32)
            cv2.polylines(
                self._image,
                [pts.reshape(-1, 1, 2)],
                isClosed=False,
                color=self._stroke_bgr,
                thickness=self._line_thickness,
                lineType=cv2.LINE_AA,
            )

    def stroke_text(self, text: str, x: float, y: float) -> None:
        if not (math.isfinite(x) and math.isfinite(y)):
            raise TextDrawError(f"cannot place label {text!r} at ({x}, {y})")
        if not text:
            return
        cv2.putText(
            self._image,
            text,
            _to_pixel(x, y),
            cv2.FONT_HERSHEY_SIMPLEX,
            self._font_scale,
            self._stroke_bgr,
            1,
            cv2.LINE_AA,
        )

    # ────────────── output ──────────────

    def save(self, path: Path) -> Path:
        ensure_directory(path.parent)
        if not cv2.imwrite(str(path), self._image):
            raise OSError(f"Failed to write canvas image to {path}")
        LOGGER.info("Saved canvas to {}", path)
        return path


__all__ = ["NAMED_COLORS_BGR", "OpenCVCanvas", "color_to_bgr"]
