# frameview/core/frame.py
"""Reference frames and their axis-aligned bounding extents."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

from frameview.config import DEFAULT_AXIS_LENGTH, EXTENT_SENTINEL, EXTENTS_SEED
from frameview.core.geometry import QuaternionLike, as_rotation
from frameview.utils.format import format_vector
from frameview.utils.logger import get_logger

LOGGER = get_logger(__name__)


@dataclass
class Extents:
    """Axis-aligned 3D bounding box in world units."""

    x_min: float
    y_min: float
    z_min: float
    x_max: float
    y_max: float
    z_max: float

    @classmethod
    def seed(cls) -> Extents:
        """Small symmetric box every union starts from, so a fit never sees zero size."""
        return cls(
            x_min=-EXTENTS_SEED,
            y_min=-EXTENTS_SEED,
            z_min=-EXTENTS_SEED,
            x_max=EXTENTS_SEED,
            y_max=EXTENTS_SEED,
            z_max=EXTENTS_SEED,
        )

    @property
    def mins(self) -> npt.NDArray[np.float64]:
        return np.array([self.x_min, self.y_min, self.z_min], dtype=np.float64)

    @property
    def maxs(self) -> npt.NDArray[np.float64]:
        return np.array([self.x_max, self.y_max, self.z_max], dtype=np.float64)

    def union(self, other: Extents) -> Extents:
        return Extents(
            x_min=min(self.x_min, other.x_min),
            y_min=min(self.y_min, other.y_min),
            z_min=min(self.z_min, other.z_min),
            x_max=max(self.x_max, other.x_max),
            y_max=max(self.y_max, other.y_max),
            z_max=max(self.z_max, other.z_max),
        )


class Frame:
    """Named origin plus x/y/z axis tips, transformed rigidly in place.

    At construction the axes are orthogonal, of length ``length`` and anchored
    at the world origin. Every ``transform`` rotates and then translates all
    four points the same way, so the rigid shape is kept.
    """

    def __init__(self, name: str, length: float | None = None) -> None:
        size = DEFAULT_AXIS_LENGTH if length is None else float(length)
        self.name = name
        self.origin: npt.NDArray[np.float64] = np.zeros(3, dtype=np.float64)
        self.x: npt.NDArray[np.float64] = np.array([size, 0.0, 0.0], dtype=np.float64)
        self.y: npt.NDArray[np.float64] = np.array([0.0, size, 0.0], dtype=np.float64)
        self.z: npt.NDArray[np.float64] = np.array([0.0, 0.0, size], dtype=np.float64)

    def __repr__(self) -> str:
        return (
            f"Frame(name={self.name!r}, origin={format_vector(self.origin)}, "
            f"x={format_vector(self.x)}, y={format_vector(self.y)}, z={format_vector(self.z)})"
        )

    def points(self) -> npt.NDArray[np.float64]:
        """Return the (4, 3) stack ``[origin, x, y, z]``."""
        return np.vstack([self.origin, self.x, self.y, self.z])

    def copy(self, name: str | None = None) -> Frame:
        clone = Frame(self.name if name is None else name)
        clone.origin = self.origin.copy()
        clone.x = self.x.copy()
        clone.y = self.y.copy()
        clone.z = self.z.copy()
        return clone

    def transform(self, rotation: QuaternionLike, translation: npt.ArrayLike) -> None:
        """Rotate every point by ``rotation`` and then add ``translation``."""
        rot = as_rotation(rotation)
        shift = np.asarray(translation, dtype=np.float64).reshape(3)
        moved = rot.apply(self.points()) + shift
        self.origin, self.x, self.y, self.z = (row.copy() for row in moved)
        LOGGER.debug("Transformed {} -> origin {}", self.name, format_vector(self.origin))

    def get_min_max(self) -> Extents:
        # The scan starts from a fixed sentinel rather than the first point;
        # coordinates at or beyond EXTENT_SENTINEL in magnitude are not supported.
        mins = np.full(3, EXTENT_SENTINEL, dtype=np.float64)
        maxs = np.full(3, -EXTENT_SENTINEL, dtype=np.float64)
        for point in (self.origin, self.x, self.y, self.z):
            mins = np.minimum(mins, point)
            maxs = np.maximum(maxs, point)
        return Extents(
            x_min=float(mins[0]),
            y_min=float(mins[1]),
            z_min=float(mins[2]),
            x_max=float(maxs[0]),
            y_max=float(maxs[1]),
            z_max=float(maxs[2]),
        )


def accumulate_extents(frames: Iterable[Frame]) -> Extents:
    """Union of the seed box and every frame's extents."""
    total = Extents.seed()
    for frame in frames:
        total = total.union(frame.get_min_max())
    return total


__all__ = ["Extents", "Frame", "accumulate_extents"]
