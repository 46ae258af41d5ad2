# frameview/core/geometry/quaternion.py
"""Quaternion helpers on top of scipy's Rotation.

Quaternions are stored scalar-first, ``(w, x, y, z)``. The pair form
``(w, (x, y, z))`` is accepted as well.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Union

import numpy as np
import numpy.typing as npt
from scipy.spatial.transform import Rotation as SciRot

QuaternionLike = Union[SciRot, Sequence[float], Sequence[object], npt.NDArray[np.float64]]


def _wxyz_array(q: QuaternionLike) -> npt.NDArray[np.float64]:
    if len(q) == 2:  # type: ignore[arg-type]
        w, vec = q  # type: ignore[misc]
        xyz = np.asarray(vec, dtype=np.float64).reshape(-1)
        if xyz.shape != (3,):
            raise ValueError(f"quaternion vector part must have 3 items, got {xyz.shape}")
        return np.array([float(w), *xyz], dtype=np.float64)
    arr = np.asarray(q, dtype=np.float64).reshape(-1)
    if arr.shape != (4,):
        raise ValueError(f"quaternion must have 4 components (w, x, y, z), got {arr.shape}")
    return arr


def as_rotation(q: QuaternionLike) -> SciRot:
    """Convert a scalar-first quaternion (or a Rotation) into a scipy Rotation.

    scipy normalizes the input, so nearly-unit quaternions are accepted.
    """
    if isinstance(q, SciRot):
        return q
    w, x, y, z = _wxyz_array(q)
    return SciRot.from_quat([x, y, z, w])


def to_wxyz(rotation: SciRot) -> npt.NDArray[np.float64]:
    """Return the scalar-first quaternion of a Rotation."""
    x, y, z, w = rotation.as_quat()
    return np.array([w, x, y, z], dtype=np.float64)


def quaternion_from_axis_angle(
    axis: Sequence[float], angle: float, degrees: bool = False
) -> npt.NDArray[np.float64]:
    """Build a unit quaternion rotating by ``angle`` about ``axis``.

    Args:
        axis: Rotation axis, normalized internally
        angle: Rotation angle
        degrees: Interpret angle in degrees if True, radians if False

    Returns:
        Scalar-first unit quaternion
    """
    unit = np.asarray(axis, dtype=np.float64).reshape(3)
    norm = float(np.linalg.norm(unit))
    if norm < 1e-12:
        raise ValueError("rotation axis must be non-zero")
    theta = np.deg2rad(angle) if degrees else float(angle)
    return to_wxyz(SciRot.from_rotvec(unit / norm * theta))


def quaternion_from_euler(
    angles: Sequence[float], seq: str = "xyz", degrees: bool = True
) -> npt.NDArray[np.float64]:
    """Build a unit quaternion from Euler angles in the given sequence."""
    return to_wxyz(SciRot.from_euler(seq, angles, degrees=degrees))


def quaternion_multiply(a: QuaternionLike, b: QuaternionLike) -> npt.NDArray[np.float64]:
    """Hamilton product ``a * b``: rotating by the result equals ``b`` then ``a``."""
    return to_wxyz(as_rotation(a) * as_rotation(b))


def rotate_vector(q: QuaternionLike, vec: npt.ArrayLike) -> npt.NDArray[np.float64]:
    """Rotate a 3-vector (or an (N, 3) stack) by a quaternion."""
    return as_rotation(q).apply(np.asarray(vec, dtype=np.float64))


__all__ = [
    "QuaternionLike",
    "as_rotation",
    "quaternion_from_axis_angle",
    "quaternion_from_euler",
    "quaternion_multiply",
    "rotate_vector",
    "to_wxyz",
]
