# frameview/core/geometry/__init__.py
"""Quaternion rotation utilities."""

from __future__ import annotations

from frameview.core.geometry.quaternion import (
    QuaternionLike,
    as_rotation,
    quaternion_from_axis_angle,
    quaternion_from_euler,
    quaternion_multiply,
    rotate_vector,
    to_wxyz,
)

__all__ = [
    "QuaternionLike",
    "as_rotation",
    "quaternion_from_axis_angle",
    "quaternion_from_euler",
    "quaternion_multiply",
    "rotate_vector",
    "to_wxyz",
]
