# frameview/scene.py
"""Frame sets: the built-in demo scene and JSON/YAML scene files.

Scene file layout::

    frames:
      - name: F_camera
        length: 0.25
        transforms:
          - axis: [1, 0, 0]
            angle_deg: 158
      - name: F_resultant
        copy_of: F_camera
        transforms:
          - quaternion: [1.2329e-06, -1.2329e-06, 0.5592, 0.8290]
            translation: [0, 0, -1.5336]

Each transform gives exactly one rotation (``quaternion`` as w, x, y, z;
``axis`` with ``angle_deg`` or ``angle_rad``; or ``euler_deg`` with an
optional ``seq``) and an optional ``translation``. ``copy_of`` starts from
an earlier frame in its transformed state.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any, List

import numpy as np
import numpy.typing as npt

from frameview.core.frame import Frame
from frameview.core.geometry import quaternion_from_axis_angle, quaternion_from_euler
from frameview.utils.io import read_document, write_document
from frameview.utils.logger import get_logger

LOGGER = get_logger(__name__)

DEMO_CAMERA_LENGTH = 0.25
DEMO_CAMERA_ANGLE_DEG = 180.0 - 22.0
DEMO_RESULTANT_QUAT = (1.23290445e-06, (-1.23290445e-06, 5.59194185e-01, 8.29036032e-01))
DEMO_RESULTANT_TRANSLATION = (0.0, 0.0, -1.5336)


def demo_frames() -> List[Frame]:
    """Camera frame tilted about X, plus a copy moved by a fixed pose."""
    camera = Frame("F_camera", DEMO_CAMERA_LENGTH)
    camera.transform(
        quaternion_from_axis_angle([1.0, 0.0, 0.0], DEMO_CAMERA_ANGLE_DEG, degrees=True),
        [0.0, 0.0, 0.0],
    )
    resultant = camera.copy(name="F_resultant")
    resultant.transform(DEMO_RESULTANT_QUAT, DEMO_RESULTANT_TRANSLATION)
    return [camera, resultant]


def _number(value: Any, what: str) -> float:
    if isinstance(value, bool):
        raise ValueError(f"{what} must be a number, got {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValueError(f"{what} must be a number, got {value!r}") from None


def _vector(value: Any, size: int, what: str) -> npt.NDArray[np.float64]:
    try:
        arr = np.asarray(value, dtype=np.float64).reshape(-1)
    except (TypeError, ValueError):
        raise ValueError(f"{what} must have {size} numbers, got {value!r}") from None
    if arr.shape != (size,):
        raise ValueError(f"{what} must have {size} numbers, got {value!r}")
    return arr


def parse_rotation(spec: Mapping[str, Any], where: str) -> npt.NDArray[np.float64]:
    """Return the scalar-first quaternion described by one transform entry."""
    keys = [k for k in ("quaternion", "axis", "euler_deg") if k in spec]
    if len(keys) != 1:
        raise ValueError(f"{where}: expected exactly one of quaternion/axis/euler_deg, got {keys}")
    key = keys[0]
    if key == "quaternion":
        q = _vector(spec["quaternion"], 4, f"{where}.quaternion")
        if np.linalg.norm(q) < 1e-12:
            raise ValueError(f"{where}.quaternion must be non-zero")
        return q
    if key == "axis":
        axis = _vector(spec["axis"], 3, f"{where}.axis")
        if "angle_deg" in spec:
            angle = _number(spec["angle_deg"], f"{where}.angle_deg")
            return quaternion_from_axis_angle(axis, angle, degrees=True)
        if "angle_rad" in spec:
            return quaternion_from_axis_angle(axis, _number(spec["angle_rad"], f"{where}.angle_rad"))
        raise ValueError(f"{where}: axis rotation needs angle_deg or angle_rad")
    angles = _vector(spec["euler_deg"], 3, f"{where}.euler_deg")
    return quaternion_from_euler(angles, seq=str(spec.get("seq", "xyz")), degrees=True)


def _is_list(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def frames_from_obj(data: Any) -> List[Frame]:
    """Build frames from a parsed scene document.

    Raises:
        ValueError: Any malformed entry; the message names it
    """
    if not isinstance(data, Mapping) or not _is_list(data.get("frames")):
        raise ValueError("Scene must be an object with a 'frames' list")

    frames: List[Frame] = []
    by_name: dict[str, Frame] = {}
    for idx, entry in enumerate(data["frames"]):
        where = f"frames[{idx}]"
        if not isinstance(entry, Mapping) or "name" not in entry:
            raise ValueError(f"{where}: frame entry needs a 'name'")
        name = str(entry["name"])

        source = entry.get("copy_of")
        if source is not None:
            if not isinstance(source, str):
                raise ValueError(f"{where}.copy_of must be a frame name, got {source!r}")
            if source not in by_name:
                raise ValueError(f"{where}: copy_of refers to unknown frame {source!r}")
            frame = by_name[source].copy(name=name)
        else:
            length = entry.get("length")
            frame = Frame(name, None if length is None else _number(length, f"{where}.length"))

        transforms = entry.get("transforms")
        if transforms is None:
            transforms = []
        elif not _is_list(transforms):
            raise ValueError(f"{where}.transforms must be a list, got {transforms!r}")

        for t_idx, spec in enumerate(transforms):
            t_where = f"{where}.transforms[{t_idx}]"
            if not isinstance(spec, Mapping):
                raise ValueError(f"{t_where}: transform must be an object")
            rotation = parse_rotation(spec, t_where)
            translation = _vector(spec.get("translation", [0.0, 0.0, 0.0]), 3, f"{t_where}.translation")
            frame.transform(rotation, translation)

        frames.append(frame)
        by_name[name] = frame
    return frames


def load_scene(path: Path) -> List[Frame]:
    """Load a frame set from a JSON or YAML scene file."""
    if not path.is_file():
        raise FileNotFoundError(f"Scene file not found: {path}")
    frames = frames_from_obj(read_document(path))
    LOGGER.info("Loaded {} frames from {}", len(frames), path)
    return frames


def frames_to_obj(frames: Sequence[Frame]) -> dict[str, Any]:
    """Snapshot of the current frame points, for reports next to the images."""
    return {
        "frames": [
            {
                "name": f.name,
                "origin": f.origin.tolist(),
                "x": f.x.tolist(),
                "y": f.y.tolist(),
                "z": f.z.tolist(),
            }
            for f in frames
        ]
    }


def dump_frames(path: Path, frames: Sequence[Frame]) -> Path:
    return write_document(path, frames_to_obj(frames))


__all__ = [
    "DEMO_CAMERA_ANGLE_DEG",
    "DEMO_CAMERA_LENGTH",
    "demo_frames",
    "dump_frames",
    "frames_from_obj",
    "frames_to_obj",
    "load_scene",
    "parse_rotation",
]
