# frameview/utils/format.py
"""Compact text for vectors and frame points in log lines."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
import numpy.typing as npt


def format_vector(vec: npt.ArrayLike, precision: int = 4) -> str:
    """Format a short vector as ``(a, b, c)``."""
    values = np.asarray(vec, dtype=np.float64).reshape(-1)
    return "(" + ", ".join(f"{float(v):.{precision}f}" for v in values) + ")"


def format_points(
    points: npt.ArrayLike,
    labels: Sequence[str] | None = None,
    precision: int = 4,
) -> str:
    """One ``label: (a, b, c)`` line per row of an (N, 3) array.

    Rows without a label are numbered instead.
    """
    rows = np.atleast_2d(np.asarray(points, dtype=np.float64))
    names = list(labels or [])
    names += [str(i) for i in range(len(names), len(rows))]
    width = max((len(n) for n in names), default=0)
    return "\n".join(
        f"{name:>{width}}: {format_vector(row, precision)}" for name, row in zip(names, rows)
    )


__all__ = ["format_points", "format_vector"]
