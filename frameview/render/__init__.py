# frameview/render/__init__.py
"""Frame renderers."""

from __future__ import annotations

from frameview.render.projected import ProjectedFrameDraw

__all__ = ["ProjectedFrameDraw"]
