# frameview/canvas/protocols.py
"""Protocol interfaces for the drawing host.

The renderer only talks to these interfaces, so any 2D surface (raster
image, GUI widget, command recorder in tests) can receive the projections.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class CanvasSurface(Protocol):
    """Protocol for a 2D drawing surface with a path-based stroke API."""

    @property
    def width(self) -> int:
        """Surface width in pixels."""
        ...

    @property
    def height(self) -> int:
        """Surface height in pixels."""
        ...

    def clear_rect(self, x: float, y: float, w: float, h: float) -> None:
        """Reset the given rectangle to the background."""
        ...

    def set_stroke_style(self, color: str) -> None:
        """Select the colour used by subsequent strokes."""
        ...

    def begin_path(self) -> None:
        """Discard the current path and start a new one."""
        ...

    def move_to(self, x: float, y: float) -> None:
        """Start a new sub-path at the given point."""
        ...

    def line_to(self, x: float, y: float) -> None:
        """Extend the current sub-path with a straight segment."""
        ...

    def stroke(self) -> None:
        """Draw the current path outline."""
        ...

    def stroke_text(self, text: str, x: float, y: float) -> None:
        """Draw outlined text anchored at the given point."""
        ...


class CanvasSetupError(RuntimeError):
    """A drawing surface could not be resolved or is unusable."""


class CanvasLookupError(CanvasSetupError):
    """No surface is registered under the requested name."""


class TextDrawError(RuntimeError):
    """The surface failed to draw a text label."""


__all__ = [
    "CanvasLookupError",
    "CanvasSetupError",
    "CanvasSurface",
    "TextDrawError",
]
