# frameview/render/projected.py
"""Per-canvas renderer drawing frames projected onto one plane."""

from __future__ import annotations

from collections.abc import Sequence

from frameview.canvas.protocols import CanvasSurface
from frameview.canvas.registry import CanvasRegistry
from frameview.config import RenderConfig
from frameview.core.frame import Frame, accumulate_extents
from frameview.core.projection import ProjectionPlane, Rectangle, fit_roi, map_to_canvas
from frameview.utils.error_tracker import ErrorTracker
from frameview.utils.logger import get_logger

LOGGER = get_logger(__name__)


class ProjectedFrameDraw:
    """Draws a frame set onto one canvas, viewed along one world axis.

    The ROI is owned by the instance and refitted on every ``draw`` call.
    """

    def __init__(
        self,
        surface: CanvasSurface,
        plane: ProjectionPlane,
        config: RenderConfig | None = None,
        tracker: ErrorTracker | None = None,
    ) -> None:
        self.surface = surface
        self.plane = ProjectionPlane(plane)
        self.config = config or RenderConfig()
        self.tracker = tracker or ErrorTracker(context=f"render.{self.plane.name}")
        self.roi = Rectangle(-1.0, -1.0, 1.0, 1.0)

    @classmethod
    def from_registry(
        cls,
        name: str,
        plane: ProjectionPlane,
        registry: CanvasRegistry,
        config: RenderConfig | None = None,
    ) -> ProjectedFrameDraw:
        """Bind a renderer to the surface registered under ``name``."""
        return cls(registry.resolve(name), plane, config=config)

    def fit_scale(self, frames: Sequence[Frame]) -> Rectangle:
        extents = accumulate_extents(frames)
        fit_roi(
            extents,
            self.plane,
            self.surface.width,
            self.surface.height,
            margin=self.config.margin,
            roi=self.roi,
        )
        return self.roi

    def scale(self, x: float, y: float) -> tuple[float, float]:
        return map_to_canvas(
            self.roi,
            x,
            y,
            self.surface.width,
            self.surface.height,
            margin=self.config.margin,
        )

    def project(self, point) -> tuple[float, float]:
        """World point to canvas pixels using the plane's axis selection."""
        return self.scale(*self.plane.select(point))

    def draw(self, frames: Sequence[Frame], clear: bool = True) -> None:
        ctx = self.surface
        width = float(ctx.width)
        height = float(ctx.height)
        if clear:
            ctx.clear_rect(0.0, 0.0, width, height)

        self.fit_scale(frames)

        ctx.set_stroke_style(self.config.border_color)
        ctx.begin_path()
        ctx.move_to(0.0, 0.0)
        ctx.line_to(width, 0.0)
        ctx.line_to(width, height)
        ctx.line_to(0.0, height)
        ctx.line_to(0.0, 0.0)
        ctx.stroke()

        for frame in frames:
            xo, yo = self.project(frame.origin)
            tips = (frame.x, frame.y, frame.z)
            for tip, color in zip(tips, self.config.axis_colors):
                xt, yt = self.project(tip)
                ctx.set_stroke_style(color)
                ctx.begin_path()
                ctx.move_to(xo, yo)
                ctx.line_to(xt, yt)
                ctx.stroke()

            ctx.set_stroke_style(self.config.label_color)
            ctx.begin_path()
            ctx.move_to(xo, yo)
            self._label(frame.name, xo, yo)
            ctx.stroke()

        LOGGER.debug("Drew {} frames on plane {}", len(frames), self.plane.name)

    def _label(self, text: str, x: float, y: float) -> None:
        if self.config.strict_text:
            self.surface.stroke_text(text, x, y)
            return
        try:
            self.surface.stroke_text(text, x, y)
        except Exception as exc:
            self.tracker.record_exception(f"label:{text}", exc)


__all__ = ["ProjectedFrameDraw"]
