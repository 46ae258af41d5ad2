# frameview/canvas/registry.py
"""Named canvas lookup used to bind renderers to their drawing surfaces."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from frameview.canvas.opencv_canvas import OpenCVCanvas
from frameview.canvas.protocols import CanvasLookupError, CanvasSetupError, CanvasSurface
from frameview.config import RenderConfig
from frameview.utils.logger import get_logger

LOGGER = get_logger(__name__)


class CanvasRegistry:
    """Resolve drawing surfaces by name; every failure is a setup error."""

    def __init__(self) -> None:
        self._surfaces: dict[str, CanvasSurface] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._surfaces

    def __iter__(self) -> Iterator[str]:
        return iter(self._surfaces)

    def __len__(self) -> int:
        return len(self._surfaces)

    def register(self, name: str, surface: object) -> CanvasSurface:
        if not isinstance(surface, CanvasSurface):
            raise CanvasSetupError(
                f"Surface {name!r} of type {type(surface).__name__} does not provide the 2D drawing API"
            )
        width, height = surface.width, surface.height
        if not isinstance(width, int) or not isinstance(height, int) or width <= 0 or height <= 0:
            raise CanvasSetupError(f"Surface {name!r} has invalid size {width!r}x{height!r}")
        if name in self._surfaces:
            LOGGER.warning("Replacing canvas {}", name)
        self._surfaces[name] = surface
        LOGGER.debug("Registered canvas {} ({}x{})", name, width, height)
        return surface

    def resolve(self, name: str) -> CanvasSurface:
        try:
            return self._surfaces[name]
        except KeyError:
            raise CanvasLookupError(
                f"Canvas {name!r} not found; known canvases: {sorted(self._surfaces)}"
            ) from None

    def items(self) -> list[tuple[str, CanvasSurface]]:
        return list(self._surfaces.items())


def create_opencv_registry(
    names: Iterable[str],
    width: int,
    height: int,
    render: RenderConfig | None = None,
) -> CanvasRegistry:
    """Create a registry holding one blank ``OpenCVCanvas`` per name."""
    cfg = render or RenderConfig()
    registry = CanvasRegistry()
    for name in names:
        try:
            canvas = OpenCVCanvas(
                width,
                height,
                line_thickness=cfg.line_thickness,
                font_scale=cfg.font_scale,
            )
        except ValueError as exc:
            raise CanvasSetupError(f"Cannot create canvas {name!r}: {exc}") from exc
        registry.register(name, canvas)
    return registry


__all__ = ["CanvasRegistry", "create_opencv_registry"]
