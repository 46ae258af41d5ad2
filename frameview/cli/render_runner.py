# frameview/cli/render_runner.py
"""Render the frame set onto the three projection canvases.

Builds the demo frames (or loads a scene file), binds one renderer per
projection plane to the canvases ``canvas_down_x/y/z``, draws, and saves
each canvas as an image in the output directory.

Usage: ``python -m frameview.cli.render_runner [scene.yaml]``
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Optional, Sequence

from frameview.canvas import CanvasSetupError, OpenCVCanvas, create_opencv_registry
from frameview.config import FILENAME_TEMPLATE, Settings, get_settings
from frameview.core.frame import Frame
from frameview.core.projection import ProjectionPlane
from frameview.render import ProjectedFrameDraw
from frameview.scene import demo_frames, dump_frames, load_scene
from frameview.utils.error_tracker import ErrorTracker, error_scope
from frameview.utils.format import format_points
from frameview.utils.logger import configure, get_logger, log_file

LOGGER = get_logger(__name__)

PLANES: tuple[ProjectionPlane, ProjectionPlane, ProjectionPlane] = (
    ProjectionPlane.X,
    ProjectionPlane.Y,
    ProjectionPlane.Z,
)


def _load_frames(scene_path: Optional[Path]) -> List[Frame]:
    if scene_path is None:
        LOGGER.info("Using built-in demo frames")
        return demo_frames()
    return load_scene(scene_path)


def render(frames: Sequence[Frame], settings: Settings, output_dir: Path) -> List[Path]:
    """Draw the frames on every canvas and save the images; return their paths."""
    registry = create_opencv_registry(
        settings.canvas.names,
        settings.canvas.width,
        settings.canvas.height,
        render=settings.render,
    )
    renderers = [
        ProjectedFrameDraw.from_registry(name, plane, registry, config=settings.render)
        for name, plane in zip(settings.canvas.names, PLANES)
    ]
    for renderer in renderers:
        renderer.draw(frames, clear=True)

    saved: List[Path] = []
    for name, surface in registry.items():
        if isinstance(surface, OpenCVCanvas):
            saved.append(surface.save(output_dir / FILENAME_TEMPLATE.format(name=name)))

    for renderer in renderers:
        if renderer.tracker.has_errors():
            renderer.tracker.summary()
    return saved


def main(
    scene_path: Optional[Path] = None,
    output_dir: Optional[Path] = None,
    settings: Optional[Settings] = None,
) -> int:
    """Run the render workflow.

    Args:
        scene_path: Scene file to load; falls back to FRAMEVIEW_SCENE, then to
            the built-in demo frames
        output_dir: Directory for the images; defaults to the configured
            output root
        settings: Configuration; read from the environment if None

    Returns:
        Exit code (0 for success)
    """
    configure()
    ErrorTracker.install_excepthook()
    try:
        cfg = settings or get_settings()
    except ValueError as exc:
        LOGGER.error(f"Invalid configuration: {exc}")
        return 1

    scene = scene_path or cfg.scene_path
    out_dir = output_dir or cfg.paths.output_root
    LOGGER.info("frameview render runner")
    if log_file() is not None:
        LOGGER.info(f"Log file: {log_file()}")
    LOGGER.info(f"Canvas: {cfg.canvas.width}x{cfg.canvas.height} px, names={list(cfg.canvas.names)}")

    try:
        frames = _load_frames(scene)
    except (FileNotFoundError, ValueError) as exc:
        LOGGER.error(f"Cannot load frames: {exc}")
        return 1
    for frame in frames:
        LOGGER.debug("{!r}\n{}", frame, format_points(frame.points(), ("origin", "x", "y", "z")))

    try:
        with error_scope("render"):
            saved = render(frames, cfg, out_dir)
    except CanvasSetupError as exc:
        LOGGER.error(f"Canvas setup failed: {exc}")
        return 1

    dump_frames(out_dir / "frames.json", frames)
    LOGGER.info(f"Wrote {len(saved)} canvases to {out_dir}")
    LOGGER.info("Loaded")
    return 0


def run() -> None:
    """Console entry point: optional scene file as the only argument."""
    sys.exit(main(Path(sys.argv[1]) if len(sys.argv) > 1 else None))


if __name__ == "__main__":
    run()


__all__ = ["PLANES", "main", "render", "run"]
