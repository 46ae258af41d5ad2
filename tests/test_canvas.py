# tests/test_canvas.py
"""Tests for the OpenCV canvas and the canvas registry."""

from __future__ import annotations

from pathlib import Path

import cv2
import numpy as np
import pytest

from frameview.canvas import (
    CanvasLookupError,
    CanvasRegistry,
    CanvasSetupError,
    CanvasSurface,
    OpenCVCanvas,
    TextDrawError,
    color_to_bgr,
    create_opencv_registry,
)
from frameview.config import CANVAS_NAMES


@pytest.fixture
def canvas() -> OpenCVCanvas:
    return OpenCVCanvas(50, 40)


def test_canvas_satisfies_protocol(canvas: OpenCVCanvas) -> None:
    assert isinstance(canvas, CanvasSurface)
    assert (canvas.width, canvas.height) == (50, 40)
    assert canvas.image.shape == (40, 50, 3)
    assert np.all(canvas.image == 255)


def test_colour_names() -> None:
    assert color_to_bgr("red") == (0, 0, 255)
    assert color_to_bgr("Blue") == (255, 0, 0)
    with pytest.raises(ValueError, match="Unknown colour"):
        color_to_bgr("mauve")


def test_stroke_draws_in_current_colour(canvas: OpenCVCanvas) -> None:
    canvas.set_stroke_style("red")
    canvas.begin_path()
    canvas.move_to(5.0, 20.0)
    canvas.line_to(45.0, 20.0)
    canvas.stroke()

    column = canvas.image[17:24, 25].astype(int)
    redness = column[:, 2] - np.maximum(column[:, 0], column[:, 1])
    assert redness.max() > 100
    assert np.all(canvas.image[5, 25] == 255)


def test_begin_path_discards_previous_segments(canvas: OpenCVCanvas) -> None:
    canvas.begin_path()
    canvas.move_to(5.0, 10.0)
    canvas.line_to(45.0, 10.0)
    canvas.begin_path()
    canvas.stroke()
    assert np.all(canvas.image == 255)


def test_clear_rect_restores_background(canvas: OpenCVCanvas) -> None:
    canvas.begin_path()
    canvas.move_to(0.0, 0.0)
    canvas.line_to(50.0, 40.0)
    canvas.stroke()
    assert not np.all(canvas.image == 255)

    canvas.clear_rect(0.0, 0.0, 50.0, 40.0)
    assert np.all(canvas.image == 255)


def test_non_finite_points_are_skipped(canvas: OpenCVCanvas) -> None:
    canvas.begin_path()
    canvas.move_to(float("nan"), 3.0)
    canvas.line_to(float("inf"), 4.0)
    canvas.stroke()
    assert np.all(canvas.image == 255)


def test_text_draws_pixels(canvas: OpenCVCanvas) -> None:
    canvas.set_stroke_style("black")
    canvas.stroke_text("F", 10.0, 30.0)
    assert canvas.image.min() < 128


def test_text_at_non_finite_position_fails(canvas: OpenCVCanvas) -> None:
    with pytest.raises(TextDrawError):
        canvas.stroke_text("F", float("nan"), 1.0)


def test_save_writes_image(canvas: OpenCVCanvas, tmp_path: Path) -> None:
    path = canvas.save(tmp_path / "nested" / "canvas.png")
    assert path.is_file()
    loaded = cv2.imread(str(path))
    assert loaded.shape == (40, 50, 3)


def test_invalid_canvas_size() -> None:
    with pytest.raises(ValueError):
        OpenCVCanvas(0, 10)


def test_registry_resolves_registered(canvas: OpenCVCanvas) -> None:
    registry = CanvasRegistry()
    registry.register("main", canvas)
    assert registry.resolve("main") is canvas
    assert "main" in registry
    assert len(registry) == 1


def test_registry_missing_name_is_setup_error() -> None:
    registry = CanvasRegistry()
    with pytest.raises(CanvasLookupError, match="canvas_down_x"):
        registry.resolve("canvas_down_x")
    with pytest.raises(CanvasSetupError):
        registry.resolve("canvas_down_x")


def test_registry_rejects_non_surface() -> None:
    registry = CanvasRegistry()
    with pytest.raises(CanvasSetupError, match="2D drawing API"):
        registry.register("div", object())


def test_registry_rejects_empty_surface(make_canvas) -> None:
    registry = CanvasRegistry()
    with pytest.raises(CanvasSetupError, match="invalid size"):
        registry.register("empty", make_canvas(0, 100))


def test_create_opencv_registry() -> None:
    registry = create_opencv_registry(CANVAS_NAMES, 64, 48)
    assert list(registry) == list(CANVAS_NAMES)
    for _, surface in registry.items():
        assert isinstance(surface, OpenCVCanvas)
        assert (surface.width, surface.height) == (64, 48)


def test_create_opencv_registry_bad_size() -> None:
    with pytest.raises(CanvasSetupError):
        create_opencv_registry(["a"], 0, 48)
