# tests/conftest.py
"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable

import pytest

if TYPE_CHECKING:
    from frameview.config import Settings
    from frameview.core.frame import Frame


class RecordingCanvas:
    """Drawing surface that records every call instead of drawing."""

    def __init__(self, width: int = 200, height: int = 200, fail_text: bool = False) -> None:
        self._width = width
        self._height = height
        self.fail_text = fail_text
        self.commands: list[tuple[Any, ...]] = []

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def clear_rect(self, x: float, y: float, w: float, h: float) -> None:
        self.commands.append(("clear_rect", x, y, w, h))

    def set_stroke_style(self, color: str) -> None:
        self.commands.append(("set_stroke_style", color))

    def begin_path(self) -> None:
        self.commands.append(("begin_path",))

    def move_to(self, x: float, y: float) -> None:
        self.commands.append(("move_to", x, y))

    def line_to(self, x: float, y: float) -> None:
        self.commands.append(("line_to", x, y))

    def stroke(self) -> None:
        self.commands.append(("stroke",))

    def stroke_text(self, text: str, x: float, y: float) -> None:
        if self.fail_text:
            raise RuntimeError("text rendering unavailable")
        self.commands.append(("stroke_text", text, x, y))

    def names(self) -> list[str]:
        return [c[0] for c in self.commands]


@pytest.fixture
def make_canvas() -> Callable[..., RecordingCanvas]:
    """Factory for recording canvases."""
    return RecordingCanvas


@pytest.fixture
def recording_canvas() -> RecordingCanvas:
    """200x200 recording canvas."""
    return RecordingCanvas(200, 200)


@pytest.fixture
def identity_frame() -> Frame:
    """Unit frame at the world origin."""
    from frameview.core.frame import Frame

    return Frame("origin")


@pytest.fixture
def offset_frame() -> Frame:
    """Frame with distinct coordinates on every axis: origin (1, 2, 3), length 0.5."""
    from frameview.core.frame import Frame

    frame = Frame("offset", 0.5)
    frame.transform([1.0, 0.0, 0.0, 0.0], [1.0, 2.0, 3.0])
    return frame


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings writing into a temporary directory with small canvases."""
    from frameview.config import CanvasConfig, PathsConfig, Settings

    paths = PathsConfig(output_root=tmp_path / "output", logs_root=tmp_path / "logs")
    return Settings(paths=paths, canvas=CanvasConfig(width=160, height=120))
