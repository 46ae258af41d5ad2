# frameview/config.py
"""Centralized configuration for the frameview renderer.

All constants, settings, and configuration dataclasses are defined here.
Modules should import from this single source of truth.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Final, Tuple

# ============================================================================
# PROJECT PATHS
# ============================================================================

BASE_DIR: Final[Path] = Path(__file__).resolve().parent.parent


def _env_path(key: str, default: Path) -> Path:
    """Resolve path from environment variable with fallback."""
    value = os.getenv(key)
    return Path(value).expanduser() if value else default


def _env_int(key: str, default: int) -> int:
    """Resolve integer from environment variable with fallback."""
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{key} must be an integer, got {value!r}") from None


def _env_bool(key: str, default: bool) -> bool:
    """Resolve boolean from environment variable with fallback."""
    value = os.getenv(key)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# ============================================================================
# VIEW FITTING CONSTANTS
# ============================================================================

# Fraction used both for the ROI margin and the canvas border.
CANVAS_SCALE: Final[float] = 0.1
# Half-size of the seed box every extents union starts from.
EXTENTS_SEED: Final[float] = 0.01
# Per-frame min/max scan starts from +/- this value.
EXTENT_SENTINEL: Final[float] = 10000.0
DEFAULT_AXIS_LENGTH: Final[float] = 1.0

# ============================================================================
# CANVAS CONSTANTS
# ============================================================================

CANVAS_NAMES: Final[Tuple[str, str, str]] = (
    "canvas_down_x",
    "canvas_down_y",
    "canvas_down_z",
)
CANVAS_DEFAULT_WIDTH: Final[int] = 400
CANVAS_DEFAULT_HEIGHT: Final[int] = 400

COLOR_BORDER: Final[str] = "black"
COLOR_LABEL: Final[str] = "black"
COLOR_BACKGROUND: Final[str] = "white"
AXIS_COLORS: Final[Tuple[str, str, str]] = ("red", "green", "blue")

LINE_THICKNESS_PX: Final[int] = 1
FONT_SCALE: Final[float] = 0.4

# ============================================================================
# FILE NAMING CONSTANTS
# ============================================================================

FILENAME_TEMPLATE: Final[str] = "{name}.png"

# ============================================================================
# ENUMS
# ============================================================================


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


# ============================================================================
# DATACLASSES - Configuration Sections
# ============================================================================


@dataclass(frozen=True)
class PathsConfig:
    """File system paths configuration."""

    output_root: Path
    logs_root: Path


@dataclass(frozen=True)
class CanvasConfig:
    """Size and names of the three projection canvases."""

    width: int = CANVAS_DEFAULT_WIDTH
    height: int = CANVAS_DEFAULT_HEIGHT
    names: Tuple[str, str, str] = CANVAS_NAMES


@dataclass(frozen=True)
class RenderConfig:
    """Drawing style and failure policy of the projected frame renderer.

    Attributes:
        margin: Fraction of the canvas kept free on each side
        border_color: Colour of the canvas border rectangle
        label_color: Colour of the frame name label
        axis_colors: Colours of the x, y and z axis segments
        line_thickness: Stroke width in pixels (raster canvases only)
        font_scale: Label font scale (raster canvases only)
        strict_text: Propagate label drawing failures if True, record and
            continue otherwise
    """

    margin: float = CANVAS_SCALE
    border_color: str = COLOR_BORDER
    label_color: str = COLOR_LABEL
    axis_colors: Tuple[str, str, str] = AXIS_COLORS
    line_thickness: int = LINE_THICKNESS_PX
    font_scale: float = FONT_SCALE
    strict_text: bool = True


# ============================================================================
# MAIN CONFIGURATION
# ============================================================================


@dataclass(frozen=True)
class Settings:
    """Main application configuration.

    Instances are immutable (frozen=True) to prevent accidental mutation.
    """

    paths: PathsConfig
    canvas: CanvasConfig = field(default_factory=CanvasConfig)
    render: RenderConfig = field(default_factory=RenderConfig)
    scene_path: Path | None = None


def get_paths() -> PathsConfig:
    """Output and log directories from FRAMEVIEW_OUTPUT_ROOT / FRAMEVIEW_LOGS_ROOT."""
    output_root = _env_path("FRAMEVIEW_OUTPUT_ROOT", BASE_DIR / "output")
    logs_root = _env_path("FRAMEVIEW_LOGS_ROOT", output_root / "logs")
    return PathsConfig(output_root=output_root, logs_root=logs_root)


def get_settings() -> Settings:
    """Factory function to create Settings with environment variable overrides.

    Environment variables:
        FRAMEVIEW_OUTPUT_ROOT: Directory receiving the rendered canvases
        FRAMEVIEW_LOGS_ROOT: Logs directory
        FRAMEVIEW_CANVAS_WIDTH: Canvas width in pixels
        FRAMEVIEW_CANVAS_HEIGHT: Canvas height in pixels
        FRAMEVIEW_STRICT_TEXT: Propagate label drawing failures (default on)
        FRAMEVIEW_SCENE: Scene file to render instead of the built-in frames
    """
    paths = get_paths()

    canvas = CanvasConfig(
        width=_env_int("FRAMEVIEW_CANVAS_WIDTH", CANVAS_DEFAULT_WIDTH),
        height=_env_int("FRAMEVIEW_CANVAS_HEIGHT", CANVAS_DEFAULT_HEIGHT),
    )
    render = RenderConfig(strict_text=_env_bool("FRAMEVIEW_STRICT_TEXT", True))

    scene = os.getenv("FRAMEVIEW_SCENE")
    scene_path = Path(scene).expanduser() if scene else None

    return Settings(paths=paths, canvas=canvas, render=render, scene_path=scene_path)


# ============================================================================
# MODULE EXPORTS
# ============================================================================

__all__ = [
    # Factory
    "get_settings",
    "get_paths",
    # Main config
    "Settings",
    # Config sections
    "PathsConfig",
    "CanvasConfig",
    "RenderConfig",
    # Enums
    "LogLevel",
    # Constants (selected for external use)
    "CANVAS_SCALE",
    "EXTENTS_SEED",
    "EXTENT_SENTINEL",
    "DEFAULT_AXIS_LENGTH",
    "CANVAS_NAMES",
    "CANVAS_DEFAULT_WIDTH",
    "CANVAS_DEFAULT_HEIGHT",
    "COLOR_BORDER",
    "COLOR_LABEL",
    "COLOR_BACKGROUND",
    "AXIS_COLORS",
    "FILENAME_TEMPLATE",
    "BASE_DIR",
]
