# frameview/utils/io.py
"""Scene and report documents on disk: JSON or YAML, picked by file suffix."""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any

import yaml

from frameview.utils.logger import get_logger

LOGGER = get_logger(__name__)

_YAML_SUFFIXES = (".yaml", ".yml")


def is_yaml_path(path: Path) -> bool:
    return path.suffix.lower() in _YAML_SUFFIXES


def ensure_directory(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path


def _dumps(path: Path, data: Any) -> str:
    if is_yaml_path(path):
        return yaml.safe_dump(data, sort_keys=False)
    return json.dumps(data, indent=2) + "\n"


def write_document(path: Path, data: Any) -> Path:
    """Serialize ``data`` next to ``path`` and move it into place in one step.

    A reader never sees a half-written file: the text goes to a temporary
    file in the target directory, which then replaces ``path``.
    """
    text = _dumps(path, data)
    ensure_directory(path.parent)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(text)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
    LOGGER.debug("Wrote {} ({} bytes)", path, len(text))
    return path


def read_document(path: Path) -> Any:
    """Parse a JSON or YAML document.

    Raises:
        FileNotFoundError: ``path`` does not exist
        ValueError: The text is not valid JSON/YAML; the message names the file
    """
    kind = "YAML" if is_yaml_path(path) else "JSON"
    with path.open("r", encoding="utf-8") as handle:
        try:
            if kind == "YAML":
                return yaml.safe_load(handle)
            return json.load(handle)
        except (yaml.YAMLError, json.JSONDecodeError) as exc:
            raise ValueError(f"{path}: not a valid {kind} document: {exc}") from exc


__all__ = ["ensure_directory", "is_yaml_path", "read_document", "write_document"]
