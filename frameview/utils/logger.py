# frameview/utils/logger.py
"""Single-source Loguru setup: one-line console sink, optional file sink."""

from __future__ import annotations

import inspect
import os
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional, TextIO

from loguru import logger as _root_logger
from loguru._logger import Logger as LoguruLogger

from frameview.config import LogLevel, get_paths


# ---------- options ----------
@dataclass(slots=True)
class _LogOptions:
    level: str = os.environ.get("FRAMEVIEW_LOG_LEVEL", "INFO")
    to_file: bool = os.environ.get("FRAMEVIEW_LOG_TO_FILE", "0").lower() in ("1", "true", "yes")


_OPTIONS = _LogOptions()
_LOG_FILE: Optional[Path] = None
_LOG_HANDLE: Optional[TextIO] = None
_LOGGER: Optional[LoguruLogger] = None


def _resolve_log_dir() -> Path:
    return get_paths().logs_root


# ---------- sinks as callables ----------
def _console_sink(msg) -> None:
    r = msg.record
    module = r["extra"].get("module", r.get("name", "unknown"))
    print(f"{r['time']:%H:%M:%S} | {r['level'].name: <3.3} | {module} | {r['message']}")


def _make_file_sink(fh: TextIO):
    def _file_sink(msg) -> None:
        r = msg.record
        module = r["extra"].get("module", r.get("name", "unknown"))
        fh.write(f"{r['time'].isoformat()} | {r['level'].name} | {module} | {r['message']}\n")
        fh.flush()

    return _file_sink


def _configure_logger(level: str | None = None, to_file: bool | None = None) -> LoguruLogger:
    global _LOG_FILE, _LOG_HANDLE, _LOGGER

    # drop every handler installed before us (including loguru's default stderr one)
    _root_logger.remove()
    if _LOG_HANDLE is not None:
        _LOG_HANDLE.close()
        _LOG_HANDLE = None

    def _inject_extras(record):
        record["extra"].setdefault("module", record.get("name", "unknown"))
        return record

    logger = _root_logger.patch(_inject_extras)
    requested = (level or _OPTIONS.level).upper()
    resolved_level = requested if requested in LogLevel.__members__ else LogLevel.INFO.value

    logger.add(_console_sink, level=resolved_level, catch=True)

    if _OPTIONS.to_file if to_file is None else to_file:
        log_dir = _resolve_log_dir()
        log_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        file_path = log_dir / f"frameview_{timestamp}.log"
        _LOG_FILE = file_path
        fh = _LOG_HANDLE = file_path.open("a", encoding="utf-8")
        logger.add(_make_file_sink(fh), level=resolved_level, catch=True)
    else:
        _LOG_FILE = None

    if resolved_level != requested:
        logger.bind(module=__name__).warning(
            "Unknown log level {!r}, using {}; expected one of {}",
            requested,
            resolved_level,
            list(LogLevel.__members__),
        )

    _LOGGER = logger
    return logger


def get_logger(name: str | None = None) -> LoguruLogger:
    logger = _LOGGER if _LOGGER is not None else _configure_logger()

    # module name is derived from the caller when not given
    module_name = name
    frame = inspect.currentframe()
    if module_name is None and frame is not None:
        caller_frame = frame.f_back
        if caller_frame is not None:
            module = inspect.getmodule(caller_frame)
            if module is not None and module.__name__ != "__main__":
                module_name = module.__name__

    return logger.bind(module=module_name or "unknown")


def configure(level: str | None = None, to_file: bool | None = None) -> None:
    _configure_logger(level=level, to_file=to_file)


def log_file() -> Optional[Path]:
    """Path of the active log file, if file logging is enabled."""
    return _LOG_FILE


__all__ = ["get_logger", "configure", "log_file"]
