# frameview/utils/error_tracker.py
"""Centralised error tracking for render passes and the CLI runner."""

from __future__ import annotations

import sys
import traceback
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import ClassVar

from frameview.utils.logger import get_logger


@dataclass(slots=True)
class ErrorTracker:
    """Collect recoverable failures and contextual information during a run."""

    context: str = "ErrorTracker"
    errors: dict[str, list[str]] = field(default_factory=dict)

    # ────────────── collection API ──────────────
    def record(self, key: str, message: str) -> None:
        logger = get_logger(self.context)
        logger.error(f"{key}: {message}")
        self.errors.setdefault(key, []).append(message)

    def record_exception(self, key: str, exc: BaseException) -> None:
        self.record(key, f"{type(exc).__name__}: {exc}")

    def has_errors(self) -> bool:
        return bool(self.errors)

    def summary(self) -> dict[str, list[str]]:
        logger = get_logger(self.context)
        if not self.errors:
            logger.info("No errors recorded")
            return {}
        for key, messages in self.errors.items():
            logger.warning(f"Encountered {len(messages)} issues for {key}")
        return dict(self.errors)

    # ────────────── runtime plumbing ──────────────
    _installed: ClassVar[bool] = False

    @classmethod
    def install_excepthook(cls) -> None:
        if cls._installed:
            return
        cls._installed = True
        logger = get_logger("ErrorTracker")

        def _hook(exctype, value, tb):
            logger.error(
                f"Uncaught exception: {''.join(traceback.format_exception(exctype, value, tb))}"
            )
            sys.__excepthook__(exctype, value, tb)

        sys.excepthook = _hook
        logger.debug("excepthook installed")


# ────────────── context manager API ──────────────


@contextmanager
def error_scope(name: str = "scope", *, reraise: bool = True) -> Iterator[None]:
    """Log the traceback of a failing block, then re-raise unless told otherwise."""
    logger = get_logger("ErrorScope")
    try:
        yield
    except Exception:
        logger.error(f"[{name}] Traceback:\n{traceback.format_exc()}")
        if reraise:
            raise


__all__ = ["ErrorTracker", "error_scope"]
