"""Utility package re-exporting shared helpers for frameview."""

from frameview.utils.error_tracker import ErrorTracker, error_scope
from frameview.utils.format import format_points, format_vector
from frameview.utils.io import ensure_directory, is_yaml_path, read_document, write_document
from frameview.utils.logger import get_logger

__all__ = [
    "ErrorTracker",
    "ensure_directory",
    "error_scope",
    "format_points",
    "format_vector",
    "get_logger",
    "is_yaml_path",
    "read_document",
    "write_document",
]
