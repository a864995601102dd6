"""File utility functions."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Final

logger: Final = logging.getLogger(__name__)


def ensure_directory_exists(directory: Path) -> None:
    """Create directory if it doesn't exist.

    Args:
        directory: Path to create
    """
    if not directory.exists():
        directory.mkdir(parents=True, exist_ok=True)
        logger.debug("Created directory: %s", directory)


def write_text_with_mode(path: Path, content: str, mode: int) -> None:
    """Write text to a file and set its permission bits.

    Args:
        path: Destination file
        content: Text to write (UTF-8)
        mode: Permission bits, e.g. 0o644
    """
    ensure_directory_exists(path.parent)
    path.write_text(content, encoding="utf-8")
    os.chmod(path, mode)
    logger.debug("Wrote %d bytes to %s (mode %o)", len(content), path, mode)


def with_trailing_separator(directory: str) -> str:
    """Normalize a directory path so it ends with exactly one separator.

    Redundant separators and ``.``/``..`` segments are cleaned first.

    Args:
        directory: Directory path, with or without trailing separators

    Returns:
        Cleaned path ending in a single ``os.sep``
    """
    cleaned = os.path.normpath(directory)
    if os.sep == "/" and cleaned.startswith("//"):
        # normpath keeps a leading "//" on POSIX
        cleaned = "/" + cleaned.lstrip("/")
    if cleaned.endswith(os.sep):
        return cleaned
    return cleaned + os.sep
