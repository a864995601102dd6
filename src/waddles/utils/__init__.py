"""Common utility functions and helpers for the waddles package."""

from waddles.utils.file import (
    ensure_directory_exists,
    with_trailing_separator,
    write_text_with_mode,
)

__all__ = [
    "ensure_directory_exists",
    "with_trailing_separator",
    "write_text_with_mode",
]
