"""Log level names and the process-wide logging threshold.

The settings file names its log level with one of the words below. They
map onto stdlib logging levels, plus a TRACE level registered here and a
DISABLED level that sits above CRITICAL so nothing is emitted.
"""

from __future__ import annotations

import logging
from typing import Final

logger: Final = logging.getLogger(__name__)

TRACE: Final = 5
DISABLED: Final = logging.CRITICAL + 10

logging.addLevelName(TRACE, "TRACE")
logging.addLevelName(DISABLED, "DISABLED")

LOG_FORMAT: Final = "%(asctime)s [%(levelname)s] %(message)s"

LEVELS: Final[dict[str, int]] = {
    "trace": TRACE,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "fatal": logging.CRITICAL,
    "panic": logging.CRITICAL,
    "critical": logging.CRITICAL,
    "disabled": DISABLED,
}


def parse_level(name: str) -> int:
    """Map a level name to a logging level.

    Args:
        name: Level name, case-insensitive (e.g. "debug", "WARN")

    Returns:
        The numeric logging level

    Raises:
        ValueError: If the name is not a known level
    """
    try:
        return LEVELS[name.strip().lower()]
    except KeyError:
        raise ValueError(f"Unknown log level: {name!r}") from None


def resolve_log_level(name: str) -> int:
    """Map a level name to a logging level, falling back to INFO."""
    try:
        return parse_level(name)
    except ValueError:
        logger.warning(
            "Supplied config file log level (%s) is invalid. Defaulting to info.", name
        )
        return logging.INFO


def set_global_level(level: int) -> None:
    """Set the threshold every logger in the process is filtered by."""
    logger.info("Log Level set to: %s", logging.getLevelName(level))
    logging.getLogger().setLevel(level)


def configure_logging(debug: bool = False) -> None:
    """Install the console handler used before settings are loaded.

    Args:
        debug: Start at DEBUG instead of INFO
    """
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
    # basicConfig is a no-op when handlers already exist
    logging.getLogger().setLevel(level)
