"""Locate, bootstrap and load waddles.toml.

Loading is a one-shot startup step:

    resolve directory -> bootstrap sample if missing -> read -> decode
    -> apply log level -> publish

Failures are raised as SettingsError subclasses; terminating the process
is left to the caller (see ``waddles.cli``).
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Final

from pydantic import ValidationError
from tomlkit.exceptions import TOMLKitError

from waddles.constants import (
    CONFIG_DIR_ENV,
    DEFAULT_CONFIG_SUBDIR,
    SAMPLE_FILE_MODE,
    SETTINGS_FILENAME,
)
from waddles.logs import TRACE, resolve_log_level, set_global_level
from waddles.settings.errors import (
    SampleEncodeError,
    SampleSettingsWritten,
    SampleWriteError,
    SettingsNotLoadedError,
    SettingsParseError,
    SettingsReadError,
)
from waddles.settings.models import Settings
from waddles.utils.file import with_trailing_separator, write_text_with_mode

logger: Final = logging.getLogger(__name__)

_settings: Settings | None = None


def resolve_config_dir(env: Mapping[str, str] | None = None) -> str:
    """Resolve the directory holding the settings file.

    Args:
        env: Environment to read CONFIG_DIR_ENV from (default: os.environ)

    Returns:
        Directory path ending in exactly one separator
    """
    env = os.environ if env is None else env
    config_dir = env.get(CONFIG_DIR_ENV, "")

    if not config_dir:
        config_dir = str(Path.cwd() / DEFAULT_CONFIG_SUBDIR)
        logger.warning(
            "%s not set, defaulting to working dir (%s)",
            CONFIG_DIR_ENV,
            with_trailing_separator(config_dir),
        )

    return with_trailing_separator(config_dir)


def write_sample_settings(path: Path) -> Path:
    """Write a default, fully commented settings file.

    Args:
        path: Destination file; missing parent directories are created

    Returns:
        The path written

    Raises:
        SampleEncodeError: If the defaults cannot be encoded
        SampleWriteError: If the file cannot be written
    """
    sample = Settings()
    sample.bind_config_dir("")

    try:
        content = sample.to_toml()
    except (TOMLKitError, ValueError, TypeError) as exc:
        raise SampleEncodeError("Unable to save sample config file", path, exc) from exc

    try:
        write_text_with_mode(path, content, SAMPLE_FILE_MODE)
    except OSError as exc:
        raise SampleWriteError("Unable to write sample config file", path, exc) from exc

    return path


def decode_settings(raw: bytes, path: Path | None = None) -> Settings:
    """Decode settings file bytes into a Settings object.

    Raises:
        SettingsParseError: If the bytes are not a valid settings document
    """
    try:
        return Settings.from_toml(raw.decode("utf-8"), env=os.environ)
    except (UnicodeDecodeError, TOMLKitError, ValidationError) as exc:
        raise SettingsParseError("Unable to parse config file", path, exc) from exc


def read_settings_file(path: Path) -> Settings:
    """Read and decode a settings file without publishing it.

    Raises:
        SettingsReadError: If the file cannot be read
        SettingsParseError: If the file is not a valid settings document
    """
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise SettingsReadError(f"Unable to read config file at: '{path}'", path, exc) from exc

    return decode_settings(raw, path)


class SettingsLoader:
    """Produces the process-wide Settings at startup.

    Examples:
        settings = SettingsLoader().load()

        # Tests can supply their own environment
        loader = SettingsLoader(env={"WADL_CONFIG_DIR": "/tmp/waddles"})
    """

    def __init__(
        self,
        env: Mapping[str, str] | None = None,
        filename: str = SETTINGS_FILENAME,
    ) -> None:
        self.env = env
        self.filename = filename

    def load(self) -> Settings:
        """Load, validate and publish the settings.

        Returns:
            The published Settings

        Raises:
            SampleSettingsWritten: If no settings file existed; a sample was written
            SampleEncodeError: If the sample could not be encoded
            SampleWriteError: If the sample could not be written
            SettingsReadError: If the settings file could not be read
            SettingsParseError: If the settings file is malformed
        """
        config_dir = resolve_config_dir(self.env)
        settings = Settings()
        settings.bind_config_dir(config_dir)

        config_file = Path(settings.get_config_file_location(self.filename))

        if not config_file.exists():
            write_sample_settings(config_file)
            raise SampleSettingsWritten(config_file)

        settings = read_settings_file(config_file)
        settings.bind_config_dir(config_dir)

        logger.debug("Read config file: %s", config_file)
        logger.log(TRACE, "Config: %r", settings)

        set_global_level(resolve_log_level(settings.waddles.log_level))

        return publish_settings(settings)


def load_settings(env: Mapping[str, str] | None = None) -> Settings:
    """Load waddles.toml and publish it as the process-wide settings."""
    return SettingsLoader(env).load()


def publish_settings(settings: Settings) -> Settings:
    global _settings
    _settings = settings
    return settings


def get_settings() -> Settings:
    """Return the published settings.

    Raises:
        SettingsNotLoadedError: If load_settings() has not succeeded yet
    """
    if _settings is None:
        raise SettingsNotLoadedError("Settings have not been loaded")
    return _settings


def reset_settings() -> None:
    global _settings
    _settings = None
