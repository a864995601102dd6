"""Exception classes for settings loading.

Every failure while locating, bootstrapping, reading or decoding the
settings file is reported as a subclass of SettingsError, so the startup
routine can decide how to terminate.
"""

from __future__ import annotations

from pathlib import Path


class SettingsError(Exception):
    """Settings could not be produced from the file on disk.

    Carries the settings file path and, when available, the exception
    that caused the failure.
    """

    def __init__(
        self,
        message: str,
        path: Path | str | None = None,
        original_error: Exception | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            path: Settings file the error relates to
            original_error: The underlying exception, if any
        """
        detail = f"{message}: {original_error}" if original_error else message
        super().__init__(detail)
        self.message: str = message
        self.path: Path | None = Path(path) if path is not None else None
        self.original_error: Exception | None = original_error


class SampleSettingsWritten(SettingsError):
    """Raised after a default settings file was written on first run.

    Startup cannot continue until the operator fills in the sample.
    """

    def __init__(self, path: Path | str) -> None:
        super().__init__(
            f"Config file doesn't exist. An example has been saved in its place: {path}",
            path,
        )


class SampleEncodeError(SettingsError):
    """Raised when the default settings cannot be encoded as TOML."""

    pass


class SampleWriteError(SettingsError):
    """Raised when the sample settings file cannot be written."""

    pass


class SettingsReadError(SettingsError):
    """Raised when the settings file exists but cannot be read."""

    pass


class SettingsParseError(SettingsError):
    """Raised when the settings file is not a valid settings document."""

    pass


class SettingsNotLoadedError(RuntimeError):
    """Raised when settings are requested before they were loaded."""

    pass
