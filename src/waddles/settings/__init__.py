"""Settings management.

This package provides:
- Settings: the schema of waddles.toml, with TOML encode/decode
- SettingsLoader: locates, bootstraps, reads and publishes the settings
- get_settings: access to the published settings
"""

from waddles.settings.errors import (
    SampleEncodeError,
    SampleSettingsWritten,
    SampleWriteError,
    SettingsError,
    SettingsNotLoadedError,
    SettingsParseError,
    SettingsReadError,
)
from waddles.settings.loader import (
    SettingsLoader,
    get_settings,
    load_settings,
    read_settings_file,
    reset_settings,
    resolve_config_dir,
    write_sample_settings,
)
from waddles.settings.models import (
    BoosterChannelSettings,
    DatabaseSettings,
    GeneralSettings,
    NitroPerkSettings,
    Settings,
)

__all__ = [
    "BoosterChannelSettings",
    "DatabaseSettings",
    "GeneralSettings",
    "NitroPerkSettings",
    "SampleEncodeError",
    "SampleSettingsWritten",
    "SampleWriteError",
    "Settings",
    "SettingsError",
    "SettingsLoader",
    "SettingsNotLoadedError",
    "SettingsParseError",
    "SettingsReadError",
    "get_settings",
    "load_settings",
    "read_settings_file",
    "reset_settings",
    "resolve_config_dir",
    "write_sample_settings",
]
