from typing import Final

# Environment variable naming the directory that holds the settings file
CONFIG_DIR_ENV: Final = "WADL_CONFIG_DIR"

# Subdirectory of the working directory used when CONFIG_DIR_ENV is unset
DEFAULT_CONFIG_SUBDIR: Final = "config"

# Settings file name inside the config directory
SETTINGS_FILENAME: Final = "waddles.toml"

# rw-r--r-- for the generated sample
SAMPLE_FILE_MODE: Final = 0o644

DEFAULT_LOG_LEVEL: Final = "info"
