import logging
from collections.abc import Generator
from pathlib import Path

import pytest

from waddles.constants import CONFIG_DIR_ENV, SETTINGS_FILENAME
from waddles.settings import reset_settings

GOOD_TOML = """\
[waddles]
log-level = "debug"
prefix = "!"
token = "abc.def.ghi"
guild-id = "12345"

[database]
host = "localhost"
port = "5432"
user = "waddles"
pass = "hunter2"
database-name = "waddles"

[nitro.booster-channel]
parent-id = "67890"
"""


@pytest.fixture(autouse=True)
def clean_state() -> Generator[None, None, None]:
    """Forget published settings and restore the root log level."""
    root = logging.getLogger()
    level = root.level
    reset_settings()
    yield
    reset_settings()
    root.setLevel(level)


@pytest.fixture
def config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point WADL_CONFIG_DIR at an empty temporary directory."""
    directory = tmp_path / "config"
    directory.mkdir()
    monkeypatch.setenv(CONFIG_DIR_ENV, str(directory))
    return directory


@pytest.fixture
def settings_file(config_dir: Path) -> Path:
    path = config_dir / SETTINGS_FILENAME
    path.write_text(GOOD_TOML)
    return path


@pytest.fixture
def good_toml() -> str:
    return GOOD_TOML
