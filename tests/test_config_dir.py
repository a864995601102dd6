import logging
import os
from pathlib import Path

import pytest

from waddles.constants import CONFIG_DIR_ENV, SETTINGS_FILENAME
from waddles.settings import Settings, resolve_config_dir
from waddles.utils.file import with_trailing_separator


def test_defaults_to_working_dir(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    monkeypatch.chdir(tmp_path)
    with caplog.at_level(logging.WARNING):
        config_dir = resolve_config_dir(env={})

    assert config_dir == f"{Path.cwd()}/config/"
    assert CONFIG_DIR_ENV in caplog.text
    assert config_dir in caplog.text


def test_empty_env_var_counts_as_unset(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    assert resolve_config_dir(env={CONFIG_DIR_ENV: ""}) == f"{Path.cwd()}/config/"


@pytest.mark.parametrize(
    "value", ["/a/b", "/a/b/", "/a/b//", "/a//b/", "/a/./b", "//a//b", "///a/b/"]
)
def test_env_var_is_normalized(value: str) -> None:
    assert resolve_config_dir(env={CONFIG_DIR_ENV: value}) == "/a/b/"


def test_reads_os_environ_by_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(CONFIG_DIR_ENV, "/srv/waddles")
    assert resolve_config_dir() == "/srv/waddles/"


def test_root_keeps_single_separator() -> None:
    assert with_trailing_separator("/") == os.sep


def test_settings_file_location() -> None:
    settings = Settings()
    settings.bind_config_dir("/a/b/")
    assert settings.get_config_file_location(SETTINGS_FILENAME) == "/a/b/waddles.toml"
    assert settings.config_dir == "/a/b/"
