from pathlib import Path

import pytest

from waddles.settings.errors import (
    SampleEncodeError,
    SampleSettingsWritten,
    SampleWriteError,
    SettingsError,
    SettingsParseError,
    SettingsReadError,
)


def test_settings_error_str_and_path() -> None:
    err = SettingsError("Unable to parse config file", "/etc/waddles/waddles.toml")
    assert str(err) == "Unable to parse config file"
    assert err.path == Path("/etc/waddles/waddles.toml")
    assert err.original_error is None


def test_settings_error_wraps_cause() -> None:
    try:
        raise PermissionError("denied")
    except PermissionError as e:
        err = SettingsReadError("Unable to read config file at: 'x'", "x", e)
        assert str(err) == "Unable to read config file at: 'x': denied"
        assert err.original_error is e


def test_sample_written_names_path() -> None:
    err = SampleSettingsWritten(Path("/cfg/waddles.toml"))
    assert "/cfg/waddles.toml" in str(err)
    assert err.path == Path("/cfg/waddles.toml")


@pytest.mark.parametrize(
    "error_type",
    [SampleSettingsWritten, SampleEncodeError, SampleWriteError, SettingsReadError, SettingsParseError],
)
def test_all_are_settings_errors(error_type: type[SettingsError]) -> None:
    assert issubclass(error_type, SettingsError)
