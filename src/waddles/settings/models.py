"""Settings schema for waddles.toml.

The document has three tables:

    [waddles]                  general bot settings
    [database]                 PostgreSQL connection settings
    [nitro.booster-channel]    server booster perks

Field descriptions double as the comments written into the sample file,
so the encoder below walks the models instead of dumping a plain dict.
"""

from __future__ import annotations

import os
import re
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

import tomlkit
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator
from pydantic.fields import FieldInfo
from tomlkit.container import Container
from tomlkit.items import Table

from waddles.constants import DEFAULT_LOG_LEVEL


def interpolate_env(value: Any, env: Mapping[str, str] | None = None) -> Any:
    """Replace ``${NAME}`` in decoded string values with environment variable NAME.

    Works on the parsed document, so substituted text is never re-read as
    TOML. Unset variables become empty strings.
    """
    env = os.environ if env is None else env
    if isinstance(value, str):
        return re.sub(r"\$\{(\w+)\}", lambda m: env.get(m.group(1), ""), value)
    if isinstance(value, dict):
        return {k: interpolate_env(v, env) for k, v in value.items()}
    if isinstance(value, list):
        return [interpolate_env(v, env) for v in value]
    return value


def _coerce_identifier(v: Any) -> Any:
    # TOML integers are accepted for IDs and ports
    if isinstance(v, int) and not isinstance(v, bool):
        return str(v)
    return v


def _check_numeric(v: str, key: str) -> str:
    if v and not v.isdigit():
        raise ValueError(f"{key} must be numeric, got {v!r}")
    return v


class SettingsSection(BaseModel):
    """Base for every table in waddles.toml."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")


class GeneralSettings(SettingsSection):
    """General bot settings, the ``[waddles]`` table."""

    log_level: str = Field(
        DEFAULT_LOG_LEVEL,
        alias="log-level",
        description="trace, debug, info, warn, error, fatal, panic or disabled",
    )
    prefix: str = ""
    token: str = Field("", repr=False)
    guild_id: str = Field("", alias="guild-id")

    @field_validator("guild_id", mode="before")
    @classmethod
    def coerce_guild_id(cls, v: Any) -> Any:
        return _coerce_identifier(v)

    @field_validator("guild_id")
    @classmethod
    def validate_guild_id(cls, v: str) -> str:
        return _check_numeric(v, "guild-id")


class DatabaseSettings(SettingsSection):
    """PostgreSQL connection settings, the ``[database]`` table.

    When ``url`` is set it takes precedence over the discrete fields.
    """

    host: str = ""
    port: str = ""
    user: str = ""
    password: str = Field("", alias="pass", repr=False)
    name: str = Field("", alias="database-name")
    url: str | None = Field(
        None,
        repr=False,
        description="uncomment to use a postgres URI instead of above",
        json_schema_extra={"commented": True},
    )

    @field_validator("port", mode="before")
    @classmethod
    def coerce_port(cls, v: Any) -> Any:
        return _coerce_identifier(v)

    @field_validator("port")
    @classmethod
    def validate_port(cls, v: str) -> str:
        _check_numeric(v, "port")
        if v and not 0 < int(v) < 65536:
            raise ValueError(f"port must be between 1 and 65535, got {v}")
        return v

    @property
    def connection_url(self) -> str:
        """PostgreSQL URI for this database.

        Returns:
            ``url`` when set, otherwise a URI built from host, port, user,
            pass and database-name
        """
        if self.url:
            return self.url

        netloc = self.host
        if self.port:
            netloc = f"{netloc}:{self.port}"
        if self.user:
            auth = quote(self.user, safe="")
            if self.password:
                auth = f"{auth}:{quote(self.password, safe='')}"
            netloc = f"{auth}@{netloc}"
        return f"postgresql://{netloc}/{self.name}"


class BoosterChannelSettings(SettingsSection):
    """Personal channels for server boosters."""

    parent_id: str = Field(
        "",
        alias="parent-id",
        description="Discord category ID for channels to be managed under",
    )

    @field_validator("parent_id", mode="before")
    @classmethod
    def coerce_parent_id(cls, v: Any) -> Any:
        return _coerce_identifier(v)

    @field_validator("parent_id")
    @classmethod
    def validate_parent_id(cls, v: str) -> str:
        return _check_numeric(v, "parent-id")


class NitroPerkSettings(SettingsSection):
    """Perks related to being a server booster, the ``[nitro]`` table."""

    booster_channel: BoosterChannelSettings = Field(
        default_factory=BoosterChannelSettings,
        alias="booster-channel",
        description="server booster personal channel options",
    )


class Settings(SettingsSection):
    """All bot settings, as read from waddles.toml.

    The directory the file was found in is kept as a private attribute;
    it is never written back to the document.

    Examples:
        settings = Settings.from_toml(path.read_text())
        settings.database.connection_url
    """

    waddles: GeneralSettings = Field(
        default_factory=GeneralSettings, description="General Bot Configuration"
    )
    database: DatabaseSettings = Field(
        default_factory=DatabaseSettings,
        description="Postgresql Database Connection Information",
    )
    nitro: NitroPerkSettings = Field(
        default_factory=NitroPerkSettings,
        description="perks related to being a server booster",
    )

    _config_dir: str = PrivateAttr(default="")

    @property
    def config_dir(self) -> str:
        """Directory the settings were loaded from, with a trailing separator."""
        return self._config_dir

    def bind_config_dir(self, config_dir: str) -> None:
        self._config_dir = config_dir

    def get_config_file_location(self, filename: str) -> str:
        """Full path of ``filename`` inside the config directory."""
        return self._config_dir + filename

    def to_toml(self) -> str:
        """Encode as a commented TOML document, keeping field order."""
        return tomlkit.dumps(_encode(tomlkit.document(), self))

    @classmethod
    def from_toml(cls, content: str, env: Mapping[str, str] | None = None) -> Settings:
        """Decode a TOML document.

        Args:
            content: TOML text
            env: When given, ``${NAME}`` in string values is replaced from it

        Raises:
            tomlkit.exceptions.ParseError: If the document is not valid TOML
            pydantic.ValidationError: If a value does not fit the schema
        """
        data = tomlkit.parse(content).unwrap()
        if env is not None:
            data = interpolate_env(data, env)
        return cls.model_validate(data)


def _is_commented(field: FieldInfo) -> bool:
    extra = field.json_schema_extra
    return isinstance(extra, dict) and bool(extra.get("commented"))


def _encode(container: Container | Table, model: BaseModel) -> Container | Table:
    for name, field in type(model).model_fields.items():
        key = field.alias or name
        value = getattr(model, name)

        if isinstance(value, BaseModel):
            table = tomlkit.table(is_super_table=False)
            if field.description:
                # Rendered on the table header line
                table.comment(field.description)
            container.add(key, _encode(table, value))
        elif _is_commented(field):
            # Optional keys go in as a commented-out line until they are set
            if field.description:
                container.add(tomlkit.comment(field.description))
            if value is None:
                container.add(tomlkit.comment(f'{key} = ""'))
            else:
                container.add(key, value)
        else:
            item = tomlkit.item(value)
            if field.description:
                item.comment(field.description)
            container.add(key, item)

    return container
