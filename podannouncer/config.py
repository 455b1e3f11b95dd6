"""Configuration settings for the pod announcer."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

CONFIG_FILE_NAME = ".skydns-pod-announcer.yaml"


class Settings(BaseSettings):
    """Announcer settings.

    Values passed to the constructor (command line flags) win over environment
    variables, which win over the YAML config file, which wins over the
    defaults below.
    """

    hostname: str = Field(
        default="",
        description="Hostname to announce (empty means use the OS hostname)",
    )
    etcd: str = Field(
        default="http://etcd:2379",
        description="Base URL of the etcd endpoint serving the skydns tree",
    )
    ip: str = Field(
        default="",
        description="IP to announce (empty means pick the first non-local address)",
    )

    model_config = SettingsConfigDict(
        yaml_file_encoding="utf-8",
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (init_settings, env_settings, YamlConfigSettingsSource(settings_cls))


def config_path(config_file: str | None = None) -> Path | None:
    """Return the config file to read, defaulting to ~/.skydns-pod-announcer.yaml.

    Returns None when no file is given and the home directory is unknown.
    """
    if config_file:
        return Path(config_file).expanduser()
    try:
        return Path.home() / CONFIG_FILE_NAME
    except RuntimeError:
        return None


def load_settings(config_file: str | None = None, **overrides: str) -> Settings:
    """Build settings from ``config_file`` plus explicit overrides.

    A missing config file is not an error; the environment and defaults still
    apply.
    """
    path = config_path(config_file)

    class FileSettings(Settings):
        model_config = SettingsConfigDict(yaml_file=path)

    return FileSettings(**overrides)
