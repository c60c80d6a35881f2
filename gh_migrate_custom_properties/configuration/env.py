"""Pydantic Settings model for environment-only configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from gh_migrate_custom_properties.utils.constants import ENV_PREFIX


class Settings(BaseSettings):
    """Environment variable settings that have no command line flag.

    Every variable is read with the ``GHMC_`` prefix, e.g. ``GHMC_SOURCE_APP_ID``.
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Source GitHub App settings
    SOURCE_PRIVATE_KEY: str | None = None
    SOURCE_APP_ID: str | None = None
    SOURCE_INSTALLATION_ID: int | None = None

    # Target GitHub App settings
    TARGET_PRIVATE_KEY: str | None = None
    TARGET_APP_ID: str | None = None
    TARGET_INSTALLATION_ID: int | None = None

    # Target GitHub Enterprise Server hostname
    TARGET_HOSTNAME: str | None = None
