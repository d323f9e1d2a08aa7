"""Configuration module - orchestrates all configuration components."""

import logging
from functools import cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from config.paths import get_project_root
from config.runtime import RuntimeConfig
from config.settings import AppSettings

logger = logging.getLogger(__name__)


class FirstRunConfig(BaseSettings):
    """Settings that influence the first-run check."""

    model_config = SettingsConfigDict(
        env_file=get_project_root() / ".env", env_file_encoding="utf-8", extra="ignore"
    )

    # None keeps the default history file, "" disables history entirely
    history_file: str | None = Field(None, alias="HOP_HISTORY_FILE")


class Config(BaseSettings):
    """Main configuration container that orchestrates all config components."""

    # Runtime configurations
    runtime: RuntimeConfig = Field(default_factory=RuntimeConfig)

    # First-run configurations
    first_run: FirstRunConfig = Field(default_factory=FirstRunConfig)

    model_config = SettingsConfigDict(
        env_file=get_project_root() / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    def app_settings(self, history_file: str | None = None) -> AppSettings:
        """Build invocation settings, letting an explicit flag win over config."""
        if history_file is None:
            history_file = self.first_run.history_file
        return AppSettings.from_options(history_file)


@cache
def get_config() -> Config:
    """Get the global configuration instance."""
    config = Config()
    logger.debug("Loaded configuration: %s", config.runtime)
    return config


def clear_config_cache() -> None:
    """Clear the cached configuration."""
    get_config.cache_clear()


__all__ = ["Config", "FirstRunConfig", "clear_config_cache", "get_config"]
