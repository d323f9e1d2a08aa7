"""Runtime configuration settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from config.paths import get_project_root


class RuntimeConfig(BaseSettings):
    """Runtime configuration settings."""

    model_config = SettingsConfigDict(
        env_file=get_project_root() / ".env", env_file_encoding="utf-8", extra="ignore"
    )

    debug: bool = Field(False, alias="HOP_DEBUG")
    log_level: str = Field("WARNING", alias="HOP_LOG_LEVEL")
