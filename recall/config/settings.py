"""
Runtime settings for Recall.
Uses Pydantic Settings so every option can be overridden from the environment.
"""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

VALID_UIS = ("rich", "textual")


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: str = Field(default="INFO")
    file_path: Optional[str] = Field(default=None)

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v):
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return v.upper()

    model_config = SettingsConfigDict(env_prefix="RECALL_LOG_")


class Settings(BaseSettings):
    """Main application settings."""

    ui: str = Field(default="rich")
    config_path: Optional[str] = Field(default=None)

    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @field_validator("ui")
    @classmethod
    def validate_ui(cls, v):
        if v.lower() not in VALID_UIS:
            raise ValueError(f"UI must be one of {list(VALID_UIS)}")
        return v.lower()

    model_config = SettingsConfigDict(env_prefix="RECALL_", case_sensitive=False)


# Global settings instance
settings = Settings()
