"""
Centralized configuration management.
All environment variables and settings are defined here.
"""
import codecs
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Application
    app_name: str = Field(default="CashFlower ABN AMRO Tab Reader", alias="APP_NAME")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Reading
    file_encoding: str = Field(default="utf-8-sig", alias="FILE_ENCODING")
    error_policy: Literal["halt", "collect"] = Field(default="halt", alias="ERROR_POLICY")
    skip_blank_lines: bool = Field(default=False, alias="SKIP_BLANK_LINES")

    # Export
    export_path: str = Field(default="output", alias="EXPORT_PATH")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level is one of the standard levels."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v_upper

    @field_validator("file_encoding")
    @classmethod
    def validate_file_encoding(cls, v):
        """Validate the encoding is a codec Python knows."""
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"Unknown file encoding: {v}")
        return v

    @field_validator("error_policy", mode="before")
    @classmethod
    def normalize_error_policy(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns:
        Settings instance
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings singleton (useful for testing)."""
    global _settings
    _settings = None
