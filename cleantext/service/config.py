# cleantext/service/config.py

"""Application configuration using Pydantic Settings.

Manages environment variables, defaults, and validation rules.
"""

from typing import Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cleantext.core.definitions import CensorStyle, DEFAULT_CENSOR_STYLE

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Global application settings.

    Loads values from environment variables (prefix 'CLEANTEXT_') or .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="CLEANTEXT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Filtering
    default_censor_style: CensorStyle = Field(
        default=DEFAULT_CENSOR_STYLE,
        description="Placeholder style used when the caller does not pick one.",
    )

    wordlist_path: Optional[str] = Field(
        default=None,
        description="Alternate word list YAML file. Defaults to the packaged list.",
    )

    # UI
    processing_delay_seconds: float = Field(
        default=0.5,
        ge=0.0,
        description="Pause before filtering so the spinner is visible.",
    )

    download_filename: str = Field(
        default="cleaned-text.txt",
        description="File name offered for the filtered text download.",
    )

    log_level: str = Field(default="INFO", description="Root logging level.")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure the level is one logging understands."""
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {_LOG_LEVELS}")
        return level

    @field_validator("download_filename")
    @classmethod
    def validate_download_filename(cls, v: str) -> str:
        """Ensure the download name is not empty."""
        if not v.strip():
            raise ValueError("Download filename cannot be empty")
        return v.strip()


# Singleton settings instance
settings = Settings()
