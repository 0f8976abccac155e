"""Base configuration settings."""

import logging
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine settings.

    Every field can be overridden with an environment variable carrying the
    ``HIJRI_MAPPING_`` prefix, e.g. ``HIJRI_MAPPING_DEFAULT_REGION=indonesia``.
    """

    model_config = SettingsConfigDict(
        env_prefix="HIJRI_MAPPING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Hijri Regional Mapping"
    environment: str = "development"

    # Logging
    log_level: str = "INFO"
    log_format: str = "console"  # console or json

    # Conversion defaults
    default_region: str = "global"
    allow_fallback: bool = True
    include_month_names: Optional[bool] = None
    strict_validation: bool = False

    # Parsing
    date_parse_dayfirst: bool = False

    @field_validator("default_region", mode="before")
    @classmethod
    def normalize_region(cls, v: object) -> object:
        """Store region names lower-cased; unknown names are left to the fallback policy."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Reject log levels the logging module does not know."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Only console and json renderers are available."""
        fmt = v.strip().lower()
        if fmt not in ("console", "json"):
            raise ValueError(f"log_format must be 'console' or 'json', got {v!r}")
        return fmt
