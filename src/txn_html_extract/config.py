"""
Configuration management using Pydantic Settings.

Runtime settings come from environment variables and an optional ``.env``
file. The page literals the extractor matches on are not configuration;
see ``txn_html_extract.types``.
"""

import logging
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """
    Application configuration loaded from environment variables.

    Environment Variables (from .env):
        LOG_LEVEL: Logging level name (e.g., "INFO", "DEBUG")
        INPUT_ENCODING: Force the encoding used to decode saved pages
        OUTPUT_ENCODING: Encoding used when writing CSV files

    Example:
        >>> config = get_app_config()
        >>> config.log_level
        'WARNING'
        >>> config.log_level_value
        30
    """

    log_level: str = Field(
        default="WARNING",
        description="Logging level name for the standard library logger"
    )

    input_encoding: Optional[str] = Field(
        default=None,
        description="Input encoding override; unset lets the parser detect it"
    )

    output_encoding: str = Field(
        default="utf-8",
        description="Encoding for CSV files written with --output"
    )

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore'
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Normalize to upper case and reject unknown level names."""
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(
                f"Unknown log level: '{value}'\n"
                f"Expected one of: DEBUG, INFO, WARNING, ERROR, CRITICAL"
            )
        return level

    @property
    def log_level_value(self) -> int:
        """Numeric logging level."""
        return logging.getLevelName(self.log_level)


# Singleton pattern - loaded once, cached forever
_app_config: Optional[AppConfig] = None


def get_app_config() -> AppConfig:
    """
    Get global application config instance (lazy-loaded singleton).

    Returns:
        Singleton AppConfig instance

    Example:
        >>> config = get_app_config()
        >>> config is get_app_config()
        True
    """
    global _app_config
    if _app_config is None:
        _app_config = AppConfig()
    return _app_config


def reset_app_config() -> None:
    """Drop the cached config so the next access re-reads the environment."""
    global _app_config
    _app_config = None
