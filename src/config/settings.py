"""
Application settings - pydantic-settings configuration.

This module defines application configuration using pydantic-settings
for environment variable and command-line loading with validation and defaults.
"""

from collections.abc import Sequence
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

FRONTEND_DIR = Path(__file__).resolve().parent.parent / "frontend"


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    app_name: str = "homepage"

    # Server configuration
    host: str = "127.0.0.1"
    port: int = 8080
    log_level: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = "INFO"

    # Page rendering
    templates_dir: Path = FRONTEND_DIR
    static_dir: Path = FRONTEND_DIR / "static"
    static_url: str = "/static"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: object) -> object:
        """Accept log level names in any case."""
        if isinstance(value, str):
            return value.strip().upper()
        return value


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def load_settings(argv: Sequence[str] | None = None) -> Settings:
    """
    Build settings including command-line overrides.

    Arguments use the pydantic-settings CLI form (e.g. ``--port 9090``) and
    take precedence over environment variables and the ``.env`` file.
    """
    if not argv:
        return Settings()
    return Settings(_cli_parse_args=list(argv))
