"""Application configuration."""

import logging
import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    data_dir: Path = Path(".macro_tracker")
    seed_log: bool = False
    log_level: str = "INFO"
    environment: str = Field(default=_ENVIRONMENT, validation_alias="ENVIRONMENT")

    model_config = SettingsConfigDict(
        env_prefix="MACRO_TRACKER_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_log_level(raw: str | None) -> int:
    """Map a level name like "debug" to a logging level, defaulting to INFO."""
    if raw is None:
        return logging.INFO
    level = logging.getLevelName(raw.strip().upper())
    if isinstance(level, int):
        return level
    return logging.INFO
