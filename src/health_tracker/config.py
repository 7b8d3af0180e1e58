"""Application configuration."""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from health_tracker.domain.entries import DEFAULT_WEIGHT_PEOPLE

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


def _default_data_dir() -> Path:
    return Path.home() / ".health-tracker"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    data_dir: Path = _default_data_dir()
    timezone: str | None = None
    weight_people: str | None = None
    seed_on_startup: bool = True
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="HEALTH_TRACKER_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_weight_people(raw: str | None) -> tuple[str, ...]:
    """Parse a comma-separated list of tracked people."""
    if raw is None:
        return DEFAULT_WEIGHT_PEOPLE
    people = tuple(chunk.strip().lower() for chunk in raw.split(",") if chunk.strip())
    return people or DEFAULT_WEIGHT_PEOPLE
