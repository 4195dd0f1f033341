"""Application configuration loaded from environment and config files."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class DeadlineConfig(BaseSettings):
    """Deadline engine configuration."""

    model_config = {"env_prefix": "CLAIMTRACK_DEADLINE_"}

    holidays_path: str | None = None
    urgent_within_days: int = 7
    notify_reserve_days_before: int = 3
    notify_prescription_days_before: int = 30


class Settings(BaseSettings):
    """Root application settings."""

    model_config = {"env_prefix": "CLAIMTRACK_"}

    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    deadline: DeadlineConfig = Field(default_factory=DeadlineConfig)
