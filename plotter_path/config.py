"""Flattening configuration."""

import logging

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Settings loaded from environment variables (PLOTTER_PATH_*) and .env.

    Priority: explicit function arguments > environment variables > defaults
    """

    model_config = SettingsConfigDict(
        env_prefix="PLOTTER_PATH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Sampling
    tick_step: float = Field(default=0.001, gt=0.0, le=1.0)  # parameter step for curves
    chord_epsilon: float = Field(default=0.05, ge=0.0)  # collinearity tolerance

    # Logging
    log_json: bool = False
    log_level: str = "INFO"
    log_file: str | None = None  # rotating log of every record
    error_log_file: str | None = None  # rotating log of ERROR and above


settings = Settings()
