"""Library configuration from environment variables via pydantic-settings.

Invariants:
    - Settings are read from ``IMMUTASH_*`` variables
    - get_settings() is cached, one instance per process
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


class Settings(BaseSettings):
    """Settings for the default random source and library logging."""

    model_config = SettingsConfigDict(env_prefix="IMMUTASH_", case_sensitive=False)

    # Seed for the process-wide default random source; None draws from the OS
    random_seed: int | None = None

    # Level applied to the "immutash" logger by configure_logging()
    log_level: str = "WARNING"

    @field_validator("random_seed")
    @classmethod
    def seed_not_negative(cls, v: int | None) -> int | None:
        if v is not None and v < 0:
            raise ValueError("random_seed must be >= 0")
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def known_level(cls, v: str) -> str:
        level = str(v).upper()
        if level not in _LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level


@lru_cache
def get_settings() -> Settings:
    return Settings()


def configure_logging(settings: Settings | None = None) -> logging.Logger:
    """Apply the configured level to the package logger and return it.

    Handlers are left to the application.
    """
    settings = settings or get_settings()
    logger = logging.getLogger("immutash")
    logger.setLevel(getattr(logging, settings.log_level))
    return logger
