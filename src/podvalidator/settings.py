"""Shared settings loaded from environment / .env file."""

from __future__ import annotations

from typing import Literal, get_args

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LOG_LEVELS: tuple[str, ...] = get_args(LogLevel)


class Settings(BaseSettings):
    """Configuration for the ``podvalidator`` command line.

    Values are read from ``PODVALIDATOR_*`` environment variables and from a
    ``.env`` file in the working directory. The validation rules themselves
    take no configuration.
    """

    model_config = SettingsConfigDict(
        env_prefix="PODVALIDATOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: LogLevel = "WARNING"

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value
