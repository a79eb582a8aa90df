"""Application settings, read from environment variables (prefix CHECKERS_) or a .env file."""

import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.shared_types import Difficulty, GameMode


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CHECKERS_", env_file=".env", env_file_encoding="utf-8"
    )

    # Persistence
    database_url: str = "sqlite:///./checkers.db"
    echo_sql: bool = False

    # Logging
    log_level: str = "INFO"

    # New game defaults
    default_mode: GameMode = GameMode.PVP
    default_difficulty: Difficulty = Difficulty.MEDIUM

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        """logging only knows the upper case names"""
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value!r}")
        return level


@lru_cache
def get_settings() -> Settings:
    return Settings()
