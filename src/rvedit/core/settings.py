"""Centralized configuration for rvedit using Pydantic Settings (v2).

Values are read from, in order of precedence:
- real environment variables,
- `.env` files in the working directory: .env, .env.local, .env.dev/.env.test/.env.prod.

The only engine-level knob is the default history capacity. Individual
managers may still be constructed with an explicit capacity.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

EnvName = Literal["dev", "test", "prod"]
LogLevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

#: Undo depth used by the editor store when nothing else is configured.
DEFAULT_HISTORY_CAPACITY = 100


class Settings(BaseSettings):
    """Typed configuration loaded from env and `.env` files.

    Attributes
    ----------
    environment : EnvName
        Runtime environment flag; maps from `RVEDIT_ENV`.
    log_level : LogLevelName
        Global log level string; maps from `LOG_LEVEL`.
    history_capacity : int
        Default maximum depth of the undo stack for new managers; maps from
        `RVEDIT_HISTORY_CAPACITY`. Must be positive.
    """

    environment: EnvName = Field(default="dev", alias="RVEDIT_ENV")
    log_level: LogLevelName = Field(default="INFO", alias="LOG_LEVEL")
    history_capacity: int = Field(
        default=DEFAULT_HISTORY_CAPACITY, gt=0, alias="RVEDIT_HISTORY_CAPACITY"
    )

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local", ".env.dev", ".env.test", ".env.prod"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def is_dev(self) -> bool:
        return self.environment == "dev"

    @property
    def is_test(self) -> bool:
        return self.environment == "test"

    def log_level_numeric(self) -> int:
        """Return the numeric logging level corresponding to `self.log_level`."""
        return getattr(logging, self.log_level, logging.INFO)


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Create and cache a `Settings` instance.

    Tests force a rebuild with `load_settings.cache_clear()` after changing
    `os.environ`.
    """
    os.environ.setdefault("RVEDIT_ENV", "dev")
    return Settings()


settings: Settings = load_settings()


def get_logger(name: str = "rvedit") -> logging.Logger:
    """Return a process-global logger configured to the current log level."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
        )
        logger.addHandler(handler)
    logger.setLevel(load_settings().log_level_numeric())
    logger.propagate = False
    return logger
