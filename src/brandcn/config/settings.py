"""Application settings loaded from environment variables and .env files."""

from __future__ import annotations

import random
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from brandcn.config.constants import DEV_LATENCY_RANGE_MS

_VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def get_bundled_library_dir() -> Path:
    """Get the path to the SVG library shipped with the package."""
    return Path(__file__).resolve().parent.parent / "library"


class Settings(BaseSettings):
    """brandcn settings.

    Every field can be set through the environment (e.g. ``BRANDCN_LOG_LEVEL``)
    or a ``.env`` file in the working directory.
    """

    brandcn_library_dir: Path | None = Field(
        default=None,
        description="Override for the bundled logo library directory",
    )
    brandcn_log_level: str = Field(default="WARNING", description="Logging level")
    brandcn_dev: bool = Field(
        default=False,
        description="Developer mode; simulates a remote library with store latency",
    )
    brandcn_store_latency_ms: int = Field(
        default=0,
        ge=0,
        description="Fixed latency in ms added to each library lookup",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("brandcn_log_level")
    @classmethod
    def _check_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in _VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}")
        return level

    @property
    def library_dir(self) -> Path:
        """Directory the logo library is read from."""
        return self.brandcn_library_dir or get_bundled_library_dir()

    def store_latency(self) -> float:
        """Seconds to wait before each library lookup.

        An explicit ``BRANDCN_STORE_LATENCY_MS`` wins; developer mode without
        one picks a random delay per lookup.
        """
        if self.brandcn_store_latency_ms:
            return self.brandcn_store_latency_ms / 1000
        if self.brandcn_dev:
            low, high = DEV_LATENCY_RANGE_MS
            return random.randint(low, high) / 1000
        return 0.0


@lru_cache
def get_settings() -> Settings:
    """Get the cached settings instance."""
    return Settings()


def clear_settings_cache() -> None:
    """Clear the cached settings (used by tests and after env changes)."""
    get_settings.cache_clear()
