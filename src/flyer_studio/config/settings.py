"""Application settings loaded from the environment and ``.env``."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Flyer Studio settings.

    Every field can be set with a ``FLYER_`` prefixed environment variable,
    e.g. ``FLYER_TEMPLATES_DIR=/srv/templates``.
    """

    model_config = SettingsConfigDict(
        env_prefix="FLYER_",
        env_file=".env",
        extra="ignore",
        case_sensitive=False,
    )

    templates_dir: Path = Field(
        default=Path("templates"),
        description="Root of the template store (categories.json + one directory per category)",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Log level for the flyer_studio logger",
    )
    cache_ttl_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Template cache lifetime; unset keeps entries for the process lifetime",
    )
    google_fonts_url: str = Field(
        default="https://fonts.googleapis.com/css2",
        description="Base URL for brand font stylesheets",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, v: object) -> object:
        return v.upper() if isinstance(v, str) else v

    def is_configured(self) -> dict[str, bool]:
        """Report which parts of the template store are present on disk."""
        return {
            "templates_dir": self.templates_dir.is_dir(),
            "categories_manifest": (self.templates_dir / "categories.json").is_file(),
        }


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()


def clear_settings_cache() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    get_settings.cache_clear()
