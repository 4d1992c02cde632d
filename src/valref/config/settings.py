"""Configuration settings using Pydantic Settings.

Usage:
    from valref.config import DemoSettings

    # Load from environment variables (VALREF_*)
    settings = DemoSettings()

    # Or override with explicit values
    settings = DemoSettings(headings=True, demos=["point", "rectangle"])
"""

from __future__ import annotations

from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from valref.demos import DEMOS

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class DemoSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for the demo runner.

    Attributes:
        log_level: Level for log records on stderr.
        headings: Print a section heading before each demo.
        demos: Demo names to run (None for all).

    Environment Variables:
        VALREF_LOG_LEVEL
        VALREF_HEADINGS
        VALREF_DEMOS (JSON list, e.g. '["point", "score"]')
    """

    model_config = SettingsConfigDict(
        env_prefix="VALREF_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: LogLevel = "WARNING"
    headings: bool = False
    demos: list[str] | None = None

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    @field_validator("demos")
    @classmethod
    def _known_demos(cls, value: list[str] | None) -> list[str] | None:
        if value is None:
            return value
        unknown = sorted(set(value) - DEMOS.keys())
        if unknown:
            raise ValueError(f"Unknown demo(s): {', '.join(unknown)}")
        return value
