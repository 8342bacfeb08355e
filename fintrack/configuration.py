"""Mini README: Centralised configuration models and helpers for the tracker.

Structure:
    * FintrackSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read environment variables (prefixed with
    ``FINTRACK_``) or a local ``.env`` file. The configuration is cached so
    validation runs only once per process; CLI options may still override
    individual values for a single run.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .logging_utils import resolve_level


class FintrackSettings(BaseSettings):
    """Runtime configuration for the finance tracker."""

    model_config = SettingsConfigDict(
        env_prefix="FINTRACK_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        "development",
        description="Environment label shown in debug logs.",
    )
    currency_symbol: str = Field(
        "$",
        description="Symbol printed in front of every monetary amount.",
    )
    log_level: str = Field(
        "WARNING",
        description="Root logging level; WARNING keeps the interactive menu quiet.",
    )
    seed_demo_data: bool = Field(
        False,
        description="Start the interactive menu with the demo transactions recorded.",
    )

    @field_validator("currency_symbol")
    @classmethod
    def _require_symbol(cls, value: str) -> str:
        """Reject blank currency symbols after trimming whitespace."""

        symbol = value.strip()
        if not symbol:
            raise ValueError("currency_symbol must not be blank")
        return symbol

    @field_validator("log_level")
    @classmethod
    def _normalise_level(cls, value: str) -> str:
        """Accept any standard level name, storing it upper-cased."""

        resolve_level(value)
        return value.strip().upper()


@lru_cache()
def get_settings() -> FintrackSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return FintrackSettings()
