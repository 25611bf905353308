"""
config.py

PURPOSE: Configuration loading and settings management.
DEPENDENCIES: pydantic, pydantic-settings

ARCHITECTURE NOTES:
Configuration comes from multiple sources (in priority order):
1. CLI flags (highest priority)
2. Environment variables (DIG_ADVENTURE_*)
3. Defaults (lowest priority)
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Main application settings."""

    log_level: str = Field(
        default="WARNING",
        description="Logging level",
    )
    debug: bool = Field(
        default=False,
        description="Show world state after each turn",
    )
    seed: int | None = Field(
        default=None,
        description="Seed for the random items found when digging",
    )
    extra_aliases: dict[str, str] = Field(
        default_factory=dict,
        description="Aliases added to the defaults, e.g. {\"q|quit\": \"exit\"}",
    )

    model_config = {"env_prefix": "DIG_ADVENTURE_"}

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()


def get_settings() -> Settings:
    """Get application settings, loading from environment."""
    return Settings()
