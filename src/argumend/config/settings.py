"""Configuration management."""

from functools import cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..consts import (
    DEFAULT_CUTOFF,
    DEFAULT_MAX_SUGGESTIONS,
    DEFAULT_MESSAGE_SEPARATOR,
)


class Config(BaseSettings):
    """Defaults for suggestion lookups and the tool server."""

    model_config = SettingsConfigDict(
        env_prefix="ARGUMEND_", case_sensitive=False, extra="ignore"
    )
    log_level: str = Field(
        default="INFO",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR)$",
        description="Logging level",
    )
    max_suggestions: int = Field(
        default=DEFAULT_MAX_SUGGESTIONS,
        ge=0,
        le=50,
        description="Maximum number of suggestions per unknown name",
    )
    cutoff: float = Field(
        default=DEFAULT_CUTOFF,
        ge=0.0,
        le=1.0,
        description="Minimum similarity ratio for a name to be suggested",
    )
    message_separator: str = Field(
        default=DEFAULT_MESSAGE_SEPARATOR,
        description="Joins the messages for several unknown names in one error",
    )

    def __repr__(self) -> str:
        """String representation of the configuration"""
        return (
            f"Config(max_suggestions={self.max_suggestions}, "
            f"cutoff={self.cutoff}, log_level='{self.log_level}')"
        )


@cache
def get_config() -> Config:
    """Get a cached Config instance."""
    return Config()
