"""Application settings using Pydantic BaseSettings for environment variable management."""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Global application settings loaded from environment variables.

    Attributes:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Log output format (json for production, console for dev)
        current_year: Year used for recency weighting (None = wall clock)
        min_sources: Minimum number of sources from the synthetic provider
        max_sources: Maximum number of sources from the synthetic provider
        analysis_store_path: Optional JSON file backing the analysis store
    """

    log_level: str = Field(
        default="INFO",
        description="Logging level"
    )
    log_format: str = Field(
        default="json",
        description="Log output format: json or console"
    )
    current_year: Optional[int] = Field(
        default=None,
        description="Override for the calendar year used in recency weighting"
    )
    min_sources: int = Field(
        default=5,
        ge=0,
        description="Minimum sources returned by the synthetic provider"
    )
    max_sources: int = Field(
        default=10,
        ge=0,
        description="Maximum sources returned by the synthetic provider"
    )
    analysis_store_path: Optional[str] = Field(
        default=None,
        description="JSON file for analysis persistence (memory-only if unset)"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


def resolve_current_year(override: Optional[int] = None) -> int:
    """
    Resolve the calendar year used for credibility weighting.

    Resolution order: explicit override, then settings.current_year,
    then the current UTC year. Call once per analysis and pass the
    result down explicitly.
    """
    if override is not None:
        return override
    if settings.current_year is not None:
        return settings.current_year
    return datetime.now(timezone.utc).year


# Singleton instance - import this throughout the application
settings = Settings()
