"""Settings management for codemetrics.

This module provides centralized configuration management using pydantic-settings.
All configuration is loaded from environment variables (prefix ``CODEMETRICS_``)
or a ``.env`` file, with defaults matching the standard complexity gate.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Attributes:
        project_config: Path to the project configuration (tsconfig-style JSON).
        max_average: Default threshold for average function complexity.
        max_function: Default threshold for the most complex function.
        max_cognitive: Default threshold for codebase cognitive complexity.
        languages: Languages analyzed besides those enabled by the project
            configuration itself.
        log_level: Logging level.
    """

    model_config = SettingsConfigDict(
        env_prefix="CODEMETRICS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    project_config: str = Field(
        default="./tsconfig.json",
        description="Path to the project configuration file",
    )

    # Threshold defaults
    max_average: float = Field(default=5, ge=0, description="Maximum average complexity")
    max_function: int = Field(default=10, ge=1, description="Maximum function complexity")
    max_cognitive: int = Field(default=100, ge=0, description="Maximum cognitive complexity")

    languages: list[str] = Field(
        default_factory=lambda: ["typescript", "tsx"],
        description="Languages to analyze",
    )

    log_level: str = Field(default="WARNING", description="Logging level")


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Uses lru_cache to ensure settings are loaded once and reused.

    Returns:
        The application settings instance.
    """
    return Settings()
