import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    debug: bool = False
    log_level: str = "INFO"
    cors_origins: list[str] = ["http://localhost:5173"]

    # Analytics defaults (used when a request omits the parameter)
    # Impact range: one of 7, 30, 90, 180, 360 or "all"
    default_impact_range: str = "90"
    # Lookback for the repository comparison table
    comparison_period_days: int = 360
    # Period the story page summarizes
    story_period_days: int = 30
    # Earliest year offered by the heatmap (and the fallback year when empty)
    min_heat_year: int = 2025

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return value.upper()

    @property
    def log_level_value(self) -> int:
        """Numeric logging level, falling back to INFO for unknown names."""
        level = logging.getLevelName(self.log_level)
        return level if isinstance(level, int) else logging.INFO


settings = Settings()
