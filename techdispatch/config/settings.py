"""
Engine settings using Pydantic BaseSettings.
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Engine settings."""

    # Application
    APP_NAME: str = "Technician Dispatch Engine"
    APP_VERSION: str = "0.1.0"
    ENVIRONMENT: str = "production"
    LOG_LEVEL: str = "INFO"

    # Durations
    MAX_REASONABLE_DURATION_MINUTES: int = 2400  # 40 hours = 5 work days

    # Scoring
    RECOMMENDATION_THRESHOLD: int = 80

    # Calendar-wide slot suggestions
    SLOT_LOOKAHEAD_DAYS: int = 14
    SLOT_SUGGESTION_LIMIT: int = 10

    # Route scheduling
    ROUTE_AVERAGE_SPEED_MPH: float = 30.0
    ROUTE_MIN_TRAVEL_MINUTES: int = 15

    @field_validator("ENVIRONMENT")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        if v not in ["development", "staging", "production", "test"]:
            raise ValueError(
                "Environment must be one of: development, staging, production, test"
            )
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    @field_validator("SLOT_LOOKAHEAD_DAYS", "SLOT_SUGGESTION_LIMIT")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Value must be at least 1")
        return v

    model_config = {"env_file": ".env", "case_sensitive": True, "extra": "ignore"}


# Global settings instance
settings = Settings()
