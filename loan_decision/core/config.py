"""Application Configuration.

Centralized configuration using Pydantic Settings for type safety and validation.
Loan policy values are not read from the environment; see
``domain.business_rules.policy``.
"""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = "Loan Decision Engine"
    APP_VERSION: str = "1.0.0"
    ENVIRONMENT: str = Field(default="development")
    DEBUG: bool = Field(default=True)

    # API
    API_V1_PREFIX: str = "/api/v1"

    # CORS
    CORS_ORIGINS: list = [
        "http://localhost:5173",
        "http://localhost:3000",
        "http://localhost:8080",
    ]

    # Logging
    LOG_LEVEL: str = Field(default="INFO")

    @field_validator('LOG_LEVEL', mode='after')
    @classmethod
    def validate_log_level(cls, v):
        """Validate LOG_LEVEL is a known logging level name."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(
                f"LOG_LEVEL must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL (got '{v}')"
            )
        return level

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
