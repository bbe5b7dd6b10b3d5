"""Territory knowledge base settings loaded from environment variables."""

from enum import StrEnum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(StrEnum):
    """Deployment environment."""

    DEV = "dev"
    STAGING = "staging"
    PROD = "prod"


class LogLevel(StrEnum):
    """Supported log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class Settings(BaseSettings):
    """Library settings loaded from ``TERRITORY_KB_*`` variables / .env file."""

    model_config = SettingsConfigDict(
        env_prefix="TERRITORY_KB_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- Locale ---
    DEFAULT_LOCALE: str = Field(
        default="en",
        description="Locale used when no locale is given and none is set for the current context.",
    )

    # --- Queries ---
    STRICT_TRANSLATION: bool = Field(
        default=False,
        description="Fail translation of display names shared by several codes instead of taking the first.",
    )
    VALIDATE_CONTAINMENT: bool = Field(
        default=True,
        description="Reject containment tables that reference unknown territory codes.",
    )

    # --- Logging ---
    LOG_LEVEL: LogLevel = Field(
        default=LogLevel.INFO,
        description="Library log level.",
    )

    # --- Environment ---
    ENVIRONMENT: Environment = Field(
        default=Environment.DEV,
        description="Deployment environment (dev/staging/prod).",
    )

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.ENVIRONMENT == Environment.PROD


def get_settings() -> Settings:
    """Factory function for settings, read fresh from the environment."""
    return Settings()
