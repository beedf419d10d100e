"""
Order statistics service settings.

Values come from environment variables or a .env file.
"""
from typing import Optional

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from order_stats.exceptions import ConfigurationError


class Settings(BaseSettings):
    """Application settings."""

    PROJECT_NAME: str = "Order Statistics"

    # Order store
    STATS_DB_DRIVER: str = "postgresql+asyncpg"
    STATS_DB_HOST: str = "localhost"
    STATS_DB_PORT: int = 5432
    STATS_DB_NAME: str = "orders"
    STATS_DB_USER: str = "postgres"
    STATS_DB_PASSWORD: str = "postgres"
    STATS_DB_ORDERS_TABLE: str = "filled_orders"

    @property
    def DATABASE_URL(self) -> str:
        """Async database connection URL."""
        return (
            f"{self.STATS_DB_DRIVER}://{self.STATS_DB_USER}:{self.STATS_DB_PASSWORD}"
            f"@{self.STATS_DB_HOST}:{self.STATS_DB_PORT}/{self.STATS_DB_NAME}"
        )

    @field_validator("STATS_DB_ORDERS_TABLE")
    @classmethod
    def check_orders_table(cls, v: str) -> str:
        if not v.replace("_", "").isalnum():
            raise ValueError(f"invalid table name: {v!r}")
        return v

    # Worker
    STATS_PUBLISHING_PERIOD_SECONDS: float = 60.0
    STATS_TOP_ORDERS_LIMIT: int = 5
    STATS_RUN_DURATION_SECONDS: Optional[float] = None  # None runs until signalled

    @field_validator("STATS_PUBLISHING_PERIOD_SECONDS")
    @classmethod
    def check_period(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("publishing period must be positive")
        return v

    @field_validator("STATS_TOP_ORDERS_LIMIT")
    @classmethod
    def check_top_limit(cls, v: int) -> int:
        if v < 0:
            raise ValueError("top orders limit must be non-negative")
        return v

    @field_validator("STATS_RUN_DURATION_SECONDS")
    @classmethod
    def check_duration(cls, v: Optional[float]) -> Optional[float]:
        if v is not None and v <= 0:
            raise ValueError("run duration must be positive")
        return v

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs/stats"

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level: {v}")
        return level

    # Monitoring
    METRICS_ENABLED: bool = False
    METRICS_PORT: int = 9100

    # Sentry
    SENTRY_DSN: Optional[str] = None
    SENTRY_ENABLED: bool = False
    SENTRY_ENVIRONMENT: str = "development"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )


def load_settings(**overrides) -> Settings:
    """
    Load settings from the environment.

    Args:
        **overrides: Explicit values taking precedence over the environment

    Raises:
        ConfigurationError: If a value fails validation
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        error = e.errors()[0]
        key = ".".join(str(part) for part in error.get("loc", ())) or "settings"
        raise ConfigurationError(key, error.get("msg", str(e))) from e
