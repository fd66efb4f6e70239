"""
Configuration management using Pydantic Settings.

All configuration is loaded from environment variables (or an optional
``.env`` file) into one flat, validated Settings object.

Usage:
    from src.core.config import settings

    db_url = settings.database_url
    if settings.is_development:
        ...
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.enums import Environment


class Settings(BaseSettings):
    """
    Main application settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. ``.env`` file in the working directory
        3. Default values (only for non-sensitive config)
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )

    # Core application settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode (verbose errors)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Application metadata
    app_name: str = Field(
        default="Kennel API",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )

    # Database configuration
    database_url: str = Field(
        default="sqlite+aiosqlite:///./kennel.db",
        description="Async SQLAlchemy URL (postgresql+asyncpg://... or sqlite+aiosqlite://...)",
    )
    db_echo: bool = Field(
        default=False,
        description="Log all SQL statements",
    )

    # Security configuration
    secret_key: str = Field(
        description="HMAC key for signing session tokens (at least 32 characters)",
    )
    jwt_issuer: str = Field(
        default="kennel-api",
        description="Value of the 'iss' claim issued and required on tokens",
    )
    jwt_audience: str = Field(
        default="kennel-client",
        description="Value of the 'aud' claim issued and required on tokens",
    )
    access_token_expire_minutes: int = Field(
        default=60,
        description="Session token lifetime in minutes",
    )
    bcrypt_rounds: int = Field(
        default=12,
        description="bcrypt cost factor (10-20)",
    )

    # API configuration
    api_prefix: str = Field(
        default="/api",
        description="Route prefix for all resource endpoints",
    )
    cors_origins: str = Field(
        default="*",
        description="Allowed CORS origins (comma-separated)",
    )

    # Startup behaviour
    seed_demo_users: bool = Field(
        default=False,
        description="Create admin/staff/customer demo accounts on startup",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("secret_key")
    @classmethod
    def validate_secret_key(cls, v: str) -> str:
        """
        Require a signing key long enough for HS256.

        Raises:
            ValueError: If the key is shorter than 32 characters.
        """
        if len(v) < 32:
            raise ValueError("secret_key must be at least 32 characters")
        return v

    @field_validator("bcrypt_rounds")
    @classmethod
    def validate_bcrypt_rounds(cls, v: int) -> int:
        """
        Validate bcrypt rounds are within the supported range.

        Raises:
            ValueError: If rounds are not between 10 and 20.
        """
        if not 10 <= v <= 20:
            raise ValueError("bcrypt_rounds must be between 10 and 20")
        return v

    @field_validator("access_token_expire_minutes")
    @classmethod
    def validate_token_lifetime(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("access_token_expire_minutes must be positive")
        return v

    @field_validator("api_prefix")
    @classmethod
    def normalize_prefix(cls, v: str) -> str:
        """Ensure a leading slash and no trailing slash."""
        v = v.strip().rstrip("/")
        if v and not v.startswith("/"):
            v = f"/{v}"
        return v

    @property
    def cors_origin_list(self) -> list[str]:
        """CORS origins split into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # Convenience properties for environment checks
    @property
    def is_development(self) -> bool:
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        return self.environment in (Environment.TESTING, Environment.CI)

    @property
    def is_production(self) -> bool:
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache so the environment is read once per process.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()  # type: ignore[call-arg]  # Pydantic Settings loads from env


# Global settings instance (singleton pattern)
settings = get_settings()
