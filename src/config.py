"""Configuration management for the application."""

from functools import lru_cache

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PLACEHOLDER_SECRET = "change-me-in-production"  # noqa: S105


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    ``database_url``, ``port`` and ``jwt_secret`` have no defaults: a process
    missing any of them fails while loading settings, before serving requests.
    """

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local"), env_file_encoding="utf-8", extra="ignore"
    )

    # Database
    database_url: str = Field(...)

    # Server
    port: int = Field(...)

    # JWT
    jwt_secret: str = Field(...)
    jwt_algorithm: str = Field(default="HS256")
    jwt_expiration_minutes: int | None = Field(default=None)

    # Password hashing
    bcrypt_rounds: int = Field(default=10, ge=4, le=31)

    # API
    environment: str = Field(default="development")
    log_level: str = Field(default="INFO")

    @field_validator("database_url", "jwt_secret")
    @classmethod
    def not_blank(cls, value: str) -> str:
        """Reject empty strings for required settings."""
        if not value.strip():
            raise ValueError("must not be empty")
        return value

    @model_validator(mode="after")
    def validate_production_settings(self) -> "Settings":
        """Validate that production has secure settings."""
        if self.environment == "production":
            if self.jwt_secret == PLACEHOLDER_SECRET:
                raise ValueError("JWT_SECRET must be changed in production")
            if "localhost" in self.database_url:
                raise ValueError("DATABASE_URL should not use localhost in production")
        return self

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
