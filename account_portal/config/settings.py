"""Application settings and configuration."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Account Portal"
    app_version: str = "0.1.0"
    environment: Literal["development", "staging", "production"] = "development"
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")

    # API
    api_prefix: str = "/api"
    cors_origins: list[str] = Field(default=["http://localhost:3000"])
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = Field(default=["*"])
    cors_allow_headers: list[str] = Field(default=["*"])

    # Mock credential used in place of a real password store
    mock_current_password: str = Field(default="currentpass")

    # Validation rules
    password_min_length: int = Field(default=6, ge=1)
    username_min_length: int = Field(default=6, ge=1)
    bio_max_length: int = Field(default=160, ge=0)
    phone_min_digits: int = Field(default=10, ge=1)
    phone_max_digits: int = Field(default=15, ge=1)

    # Rate limiting
    rate_limit_enabled: bool = True
    login_rate_limit: str = Field(default="10/minute")
    password_rate_limit: str = Field(default="5/minute")

    # HTTP client used by the forms
    client_base_url: str = Field(default="http://localhost:8000")
    client_timeout: float = Field(default=10.0, gt=0)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
