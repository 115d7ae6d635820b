"""
Application configuration using Pydantic Settings.
Loads environment variables and provides type-safe configuration.
"""

from typing import List, Optional
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator


DEFAULT_CORS_ALLOW_HEADERS = ["authorization", "x-client-info", "apikey", "content-type"]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Environment
    environment: str = Field(default="development", description="Current environment")
    debug: bool = Field(default=False, description="Debug mode")

    # API Configuration
    api_title: str = Field(default="Lancer Functions")
    api_version: str = Field(default="1.0.0")
    api_prefix: str = Field(default="/functions/v1")
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)
    app_name: str = Field(default="Lancer")

    # Supabase Configuration
    supabase_url: str = Field(default="https://example.supabase.co", description="Supabase project URL")
    supabase_service_key: str = Field(default="", description="Supabase service role key")

    # Stripe Configuration
    stripe_secret_key: str = Field(default="", description="Stripe secret API key")
    stripe_api_version: str = Field(default="2023-10-16")

    # Email (Resend)
    resend_api_key: Optional[str] = Field(default=None, description="Resend API key")
    resend_api_url: str = Field(default="https://api.resend.com/emails")
    email_from: str = Field(default="Lancer <noreply@lancer.app>")
    email_timeout_seconds: float = Field(default=10.0)
    notification_default_title: str = Field(default="New activity on Lancer")

    # CORS
    cors_allow_headers: str | List[str] = Field(
        default=",".join(DEFAULT_CORS_ALLOW_HEADERS)
    )

    @field_validator("cors_allow_headers", mode="before")
    @classmethod
    def parse_cors_allow_headers(cls, v):
        """Parse allowed CORS headers from comma-separated string or list."""
        if isinstance(v, str):
            if not v or v.strip() == "":
                return list(DEFAULT_CORS_ALLOW_HEADERS)
            return [header.strip() for header in v.split(",")]
        elif v is None:
            return list(DEFAULT_CORS_ALLOW_HEADERS)
        return v

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment.lower() == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    @property
    def is_email_configured(self) -> bool:
        """Check if the transactional email provider has a credential."""
        return bool(self.resend_api_key and self.resend_api_key.strip())

    def validate_environment(self) -> None:
        """Validate that all required environment variables are set."""
        required_vars = [
            "supabase_url",
            "supabase_service_key",
            "stripe_secret_key",
        ]

        missing_vars = []
        for var in required_vars:
            if not getattr(self, var, None):
                missing_vars.append(var.upper())

        if missing_vars:
            raise ValueError(
                f"Missing required environment variables: {', '.join(missing_vars)}"
            )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Use this function to get settings throughout the application.
    """
    settings = Settings()

    # Validate environment in production
    if settings.is_production:
        settings.validate_environment()

    return settings


# Create a global settings instance
settings = get_settings()
