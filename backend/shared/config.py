"""
Centralized configuration for the Yoga Master backend.

All settings are loaded from environment variables (prefixed with YOGA_)
with sensible defaults. Secrets are read here once and handed to the
services that need them at construction time.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="YOGA_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Yoga Master API"
    app_version: str = "0.1.0"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 5000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Supabase
    supabase_url: str = ""
    supabase_service_role_key: str = ""
    supabase_db_url: str = ""  # direct Postgres URI, used by run_migrations.py

    # Access tokens
    jwt_secret: str = ""
    jwt_algorithm: str = "HS256"
    token_expiry_days: int = 30

    # Stripe
    stripe_secret_key: str = ""
    payment_currency: str = "usd"

    # Upper bound for a single storage call, in seconds
    storage_timeout_seconds: float = 10.0


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
