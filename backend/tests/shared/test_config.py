"""Tests for shared/config.py."""

import pytest
from unittest.mock import patch
import os

from shared.config import Settings, get_settings


class TestSettings:
    def test_default_values(self):
        """Settings should have sensible defaults."""
        settings = Settings(_env_file=None)
        assert settings.app_name == "Yoga Master API"
        assert settings.app_version == "0.1.0"
        assert settings.debug is False
        assert settings.host == "0.0.0.0"
        assert settings.port == 5000
        assert settings.jwt_algorithm == "HS256"
        assert settings.token_expiry_days == 30
        assert settings.payment_currency == "usd"
        assert settings.storage_timeout_seconds == 10.0

    def test_secrets_default_to_empty(self):
        """Secrets should never have a built-in value."""
        settings = Settings(_env_file=None)
        assert settings.jwt_secret == ""
        assert settings.stripe_secret_key == ""
        assert settings.supabase_service_role_key == ""

    def test_loads_from_env(self):
        """Settings should load YOGA_ prefixed environment variables."""
        with patch.dict(os.environ, {"YOGA_DEBUG": "true", "YOGA_PORT": "9000"}):
            settings = Settings(_env_file=None)
            assert settings.debug is True
            assert settings.port == 9000

    def test_ignores_unprefixed_env(self):
        """Unprefixed variables should not leak into settings."""
        with patch.dict(os.environ, {"PORT": "9000", "JWT_SECRET": "leaked"}):
            settings = Settings(_env_file=None)
            assert settings.port == 5000
            assert settings.jwt_secret == ""

    def test_loads_secrets_from_env(self):
        """Settings should load secrets from environment variables."""
        with patch.dict(os.environ, {
            "YOGA_JWT_SECRET": "jwt-secret",
            "YOGA_STRIPE_SECRET_KEY": "sk_test_123",
            "YOGA_SUPABASE_URL": "https://test.supabase.co",
            "YOGA_SUPABASE_SERVICE_ROLE_KEY": "test-service-key",
        }):
            settings = Settings(_env_file=None)
            assert settings.jwt_secret == "jwt-secret"
            assert settings.stripe_secret_key == "sk_test_123"
            assert settings.supabase_url == "https://test.supabase.co"
            assert settings.supabase_service_role_key == "test-service-key"

    def test_loads_storage_timeout_from_env(self):
        """Storage timeout should accept fractional seconds."""
        with patch.dict(os.environ, {"YOGA_STORAGE_TIMEOUT_SECONDS": "0.5"}):
            settings = Settings(_env_file=None)
            assert settings.storage_timeout_seconds == 0.5


class TestGetSettings:
    def test_get_settings_returns_settings_instance(self):
        """get_settings should return a Settings instance."""
        get_settings.cache_clear()
        settings = get_settings()
        assert isinstance(settings, Settings)

    def test_get_settings_is_cached(self):
        """get_settings should return the same instance until cleared."""
        get_settings.cache_clear()
        assert get_settings() is get_settings()

    def test_cache_clear_picks_up_env_changes(self):
        """Clearing the cache should reload the environment."""
        with patch.dict(os.environ, {"YOGA_APP_VERSION": "9.9.9"}):
            get_settings.cache_clear()
            assert get_settings().app_version == "9.9.9"
