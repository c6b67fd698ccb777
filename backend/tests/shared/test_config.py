"""Tests for shared/config.py."""

import pytest
from unittest.mock import patch
import os

from pydantic import ValidationError

from shared.config import Settings, get_settings


class TestSettings:
    def test_default_values(self, monkeypatch):
        """Settings should have sensible defaults."""
        monkeypatch.delenv("STORE_BACKEND", raising=False)
        monkeypatch.delenv("PASSWORD_HASH_ROUNDS", raising=False)
        settings = Settings(_env_file=None)
        assert settings.app_name == "Kraftflix API"
        assert settings.debug is False
        assert settings.port == 8080
        assert settings.host == "0.0.0.0"
        assert settings.jwt_algorithm == "HS256"
        assert settings.token_ttl_days == 7
        assert settings.password_hash_rounds == 10
        assert settings.store_backend == "supabase"

    def test_loads_from_env(self):
        """Settings should load from environment variables."""
        with patch.dict(os.environ, {"DEBUG": "true", "PORT": "9000"}):
            settings = Settings(_env_file=None)
            assert settings.debug is True
            assert settings.port == 9000

    def test_jwt_secret_required(self, monkeypatch):
        """There is no default signing secret."""
        monkeypatch.delenv("JWT_SECRET", raising=False)
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_jwt_secret_not_empty(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, jwt_secret="")

    def test_only_hs256(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, jwt_algorithm="none")

    @pytest.mark.parametrize("rounds", [3, 32])
    def test_hash_rounds_bounds(self, rounds):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, password_hash_rounds=rounds)

    def test_loads_supabase_config_from_env(self):
        """Settings should load Supabase configuration from environment variables."""
        with patch.dict(os.environ, {
            "SUPABASE_URL": "https://test.supabase.co",
            "SUPABASE_SERVICE_ROLE_KEY": "test-service-key",
        }):
            settings = Settings(_env_file=None)
            assert settings.supabase_url == "https://test.supabase.co"
            assert settings.supabase_service_role_key == "test-service-key"

    def test_settings_are_frozen(self):
        settings = Settings(_env_file=None)
        with pytest.raises(ValidationError):
            settings.jwt_secret = "changed"


class TestGetSettings:
    def test_get_settings_returns_settings_instance(self):
        """get_settings should return a Settings instance."""
        get_settings.cache_clear()
        settings = get_settings()
        assert isinstance(settings, Settings)

    def test_get_settings_is_cached(self):
        """get_settings should return the same instance on repeated calls."""
        get_settings.cache_clear()
        assert get_settings() is get_settings()
