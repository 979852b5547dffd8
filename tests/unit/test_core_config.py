"""
Unit tests for configuration management (flat Settings).

Tests cover:
- Settings loading from environment variables
- Environment detection
- Validation (log level, cache backend)
- Default values
- Cached singleton behavior
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from customer_service.core.config import Settings, get_settings
from customer_service.core.enums import Environment


class TestEnvironmentEnum:
    """Test Environment enum."""

    def test_environment_values(self):
        assert Environment.DEVELOPMENT == "development"
        assert Environment.TESTING == "testing"
        assert Environment.CI == "ci"
        assert Environment.PRODUCTION == "production"


class TestSettingsDefaults:
    """Test default values when the environment is empty."""

    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings()

        assert settings.environment == Environment.DEVELOPMENT
        assert settings.log_level == "INFO"
        assert settings.cache_backend == "redis"
        assert settings.cache_namespace == "customer-service"
        assert settings.metrics_namespace == "CustomerService"
        assert settings.is_development


class TestSettingsFromEnvironment:
    """Test Settings loading from environment variables."""

    def test_values_loaded_from_env(self):
        env = {
            "ENVIRONMENT": "production",
            "LOG_LEVEL": "warning",
            "CACHE_BACKEND": "memory",
            "REDIS_URL": "redis://cache:6379/2",
            "METRICS_NAMESPACE": "Customers",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = Settings()

        assert settings.is_production
        assert settings.log_level == "WARNING"
        assert settings.cache_backend == "memory"
        assert settings.redis_url == "redis://cache:6379/2"
        assert settings.metrics_namespace == "Customers"

    def test_invalid_log_level(self):
        with patch.dict(os.environ, {"LOG_LEVEL": "verbose"}, clear=True):
            with pytest.raises(ValidationError, match="log_level"):
                Settings()

    def test_invalid_cache_backend(self):
        with patch.dict(os.environ, {"CACHE_BACKEND": "memcached"}, clear=True):
            with pytest.raises(ValidationError):
                Settings()


class TestGetSettings:
    """Test cached singleton behavior."""

    def test_get_settings_is_cached(self):
        with patch.dict(os.environ, {"ENVIRONMENT": "testing"}, clear=True):
            first = get_settings()
            second = get_settings()

        assert first is second
        assert first.is_testing
