"""Unit tests for Settings and the factory functions in surveyhost/main.py."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from surveyhost import main as main_module
from surveyhost.config.settings import CacheType, Settings
from surveyhost.main import build_cache_service, build_redis_client, build_request_context
from surveyhost.utils.errors import ConfigurationError


def _settings(**overrides) -> Settings:
    """Build a Settings instance that ignores any local .env file."""
    defaults = {"app_env": "test"}
    defaults.update(overrides)
    return Settings(_env_file=None, **defaults)


# ======================================================================
# Settings
# ======================================================================


class TestSettings:
    def test_defaults_to_redis(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("CACHE_TYPE", raising=False)
        monkeypatch.delenv("DISABLE_CACHE", raising=False)
        settings = _settings()
        assert settings.cache_type is CacheType.REDIS
        assert settings.disable_cache is False

    def test_local_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CACHE_TYPE", "local")
        assert _settings().cache_type is CacheType.LOCAL

    @pytest.mark.parametrize("value", ["LOCAL", "memory", "redis", ""])
    def test_anything_but_local_is_redis(self, monkeypatch: pytest.MonkeyPatch, value: str) -> None:
        monkeypatch.setenv("CACHE_TYPE", value)
        assert _settings().cache_type is CacheType.REDIS

    def test_disable_cache_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DISABLE_CACHE", "true")
        assert _settings().disable_cache is True

    def test_empty_disable_cache_means_enabled(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DISABLE_CACHE", "")
        assert _settings().disable_cache is False

    def test_config_package_builds_no_settings_at_import(self) -> None:
        import surveyhost.config as config_package

        assert not isinstance(getattr(config_package, "settings", None), Settings)

    def test_redis_url_has_no_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("REDIS_URL", raising=False)
        assert _settings().redis_url == ""


# ======================================================================
# Factories
# ======================================================================


class TestBuildCacheService:
    def test_local(self) -> None:
        service = build_cache_service(_settings(cache_type="local", disable_cache=True))
        assert service.cache_type is CacheType.LOCAL
        assert service.disable_cache is True

    def test_redis(self) -> None:
        service = build_cache_service(_settings(cache_type="redis"))
        assert service.cache_type is CacheType.REDIS


class TestBuildRedisClient:
    def test_local_cache_needs_no_client(self) -> None:
        assert build_redis_client(_settings(cache_type="local")) is None

    def test_empty_url_raises(self) -> None:
        with pytest.raises(ConfigurationError):
            build_redis_client(_settings(cache_type="redis", redis_url=""))

    def test_builds_client_from_url(self) -> None:
        with patch.object(main_module, "Redis") as redis_cls:
            client = build_redis_client(_settings(cache_type="redis", redis_url="redis://cache:6379/3"))
        redis_cls.from_url.assert_called_once_with("redis://cache:6379/3", decode_responses=True)
        assert client is redis_cls.from_url.return_value


class TestBuildRequestContext:
    def test_uses_given_client(self) -> None:
        client = MagicMock()
        context = build_request_context(_settings(cache_type="redis"), is_debug=True, redis_client=client)
        assert context.redis_client is client
        assert context.is_debug is True

    def test_local_context_has_no_client(self) -> None:
        context = build_request_context(_settings(cache_type="local"))
        assert context.redis_client is None
        assert context.is_debug is False
