"""Application wiring for surveyhost.

Builds the cache service, the Redis client and per-request contexts from
:class:`Settings`.  The web application and the CLI both go through these
factories so the cache type and the kill switch are read in one place.
"""

from __future__ import annotations

import structlog
from redis.asyncio import Redis

from surveyhost.config.settings import CacheType, Settings
from surveyhost.models.context import RequestContext
from surveyhost.providers.cache.memory_cache import MemoryCacheProvider
from surveyhost.services.cache_service import CacheService
from surveyhost.utils.errors import ConfigurationError
from surveyhost.utils.logging import configure_logging, get_logger


def setup_logging(app_settings: Settings) -> structlog.BoundLogger:
    configure_logging(
        log_level=app_settings.log_level,
        json_output=app_settings.is_production,
    )
    return get_logger(__name__)


def build_cache_service(app_settings: Settings) -> CacheService:
    """Create the process-wide cache service.

    The local store is only allocated when ``CACHE_TYPE=local``.
    """
    local_cache = None
    if app_settings.cache_type == CacheType.LOCAL:
        local_cache = MemoryCacheProvider(max_size=app_settings.local_cache_max_size)
    service = CacheService(
        cache_type=app_settings.cache_type,
        disable_cache=app_settings.disable_cache,
        local_cache=local_cache,
    )
    get_logger(__name__).info(
        "cache_service_ready",
        cache_type=app_settings.cache_type.value,
        disable_cache=app_settings.disable_cache,
    )
    return service


def build_redis_client(app_settings: Settings) -> Redis | None:
    """Create the async Redis client, or ``None`` for the local cache.

    Raises:
        ConfigurationError: If Redis is selected but ``REDIS_URL`` is empty.
    """
    if app_settings.cache_type == CacheType.LOCAL:
        return None
    if not app_settings.redis_url:
        raise ConfigurationError("REDIS_URL is empty", provider_name="redis")
    return Redis.from_url(app_settings.redis_url, decode_responses=True)


def build_request_context(
    app_settings: Settings,
    is_debug: bool = False,
    redis_client: Redis | None = None,
) -> RequestContext:
    """Build a request context, creating a Redis client if none is given."""
    if redis_client is None:
        redis_client = build_redis_client(app_settings)
    return RequestContext(redis_client=redis_client, is_debug=is_debug)
