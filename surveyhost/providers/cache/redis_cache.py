"""Redis cache provider.

Wraps the async Redis client carried by the request context.  Values are
always stored as JSON text and decoded on the way out; values JSON cannot
encode (datetimes, UUIDs) are stored as their ``str()``.  The cache owns a
dedicated Redis database, which is what makes ``clear`` (``FLUSHDB``) safe.
"""

from __future__ import annotations

import json
from typing import Any

import structlog
from redis.asyncio import Redis

from surveyhost.interfaces.cache_provider import ICacheProvider
from surveyhost.utils.logging import get_logger

_logger: structlog.BoundLogger = get_logger(__name__)


class RedisCacheProvider(ICacheProvider):
    """Cache store on top of ``redis.asyncio.Redis``.

    Connection errors from the client are not caught.
    """

    def __init__(self, client: Redis) -> None:
        self._client = client

    async def get(self, key: str) -> Any | None:
        raw = await self._client.get(key)
        if raw is None:
            _logger.debug("cache_miss", key=key, provider="redis")
            return None
        _logger.debug("cache_hit", key=key, provider="redis")
        return json.loads(raw)

    async def set(self, key: str, value: Any) -> None:
        await self._client.set(key, json.dumps(value, ensure_ascii=False, default=str))
        _logger.debug("cache_set", key=key, provider="redis")

    async def clear(self) -> None:
        await self._client.flushdb()
        _logger.info("cache_clear", provider="redis")
