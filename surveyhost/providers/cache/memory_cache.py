"""In-memory cache provider using cachetools.

Process-local store selected with ``CACHE_TYPE=local``.  Nothing survives a
restart and nothing is shared between workers.
"""

from __future__ import annotations

import copy
import math
from typing import Any

import structlog
from cachetools import Cache

from surveyhost.interfaces.cache_provider import ICacheProvider
from surveyhost.utils.logging import get_logger

_logger: structlog.BoundLogger = get_logger(__name__)


class MemoryCacheProvider(ICacheProvider):
    """In-memory store backed by ``cachetools.Cache``.

    Values are deep-copied on the way in and on the way out, so a caller
    mutating a result never changes what later hits return (the Redis store
    gets the same isolation from its JSON round-trip).

    Parameters
    ----------
    max_size:
        Maximum number of entries before arbitrary entries are evicted.
        ``None`` means unbounded.
    """

    def __init__(self, max_size: int | None = None) -> None:
        self._cache: Cache[str, Any] = Cache(maxsize=math.inf if max_size is None else max_size)

    # ------------------------------------------------------------------
    # ICacheProvider implementation
    # ------------------------------------------------------------------

    async def get(self, key: str) -> Any | None:
        """Retrieve a copy of the cached value for *key*, or ``None`` if missing."""
        value = self._cache.get(key)
        if value is not None:
            _logger.debug("cache_hit", key=key)
            return copy.deepcopy(value)
        _logger.debug("cache_miss", key=key)
        return None

    async def set(self, key: str, value: Any) -> None:
        self._cache[key] = copy.deepcopy(value)
        _logger.debug("cache_set", key=key)

    async def clear(self) -> None:
        self._cache.clear()
        _logger.debug("cache_clear")

    def __len__(self) -> int:
        return len(self._cache)
