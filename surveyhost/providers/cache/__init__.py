"""Cache providers.

MemoryCacheProvider is a process-local cachetools store, fast but not shared
across processes.  RedisCacheProvider reaches an external Redis database
through the client on the request context and is what multi-worker
deployments use.
"""

from surveyhost.providers.cache.memory_cache import MemoryCacheProvider
from surveyhost.providers.cache.redis_cache import RedisCacheProvider

__all__ = ["MemoryCacheProvider", "RedisCacheProvider"]
