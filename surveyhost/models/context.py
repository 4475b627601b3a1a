"""Per-request context handed to cached computations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class RequestContext:
    """Collaborators available to a single request.

    Attributes
    ----------
    redis_client:
        Async Redis client (``redis.asyncio.Redis``) used when the cache
        type is Redis.  ``None`` is fine for the local cache.
    is_debug:
        Debug requests bypass the cache entirely.
    """

    redis_client: Any = None
    is_debug: bool = False
