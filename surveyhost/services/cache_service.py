"""Read-through cache for async computations.

A computation is any named coroutine function taking keyword options.  Its
result is stored under a key built from the function's name and options:

    func_<name>(<option value>, <option value>, ...)

Each option value is rendered as its ``__name__`` when it is a callable and
as compact JSON otherwise, in the options' insertion order.  Keys therefore
depend on the function *name*: two anonymous functions (lambdas, partials)
with the same options share a key, which is reported with a warning.

Caching is skipped (the computation runs, the store is left alone) when
``DISABLE_CACHE`` is set or the request is a debug request.  Only truthy
results are stored, and an empty (falsy) entry counts as a miss.  There is
no single-flight: two concurrent misses on the same key both compute and
the last write wins.
"""

from __future__ import annotations

import functools
import json
import time
from collections.abc import Awaitable, Callable, Mapping
from typing import Any, TypeVar

import structlog

from surveyhost.config.settings import CacheType
from surveyhost.interfaces.cache_provider import ICacheProvider
from surveyhost.models.context import RequestContext
from surveyhost.providers.cache.memory_cache import MemoryCacheProvider
from surveyhost.providers.cache.redis_cache import RedisCacheProvider
from surveyhost.utils.errors import ConfigurationError
from surveyhost.utils.logging import get_logger

_R = TypeVar("_R")

_logger: structlog.BoundLogger = get_logger(__name__)

_ANONYMOUS_NAMES = {"", "<lambda>"}


def _serialize_option(value: Any) -> str:
    if callable(value):
        return getattr(value, "__name__", "")
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)


def compute_key(func: Callable[..., Any], func_options: Mapping[str, Any] | None = None) -> str:
    """Compute the cache key of *func* called with *func_options*.

    The function should have a proper name, otherwise keys of different
    functions can collide.  A nameless function is still accepted, but
    a warning with the caller's stack is logged.
    """
    serialized_options = ", ".join(_serialize_option(v) for v in (func_options or {}).values())
    name = getattr(func, "__name__", "")

    if name in _ANONYMOUS_NAMES:
        _logger.warning(
            "cache_key_anonymous_function",
            hint="use a named function (def) instead of a lambda or partial to avoid cache mismatch",
            stack_info=True,
        )

    return f"func_{name}({serialized_options})"


class CacheService:
    """Read-through cache wrapper over a configurable backing store.

    Parameters
    ----------
    cache_type:
        ``CacheType.LOCAL`` keeps entries in *local_cache*;
        ``CacheType.REDIS`` uses the Redis client of each request context.
    disable_cache:
        Global kill switch: when set, every call computes and nothing is
        read from or written to the store.
    local_cache:
        In-process store for ``CacheType.LOCAL``.  A fresh unbounded
        :class:`MemoryCacheProvider` is created when omitted.
    """

    def __init__(
        self,
        cache_type: CacheType,
        disable_cache: bool = False,
        local_cache: MemoryCacheProvider | None = None,
    ) -> None:
        self._cache_type = cache_type
        self._disable_cache = disable_cache
        self._local_cache = local_cache if local_cache is not None else MemoryCacheProvider()

    @property
    def cache_type(self) -> CacheType:
        return self._cache_type

    @property
    def disable_cache(self) -> bool:
        return self._disable_cache

    def _provider(self, context: RequestContext) -> ICacheProvider:
        if self._cache_type == CacheType.LOCAL:
            return self._local_cache
        if context.redis_client is None:
            raise ConfigurationError(
                "Request context has no Redis client but CACHE_TYPE is redis",
                provider_name="redis",
            )
        return RedisCacheProvider(context.redis_client)

    # ------------------------------------------------------------------
    # Backing store access
    # ------------------------------------------------------------------

    async def get_cache(self, key: str, context: RequestContext) -> Any | None:
        return await self._provider(context).get(key)

    async def set_cache(self, key: str, value: Any, context: RequestContext) -> None:
        await self._provider(context).set(key, value)

    async def clear_cache(self, context: RequestContext) -> None:
        """Delete every cached entry from the configured store."""
        await self._provider(context).clear()

    # ------------------------------------------------------------------
    # Cached call
    # ------------------------------------------------------------------

    async def use_cache(
        self,
        func: Callable[..., Awaitable[_R]],
        context: RequestContext,
        func_options: Mapping[str, Any] | None = None,
        key: str | None = None,
    ) -> _R:
        """Return the cached result of *func*, computing it on a miss.

        Parameters
        ----------
        func:
            Named coroutine function.  It receives *func_options* as keyword
            arguments, plus ``context=`` when caching is enabled.
        context:
            The current request context.
        func_options:
            Keyword options for *func*; also part of the computed key.
        key:
            Explicit cache key, overriding the computed one.

        Returns
        -------
        The stored value on a hit, otherwise whatever *func* returned.
        Exceptions from *func* or from the store propagate unchanged.
        """
        started_at = time.perf_counter()
        func_options = dict(func_options or {})
        cache_key = key if key is not None else compute_key(func, func_options)
        enable_cache = not self._disable_cache and not context.is_debug

        if enable_cache:
            existing_result = await self.get_cache(cache_key, context)
            if existing_result:
                verb = "using cache"
                value = existing_result
            else:
                verb = "computing and caching result"
                # Cached functions always get the context in case they need it.
                value = await func(**func_options, context=context)
                if value:
                    await self.set_cache(cache_key, value, context)
        else:
            verb = "computing result"
            value = await func(**func_options)

        _logger.info(
            "cache_call",
            verb=verb,
            key=cache_key,
            elapsed_ms=round((time.perf_counter() - started_at) * 1000, 2),
            settings={
                "is_debug": context.is_debug,
                "disable_cache": self._disable_cache,
                "cache_type": self._cache_type.value,
            },
        )
        return value


def cached(
    service: CacheService,
    key: str | None = None,
) -> Callable[[Callable[..., Awaitable[_R]]], Callable[..., Awaitable[_R]]]:
    """Decorator form of :meth:`CacheService.use_cache`.

    The decorated coroutine is then called as ``fn(context, **options)``::

        @cached(cache_service)
        async def count_responses(survey_slug, context=None): ...

        total = await count_responses(ctx, survey_slug="state_of_js_2023")
    """

    def decorator(func: Callable[..., Awaitable[_R]]) -> Callable[..., Awaitable[_R]]:
        @functools.wraps(func)
        async def wrapper(context: RequestContext, **func_options: Any) -> _R:
            return await service.use_cache(func, context, func_options, key=key)

        return wrapper

    return decorator
