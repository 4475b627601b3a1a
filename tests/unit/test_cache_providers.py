"""Unit tests for MemoryCacheProvider and RedisCacheProvider."""

from __future__ import annotations

from datetime import datetime
from unittest.mock import AsyncMock

import pytest

from surveyhost.interfaces.cache_provider import ICacheProvider
from surveyhost.providers.cache.memory_cache import MemoryCacheProvider
from surveyhost.providers.cache.redis_cache import RedisCacheProvider


# ======================================================================
# MemoryCacheProvider
# ======================================================================


class TestMemoryCacheProvider:
    @pytest.fixture()
    def cache(self) -> MemoryCacheProvider:
        return MemoryCacheProvider()

    def test_implements_interface(self, cache: MemoryCacheProvider) -> None:
        assert isinstance(cache, ICacheProvider)

    @pytest.mark.asyncio
    async def test_get_missing_key_returns_none(self, cache: MemoryCacheProvider) -> None:
        assert await cache.get("nonexistent") is None

    @pytest.mark.asyncio
    async def test_set_and_get(self, cache: MemoryCacheProvider) -> None:
        await cache.set("key1", "value1")
        assert await cache.get("key1") == "value1"

    @pytest.mark.asyncio
    async def test_set_overwrites_existing(self, cache: MemoryCacheProvider) -> None:
        await cache.set("key1", "old")
        await cache.set("key1", "new")
        assert await cache.get("key1") == "new"

    @pytest.mark.asyncio
    async def test_stores_complex_values(self, cache: MemoryCacheProvider) -> None:
        data = {"editions": [2021, 2022], "count": 2}
        await cache.set("complex", data)
        assert await cache.get("complex") == data

    @pytest.mark.asyncio
    async def test_mutating_returned_value_does_not_change_entry(self, cache: MemoryCacheProvider) -> None:
        await cache.set("totals", {"survey": "js", "rows": [1, 2]})

        first = await cache.get("totals")
        first["rows"].append(999)

        assert await cache.get("totals") == {"survey": "js", "rows": [1, 2]}

    @pytest.mark.asyncio
    async def test_mutating_stored_value_does_not_change_entry(self, cache: MemoryCacheProvider) -> None:
        data = {"rows": [1, 2]}
        await cache.set("totals", data)
        data["rows"].clear()

        assert await cache.get("totals") == {"rows": [1, 2]}

    @pytest.mark.asyncio
    async def test_clear(self, cache: MemoryCacheProvider) -> None:
        await cache.set("a", 1)
        await cache.set("b", 2)
        await cache.clear()
        assert len(cache) == 0
        assert await cache.get("a") is None

    @pytest.mark.asyncio
    async def test_unbounded_by_default(self, cache: MemoryCacheProvider) -> None:
        for i in range(5000):
            await cache.set(f"k{i}", i)
        assert len(cache) == 5000

    @pytest.mark.asyncio
    async def test_max_size_evicts(self) -> None:
        cache = MemoryCacheProvider(max_size=2)
        await cache.set("a", 1)
        await cache.set("b", 2)
        await cache.set("c", 3)
        assert len(cache) == 2
        assert await cache.get("c") == 3


# ======================================================================
# RedisCacheProvider
# ======================================================================


class TestRedisCacheProvider:
    @pytest.fixture()
    def cache(self, mock_redis: AsyncMock) -> RedisCacheProvider:
        return RedisCacheProvider(mock_redis)

    @pytest.mark.asyncio
    async def test_get_missing_key_returns_none(self, cache: RedisCacheProvider) -> None:
        assert await cache.get("nonexistent") is None

    @pytest.mark.asyncio
    async def test_set_stores_json_text(self, cache: RedisCacheProvider, mock_redis: AsyncMock) -> None:
        await cache.set("totals", {"js": 3, "css": [1, 2]})
        assert mock_redis.store["totals"] == '{"js": 3, "css": [1, 2]}'

    @pytest.mark.asyncio
    async def test_set_stores_non_json_values_as_text(self, cache: RedisCacheProvider, mock_redis: AsyncMock) -> None:
        await cache.set("edition", {"city": "Zürich", "opened": datetime(2023, 9, 1, 12, 30)})

        assert mock_redis.store["edition"] == '{"city": "Zürich", "opened": "2023-09-01 12:30:00"}'
        assert await cache.get("edition") == {"city": "Zürich", "opened": "2023-09-01 12:30:00"}

    @pytest.mark.asyncio
    async def test_get_decodes_json(self, cache: RedisCacheProvider, mock_redis: AsyncMock) -> None:
        mock_redis.store["totals"] = '{"js": 3}'
        assert await cache.get("totals") == {"js": 3}

    @pytest.mark.asyncio
    async def test_clear_flushes_database(self, cache: RedisCacheProvider, mock_redis: AsyncMock) -> None:
        mock_redis.store["a"] = "1"
        await cache.clear()
        mock_redis.flushdb.assert_awaited_once()
        assert mock_redis.store == {}

    @pytest.mark.asyncio
    async def test_client_errors_propagate(self, cache: RedisCacheProvider, mock_redis: AsyncMock) -> None:
        mock_redis.set.side_effect = ConnectionError("refused")
        with pytest.raises(ConnectionError):
            await cache.set("a", 1)
