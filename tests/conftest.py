"""Shared pytest fixtures for the surveyhost test suite."""

from __future__ import annotations

from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock

import pytest
import yaml

from surveyhost.config.settings import CacheType
from surveyhost.models.context import RequestContext
from surveyhost.providers.cache.memory_cache import MemoryCacheProvider
from surveyhost.services.cache_service import CacheService


@pytest.fixture
def raw_survey() -> dict[str, Any]:
    """A small survey outline as it comes out of the authoring pipeline."""
    return {
        "slug": "state_of_js_2023",
        "createdAt": "2023-09-01T00:00:00Z",
        "name": "State of JavaScript",
        "outline": [
            {
                "slug": "user_info",
                "intlId": "sections.user_info",
                "questions": [
                    {"id": "age", "fieldType": "Number"},
                    {"id": "country", "allowother": True},
                    {"id": "years_of_experience", "suffix": "experience"},
                ],
            },
            {
                "id": "features",
                "questions": [
                    {"id": "proxies", "template": "feature"},
                    {"id": "decorators", "sectionSlug": "language"},
                ],
            },
            {"slug": "thanks"},
        ],
    }


@pytest.fixture
def survey_yaml_file(tmp_path: Path, raw_survey: dict[str, Any]) -> Path:
    path = tmp_path / "state_of_js_2023.yml"
    path.write_text(yaml.safe_dump(raw_survey), encoding="utf-8")
    return path


@pytest.fixture
def local_cache() -> MemoryCacheProvider:
    return MemoryCacheProvider()


@pytest.fixture
def cache_service(local_cache: MemoryCacheProvider) -> CacheService:
    return CacheService(cache_type=CacheType.LOCAL, local_cache=local_cache)


@pytest.fixture
def context() -> RequestContext:
    return RequestContext()


@pytest.fixture
def mock_redis() -> AsyncMock:
    """An async Redis client stand-in backed by a plain dict."""
    store: dict[str, str] = {}
    client = AsyncMock()

    async def _get(key: str) -> str | None:
        return store.get(key)

    async def _set(key: str, value: str) -> bool:
        store[key] = value
        return True

    async def _flushdb() -> bool:
        store.clear()
        return True

    client.get.side_effect = _get
    client.set.side_effect = _set
    client.flushdb.side_effect = _flushdb
    client.store = store
    return client
