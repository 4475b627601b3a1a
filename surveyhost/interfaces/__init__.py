"""Interfaces for external collaborators.

Concrete adapters live in ``surveyhost/providers/``:

    ICacheProvider  ->  MemoryCacheProvider, RedisCacheProvider
"""

from surveyhost.interfaces.cache_provider import ICacheProvider

__all__ = ["ICacheProvider"]
