"""Abstract base class for cache backing stores.

The cache wrapper (surveyhost/services/cache_service.py) talks to its store
only through this contract, so the in-process store and the Redis store are
interchangeable.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class ICacheProvider(ABC):
    """Contract for key-value cache stores.

    All operations are async to allow for network-backed stores (Redis)
    without blocking the event loop.  Stores never expire entries on their
    own; an entry lives until it is overwritten or the store is cleared.
    """

    @abstractmethod
    async def get(self, key: str) -> Any | None:
        """Retrieve the value stored under *key*.

        Parameters
        ----------
        key:
            The cache key to look up.

        Returns
        -------
        Any or None
            The deserialized value if present; ``None`` otherwise.
        """

    @abstractmethod
    async def set(self, key: str, value: Any) -> None:
        """Store *value* under *key*, replacing any previous entry.

        Parameters
        ----------
        key:
            The cache key.
        value:
            A JSON-serializable value (dict, list, str, int, float, bool).
        """

    @abstractmethod
    async def clear(self) -> None:
        """Remove every entry from the store."""
