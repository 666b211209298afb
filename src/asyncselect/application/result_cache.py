"""Per-query result cache for the load controller."""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Literal, Union

from asyncselect.domain.protocols import Cache
from asyncselect.domain.types import CacheEntry
from asyncselect.infrastructure.cache import MappingCache, MemoryCache
from asyncselect.logger import get_logger

logger = get_logger("result_cache")

CacheStore = Union[Cache[str, CacheEntry], MutableMapping[str, CacheEntry]]


class ResultCache:
    """Maps a normalized query to the furthest fetched ``CacheEntry``.

    Args:
        store: ``None`` for a private in-memory store, ``False`` to disable
            caching, a ``Cache`` implementation, or any mutable mapping.
    """

    def __init__(self, store: CacheStore | None | Literal[False] = None) -> None:
        self._store: Cache[str, CacheEntry] | None
        if store is None:
            self._store = MemoryCache()
        elif store is False:
            self._store = None
        elif isinstance(store, MutableMapping):
            self._store = MappingCache(store)
        else:
            self._store = store

    @property
    def enabled(self) -> bool:
        return self._store is not None

    def disable(self) -> None:
        """Stop reading and writing; every load goes to the provider."""
        if self._store is not None:
            logger.debug("Result cache disabled")
        self._store = None

    def get(self, query: str) -> CacheEntry | None:
        if self._store is None or query not in self._store:
            return None
        return self._store.get(query)

    def set(self, query: str, entry: CacheEntry) -> None:
        if self._store is None:
            return
        self._store.set(query, entry)

    def clear(self) -> None:
        if self._store is not None:
            self._store.clear()
