"""In-memory cache implementation.

The default store behind a ``ResultCache``. Every ``ResultCache`` built
without an explicit store gets its own ``MemoryCache``; instances are never
shared between select controls.
"""

from typing import Generic, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class MemoryCache(Generic[K, V]):
    """Dictionary backed cache without expiration.

    Example:
        >>> cache = MemoryCache[str, int]()
        >>> cache.set("key1", 42)
        >>> cache.get("key1")
        42
        >>> "key2" in cache
        False
    """

    def __init__(self) -> None:
        self._data: dict[K, V] = {}

    def get(self, key: K) -> V | None:
        return self._data.get(key)

    def set(self, key: K, value: V) -> None:
        self._data[key] = value

    def clear(self, key: K | None = None) -> None:
        """Clear one entry, or every entry when ``key`` is None."""
        if key is None:
            self._data.clear()
        else:
            self._data.pop(key, None)

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data
