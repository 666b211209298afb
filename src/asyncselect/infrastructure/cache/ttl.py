"""TTL (Time-To-Live) cache implementation.

Useful as a result store when provider data goes stale: an expired query is
treated as never fetched and the next keystroke reloads it from page 1.
"""

import time
from typing import Callable, Generic, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class TTLCache(Generic[K, V]):
    """TTL-based cache implementation.

    Entries are considered expired once ``ttl`` seconds have passed since
    they were set. Expired entries are purged lazily on access.

    Example:
        >>> cache = TTLCache[str, int](ttl=60.0)
        >>> cache.set("key1", 42)
        >>> cache.get("key1")
        42
    """

    def __init__(self, ttl: float = 300.0, clock: Callable[[], float] = time.monotonic) -> None:
        """Initialize a TTL cache.

        Args:
            ttl: Time-to-live in seconds. Default is 300 seconds (5 minutes).
            clock: Monotonic time source, injectable for tests
        """
        self._data: dict[K, tuple[V, float]] = {}  # (value, expiration_time)
        self.ttl = ttl
        self._clock = clock

    def _cleanup_expired(self) -> None:
        now = self._clock()
        expired_keys = [key for key, (_, exp_time) in self._data.items() if now > exp_time]
        for key in expired_keys:
            del self._data[key]

    def get(self, key: K) -> V | None:
        """Return the cached value, or None when missing or expired."""
        entry = self._data.get(key)
        if entry is None:
            return None

        value, expiration_time = entry
        if self._clock() > expiration_time:
            del self._data[key]
            return None
        return value

    def set(self, key: K, value: V) -> None:
        self._data[key] = (value, self._clock() + self.ttl)

    def clear(self, key: K | None = None) -> None:
        if key is None:
            self._data.clear()
        else:
            self._data.pop(key, None)

    def __len__(self) -> int:
        """Return the number of live entries."""
        self._cleanup_expired()
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return self.get(key) is not None  # type: ignore[arg-type]
