"""Cache protocol."""

from typing import Protocol, TypeVar

__all__ = ["Cache", "K", "V"]

# Invariant type variables: a cache is both read and written
K = TypeVar("K", contravariant=False)
V = TypeVar("V", contravariant=False)


class Cache(Protocol[K, V]):
    """Store behind a ``ResultCache``, keyed by normalized query.

    The result cache only needs an existence check, a lookup and a write.
    ``MemoryCache``, ``TTLCache`` and ``MappingCache`` all qualify, as does
    any caller object with the same four methods.
    """

    def get(self, key: K) -> V | None:
        """Return the entry for ``key``, or None when there is none."""
        ...

    def set(self, key: K, value: V) -> None:
        """Store ``value`` under ``key``, replacing any earlier entry."""
        ...

    def clear(self, key: K | None = None) -> None:
        """Drop the entry for ``key``; drop everything when ``key`` is None."""
        ...

    def __contains__(self, key: object) -> bool:
        ...
