"""Adapter exposing a caller supplied mapping as a ``Cache``."""

from typing import Generic, MutableMapping, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class MappingCache(Generic[K, V]):
    """Wrap any mutable mapping (a plain ``dict``, a ``shelve`` shelf, ...).

    The mapping is used in place, so entries written by one select control
    are visible to every other holder of the same mapping. That is how
    callers opt into sharing a cache between controls.
    """

    def __init__(self, mapping: MutableMapping[K, V]) -> None:
        self.mapping = mapping

    def get(self, key: K) -> V | None:
        return self.mapping.get(key)

    def set(self, key: K, value: V) -> None:
        self.mapping[key] = value

    def clear(self, key: K | None = None) -> None:
        if key is None:
            self.mapping.clear()
        else:
            self.mapping.pop(key, None)

    def __len__(self) -> int:
        return len(self.mapping)

    def __contains__(self, key: object) -> bool:
        return key in self.mapping
