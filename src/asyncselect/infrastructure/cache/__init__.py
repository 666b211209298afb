"""Cache stores that can back a ``ResultCache``.

All of them satisfy :class:`asyncselect.domain.protocols.Cache`.
"""

from asyncselect.infrastructure.cache.mapping import MappingCache
from asyncselect.infrastructure.cache.memory import MemoryCache
from asyncselect.infrastructure.cache.ttl import TTLCache

__all__ = [
    "MappingCache",
    "MemoryCache",
    "TTLCache",
]
