"""Domain layer: types, protocols and events shared by every other layer."""

from asyncselect.domain.types import CacheEntry, LoadState, Option

__all__ = [
    "CacheEntry",
    "LoadState",
    "Option",
]
