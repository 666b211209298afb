"""Domain protocols - structural contracts for pluggable collaborators."""

from asyncselect.domain.protocols.cache import Cache, K, V
from asyncselect.domain.protocols.provider import OptionsCallback, OptionsProvider

__all__ = [
    "Cache",
    "K",
    "V",
    "OptionsCallback",
    "OptionsProvider",
]
