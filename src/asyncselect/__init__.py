"""Asynchronous option loading for search-driven select controls."""

from asyncselect.application import (
    AsyncSelectSession,
    InputNormalizer,
    LoadController,
    LoadRequest,
    PresentationProjector,
    RequestOutcome,
    ResultCache,
    SelectionGate,
    SelectProps,
)
from asyncselect.config import SelectConfig, load_select_config
from asyncselect.domain.types import CacheEntry, LoadState

__all__ = [
    "AsyncSelectSession",
    "CacheEntry",
    "InputNormalizer",
    "LoadController",
    "LoadRequest",
    "LoadState",
    "PresentationProjector",
    "RequestOutcome",
    "ResultCache",
    "SelectConfig",
    "SelectionGate",
    "SelectProps",
    "load_select_config",
]
