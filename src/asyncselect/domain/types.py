"""Shared domain types for asynchronous option loading."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Sequence

Option = Any
"""An opaque value supplied by the options provider."""


@dataclass(frozen=True, slots=True)
class CacheEntry:
    """Furthest fetched state for a single normalized query.

    Fetching a later page overwrites the entry; pages are never stored
    individually.
    """

    page: int
    options: tuple[Option, ...] = ()
    has_reached_last_page: bool = False


@dataclass(frozen=True, slots=True)
class LoadState:
    """Visible loading state of a select control.

    Attributes:
        is_loading: A provider request is in flight
        is_loading_page: The in-flight request fetches a further page of the
            same query rather than a fresh query
        current_page: Last page applied to ``options``
        options: Options currently visible, accumulated across pages
        error: Provider error of the last applied response, if any
    """

    is_loading: bool = False
    is_loading_page: bool = False
    current_page: int = 1
    options: tuple[Option, ...] = ()
    error: BaseException | None = field(default=None, compare=False)

    def evolve(self, **changes: Any) -> "LoadState":
        """Return a copy of this state with ``changes`` applied."""
        return replace(self, **changes)


def as_options(values: Sequence[Option] | None) -> tuple[Option, ...]:
    """Freeze a provider supplied option sequence."""
    if not values:
        return ()
    return tuple(values)
