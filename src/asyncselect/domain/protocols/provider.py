"""Options provider protocol."""

from typing import Any, Awaitable, Callable, Optional, Protocol

__all__ = ["OptionsCallback", "OptionsProvider"]

OptionsCallback = Callable[[Optional[BaseException], Any], None]
"""Completion callback ``(error, data)``; ``data`` carries an ``options`` sequence."""


class OptionsProvider(Protocol):
    """Protocol for the external data source queried by the load controller.

    Without pagination the provider is called as ``provider(query, callback)``;
    with pagination as ``provider(query, page, callback)``. It signals
    completion either by invoking ``callback`` or by returning an awaitable
    that resolves to the data (or raises). Signalling through both channels,
    or more than once, is tolerated: only the first signal is applied.
    """

    def __call__(self, query: str, *args: Any) -> Optional[Awaitable[Any]]:
        ...
