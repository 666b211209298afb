"""Event system for decoupled component communication.

Example:
    ```python
    from asyncselect.domain.events import EventBus, LoadStateChanged

    event_bus = EventBus()

    def handle_change(event: LoadStateChanged):
        print(f"{len(event.state.options)} options visible")

    event_bus.subscribe(LoadStateChanged, handle_change)
    ```
"""

from .bus import EventBus
from .types import (
    Event,
    LoadFailed,
    LoadStateChanged,
    RequestSuperseded,
)

__all__ = [
    "EventBus",
    "Event",
    "LoadFailed",
    "LoadStateChanged",
    "RequestSuperseded",
]
