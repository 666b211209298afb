"""Event bus used by the load controller to announce state transitions.

Handlers run synchronously, in subscription order, on the same event loop
turn that produced the event. This matches the controller's guarantee that
every state transition happens on its own turn: a handler observing a
``LoadStateChanged`` event sees the state exactly as it was applied.

Handlers MUST be synchronous. A handler that needs async work should schedule
it with ``asyncio.create_task()``.
"""

import asyncio
from typing import Callable, Type, TypeVar

from asyncselect.logger import get_logger

from .types import Event

logger = get_logger("events.bus")

T = TypeVar("T", bound=Event)

EventHandler = Callable[[Event], None]


class EventBus:
    """Publish/subscribe registry keyed by event type.

    Not thread-safe; all operations are expected on a single event loop.
    """

    def __init__(self):
        self._handlers: dict[Type[Event], list[Callable[[Event], None]]] = {}

    def subscribe(self, event_type: Type[T], handler: Callable[[T], None]) -> None:
        """
        Subscribe to events of a specific type.

        Args:
            event_type: The event class to listen for
            handler: Synchronous callable receiving the event instance

        Raises:
            TypeError: If handler is a coroutine function
        """
        if asyncio.iscoroutinefunction(handler):
            raise TypeError(
                f"Event handlers must be synchronous functions. "
                f"Handler {handler.__name__} is a coroutine function; "
                f"schedule async work with asyncio.create_task() instead."
            )

        handlers = self._handlers.setdefault(event_type, [])
        if handler in handlers:
            logger.debug(f"Handler already subscribed for {event_type.__name__}, skipping")
            return
        handlers.append(handler)
        logger.debug(f"Subscribed handler for {event_type.__name__}")

    def unsubscribe(self, event_type: Type[T], handler: Callable[[T], None]) -> None:
        """Remove a handler; unknown handlers are ignored."""
        try:
            self._handlers.get(event_type, []).remove(handler)
            logger.debug(f"Unsubscribed handler for {event_type.__name__}")
        except ValueError:
            logger.debug(f"Handler not found in subscriptions for {event_type.__name__}")

    def publish(self, event: Event) -> None:
        """
        Publish an event to all subscribed handlers.

        A handler raising an exception is logged and does not prevent the
        remaining handlers from running.

        Args:
            event: The event instance to publish
        """
        event_type = type(event)
        handlers = list(self._handlers.get(event_type, []))
        if not handlers:
            return

        for handler in handlers:
            try:
                handler(event)
            except Exception as e:
                logger.opt(exception=e).error(f"Error in event handler for {event_type.__name__}: {e}")

    def clear(self) -> None:
        """Drop all subscriptions."""
        self._handlers.clear()
        logger.debug("Event bus cleared")

    def has_subscribers(self, event_type: Type[Event]) -> bool:
        """Return True when at least one handler listens for ``event_type``."""
        return bool(self._handlers.get(event_type))
