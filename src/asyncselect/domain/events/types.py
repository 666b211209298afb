"""Event types for the event bus system.

The load controller publishes these events so that renderers and callers can
react to state changes without being coupled to the controller.
"""

import time
from dataclasses import dataclass, field

from asyncselect.domain.types import LoadState


@dataclass
class Event:
    """Base class for all events.

    The timestamp field is automatically set when the event is created.
    """

    timestamp: float = field(default_factory=time.time, init=False)
    """Timestamp when the event was created (Unix timestamp)."""


@dataclass
class LoadStateChanged(Event):
    """Event published whenever the controller's visible state changes.

    Attributes:
        state: The new load state
        previous: The state before the change
    """

    state: LoadState
    """New load state."""
    previous: LoadState
    """Load state before the change."""


@dataclass
class LoadFailed(Event):
    """Event published when an applied provider response carried an error.

    The options still collapse to an empty page; this event lets callers tell
    a failed request apart from a query with no matches.
    """

    query: str
    """Normalized query of the failed request."""
    page: int
    """Requested page."""
    error: BaseException
    """Error reported by the provider."""


@dataclass
class RequestSuperseded(Event):
    """Event published when a newer request revokes a pending one."""

    query: str
    """Query of the revoked request."""
    page: int
    """Page of the revoked request."""
    generation: int
    """Generation of the revoked request."""
