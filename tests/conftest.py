"""Shared fixtures: a hand-driven options provider and an event recorder."""

from dataclasses import dataclass
from typing import Any, Callable, Optional

import pytest

from asyncselect.domain.events import EventBus, LoadFailed, LoadStateChanged, RequestSuperseded


@dataclass
class ProviderCall:
    query: str
    page: Optional[int]
    callback: Callable[..., None]

    def resolve(self, options: list[Any]) -> None:
        self.callback(None, {"options": options})

    def reject(self, error: BaseException) -> None:
        self.callback(error)


class ManualProvider:
    """Provider that records calls and lets the test decide when they answer."""

    def __init__(self):
        self.calls: list[ProviderCall] = []

    def __call__(self, query: str, *args: Any):
        page = args[0] if len(args) == 2 else None
        self.calls.append(ProviderCall(query=query, page=page, callback=args[-1]))
        return None

    @property
    def queries(self) -> list[str]:
        return [call.query for call in self.calls]


class EventRecorder:
    def __init__(self, bus: EventBus):
        self.events: list[Any] = []
        for event_type in (LoadStateChanged, LoadFailed, RequestSuperseded):
            bus.subscribe(event_type, self.events.append)

    def of_type(self, event_type):
        return [event for event in self.events if isinstance(event, event_type)]


@pytest.fixture
def provider() -> ManualProvider:
    return ManualProvider()


@pytest.fixture
def event_bus() -> EventBus:
    return EventBus()


@pytest.fixture
def recorder(event_bus) -> EventRecorder:
    return EventRecorder(event_bus)
