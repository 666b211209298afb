"""
AsyncSelectSession - wires normalization, loading, selection and projection
together behind the hooks a renderer calls.
"""

from __future__ import annotations

from typing import Callable, Literal, Sequence

from asyncselect.application.load_controller import LoadController, LoadRequest
from asyncselect.application.normalizer import InputNormalizer, remove_diacritics
from asyncselect.application.projector import PresentationProjector, SelectProps
from asyncselect.application.result_cache import CacheStore, ResultCache
from asyncselect.application.selection_gate import SelectionGate
from asyncselect.config import SelectConfig
from asyncselect.domain.events import EventBus
from asyncselect.domain.protocols import OptionsProvider
from asyncselect.domain.types import LoadState, Option
from asyncselect.logger import get_logger

logger = get_logger("session")


class AsyncSelectSession:
    """State holder for one asynchronous select control.

    Example:
        ```python
        async def provider(query, callback):
            return {"options": await api.search(query)}

        async def main():
            session = AsyncSelectSession(provider, SelectConfig(no_results_text="No match"))
            session.mount()
            session.on_input_change("Café")   # loads "cafe", returns "Café"
            await asyncio.sleep(0.5)
            props = session.props()
        ```
    """

    def __init__(
        self,
        provider: OptionsProvider,
        config: SelectConfig | None = None,
        *,
        cache: CacheStore | None | Literal[False] = None,
        options: Sequence[Option] = (),
        value: Sequence[Option] | None = None,
        on_change: Callable[[Sequence[Option]], None] | None = None,
        on_input_change: Callable[[str], None] | None = None,
        accent_stripper: Callable[[str], str] = remove_diacritics,
        event_bus: EventBus | None = None,
    ) -> None:
        """
        Args:
            provider: Options provider queried with the normalized text
            config: Control options; defaults apply when omitted
            cache: ``None`` for a private cache, ``False`` to disable, or a store
            options: Options visible before the first load
            value: Initially selected value(s)
            on_change: Caller hook receiving the new value list
            on_input_change: Caller hook receiving the normalized text
            accent_stripper: Diacritics removal function
            event_bus: Bus for state events; a new one when omitted
        """
        self.config = config or SelectConfig()
        self.value: list[Option] | None = list(value) if value is not None else None
        self.input_value = ""
        self._on_change = on_change
        self._on_input_change = on_input_change

        self.normalizer = InputNormalizer(
            ignore_accents=self.config.ignore_accents,
            ignore_case=self.config.ignore_case,
            accent_stripper=accent_stripper,
        )
        self.controller = LoadController(
            provider,
            cache=ResultCache(cache),
            pagination=self.config.pagination,
            options=options,
            event_bus=event_bus,
        )
        self.gate = SelectionGate(
            multi=self.config.multi,
            clear_on_selection=self.config.clear_options_on_selection,
        )
        self.projector = PresentationProjector(self.config)

    @property
    def event_bus(self) -> EventBus:
        return self.controller.event_bus

    @property
    def state(self) -> LoadState:
        return self.controller.state

    @property
    def query(self) -> str:
        """Normalized form of the current input."""
        return self.normalizer(self.input_value)

    def mount(self) -> LoadRequest | None:
        """Autoload the empty query when configured to."""
        if self.config.autoload:
            return self.controller.load("")
        return None

    def on_input_change(self, raw: str) -> str:
        """Load options for ``raw`` and hand the raw text back untouched."""
        self.input_value = raw
        query = self.normalizer(raw)
        if self._on_input_change is not None:
            self._on_input_change(query)
        self.controller.load(query)
        return raw

    def on_menu_scroll_to_bottom(self, query: str) -> LoadRequest | None:
        """Fetch the next page unless paging is off or a load is in flight."""
        if not self.config.pagination or self.state.is_loading:
            return None
        return self.controller.load(query, self.state.current_page + 1)

    def on_change(self, new_values: Sequence[Option]) -> None:
        if self.gate.should_clear(new_values, self.value):
            logger.debug(f"Value grew to {len(new_values)} item(s); clearing visible options")
            self.controller.clear_options()
        self.value = list(new_values)
        if self._on_change is not None:
            self._on_change(new_values)

    def set_options(self, options: Sequence[Option]) -> None:
        """Replace the visible options, e.g. when the caller supplies a new static list."""
        self.controller.reset_options(options)

    def props(self) -> SelectProps:
        return self.projector.project(
            self.state,
            self.input_value,
            on_input_change=self.on_input_change,
            on_menu_scroll_to_bottom=self.on_menu_scroll_to_bottom,
            on_change=self.on_change,
        )
