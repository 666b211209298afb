"""
AsyncSelect - Textual renderer for an AsyncSelectSession.
"""

from __future__ import annotations

from typing import Any, Callable, Sequence

from rich.text import Text
from textual.app import ComposeResult
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Input, OptionList, Static

from asyncselect.application.projector import SelectProps
from asyncselect.application.session import AsyncSelectSession
from asyncselect.domain.events import LoadStateChanged
from asyncselect.infrastructure.providers import option_label
from asyncselect.logger import get_logger

logger = get_logger("widgets.async_select")


class AsyncSelect(Widget):
    """
    Search input with an asynchronously loaded option list.

    Layout:
    ┌──────────────────────────────┐
    │ Input (placeholder)          │
    ├──────────────────────────────┤
    │ OptionList                   │
    ├──────────────────────────────┤
    │ status: prompt / no results  │
    └──────────────────────────────┘

    Highlighting the last option requests the next page.
    """

    DEFAULT_CSS = """
    AsyncSelect {
        height: auto;
    }
    AsyncSelect > OptionList {
        height: auto;
        max-height: 12;
    }
    AsyncSelect > .async-select--status {
        color: $text-muted;
    }
    """

    class Changed(Message):
        """Posted after the selected value changes."""

        def __init__(self, select: "AsyncSelect", value: Sequence[Any]) -> None:
            super().__init__()
            self.select = select
            self.value = list(value)

    def __init__(
        self,
        session: AsyncSelectSession,
        *,
        label_for: Callable[[Any], str] = option_label,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(name=name, id=id, classes=classes)
        self.session = session
        self._label_for = label_for
        self._props: SelectProps = session.props()

    @property
    def props(self) -> SelectProps:
        return self._props

    def compose(self) -> ComposeResult:
        yield Input(placeholder=self._props.placeholder or "", id="async-select-input")
        yield OptionList(id="async-select-options")
        yield Static("", classes="async-select--status")

    def on_mount(self) -> None:
        self.session.event_bus.subscribe(LoadStateChanged, self._handle_state_changed)
        self.session.mount()
        self._render_props()

    def on_unmount(self) -> None:
        self.session.event_bus.unsubscribe(LoadStateChanged, self._handle_state_changed)

    def _handle_state_changed(self, event: LoadStateChanged) -> None:
        if self.is_mounted:
            self._render_props()

    def _render_props(self) -> None:
        self._props = self.session.props()
        props = self._props

        self.query_one(Input).placeholder = props.placeholder or ""

        option_list = self.query_one(OptionList)
        option_list.clear_options()
        option_list.add_options([Text(self._label_for(option)) for option in props.options])

        status = self.query_one(".async-select--status", Static)
        status.update("" if props.options else Text(props.no_results_text or ""))
        logger.debug(f"Rendered {len(props.options)} option(s), loading={props.is_loading}")

    def on_input_changed(self, event: Input.Changed) -> None:
        event.stop()
        if self._props.on_input_change is not None:
            self._props.on_input_change(event.value)
        self._render_props()

    def on_option_list_option_highlighted(self, event: OptionList.OptionHighlighted) -> None:
        event.stop()
        option_list = self.query_one(OptionList)
        if event.option_index == option_list.option_count - 1 and self._props.on_menu_scroll_to_bottom:
            self._props.on_menu_scroll_to_bottom(self.session.query)

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        event.stop()
        options = self._props.options
        if not 0 <= event.option_index < len(options):
            return
        picked = options[event.option_index]

        if self.session.config.multi:
            new_value = list(self.session.value or [])
            if picked not in new_value:
                new_value.append(picked)
        else:
            new_value = [picked]

        if self._props.on_change is not None:
            self._props.on_change(new_value)
        self.post_message(self.Changed(self, new_value))
        self._render_props()
