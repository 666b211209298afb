"""
SelectDemoApp - minimal Textual application hosting one AsyncSelect.
"""

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header, Static

from asyncselect.application.session import AsyncSelectSession
from asyncselect.infrastructure.providers import option_label
from asyncselect.logger import get_logger
from asyncselect.presentation.widgets import AsyncSelect

logger = get_logger("demo_app")


class SelectDemoApp(App):
    """Header, the select control, the current value and a footer."""

    TITLE = "asyncselect"
    SUB_TITLE = "Asynchronous option loading demo"

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", priority=True),
        Binding("ctrl+c", "quit", "Quit", priority=True, show=False),
    ]

    def __init__(self, session: AsyncSelectSession):
        super().__init__()
        self.session = session

    def compose(self) -> ComposeResult:
        yield Header()
        yield AsyncSelect(self.session, id="select")
        yield Static("No value selected", id="value")
        yield Footer()

    def on_async_select_changed(self, event: AsyncSelect.Changed) -> None:
        labels = ", ".join(option_label(option) for option in event.value)
        logger.info(f"Selected: {labels}")
        self.query_one("#value", Static).update(f"Selected: {labels}" if labels else "No value selected")
