"""
Derivation of the props handed to the rendering collaborator.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Sequence

from asyncselect.config import SelectConfig
from asyncselect.domain.types import LoadState, Option


@dataclass(frozen=True, slots=True)
class SelectProps:
    """Everything a renderer needs to draw the select control."""

    options: tuple[Option, ...]
    placeholder: str | None
    no_results_text: str | None
    is_loading: bool
    on_input_change: Callable[[str], str] | None = None
    on_menu_scroll_to_bottom: Callable[[str], Any] | None = None
    on_change: Callable[[Sequence[Option]], None] | None = None


def visible_options(state: LoadState, loading_placeholder: str | None) -> tuple[Option, ...]:
    """Hide stale options while a fresh query loads; keep them while paging."""
    if state.is_loading and loading_placeholder and not state.is_loading_page:
        return ()
    return state.options


def no_results_text(state: LoadState, config: SelectConfig, input_value: str) -> str | None:
    if state.is_loading:
        return config.loading_placeholder
    if input_value and config.no_results_text:
        return config.no_results_text
    return config.search_prompt_text


def placeholder_text(state: LoadState, config: SelectConfig) -> str | None:
    return config.loading_placeholder if state.is_loading else config.placeholder


class PresentationProjector:
    """Projects a ``LoadState`` onto ``SelectProps`` for a given configuration."""

    def __init__(self, config: SelectConfig) -> None:
        self.config = config

    def project(self, state: LoadState, input_value: str = "", **hooks: Any) -> SelectProps:
        """
        Args:
            state: Current controller state
            input_value: Raw text currently in the input
            **hooks: ``on_input_change``, ``on_menu_scroll_to_bottom`` and ``on_change``

        Returns:
            Props for the renderer
        """
        return SelectProps(
            options=visible_options(state, self.config.loading_placeholder),
            placeholder=placeholder_text(state, self.config),
            no_results_text=no_results_text(state, self.config, input_value),
            is_loading=state.is_loading,
            **hooks,
        )
