"""Textual widgets rendering asyncselect sessions."""

from asyncselect.presentation.widgets.async_select import AsyncSelect

__all__ = ["AsyncSelect"]
