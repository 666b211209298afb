"""Textual application shell."""

from asyncselect.presentation.tui.demo_app import SelectDemoApp

__all__ = ["SelectDemoApp"]
