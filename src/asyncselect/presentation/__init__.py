"""Presentation layer: Textual renderer and demo application."""
