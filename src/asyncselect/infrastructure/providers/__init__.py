"""Options providers shipped with asyncselect."""

from asyncselect.infrastructure.providers.static import StaticOptionsProvider, option_label

__all__ = [
    "StaticOptionsProvider",
    "option_label",
]
