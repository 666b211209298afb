"""In-memory options provider, used by the demo app and in tests."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Mapping, Sequence

from asyncselect.application.normalizer import InputNormalizer
from asyncselect.logger import get_logger

logger = get_logger("providers.static")


def option_label(option: Any) -> str:
    """Text shown for an option: its ``"label"`` when it has one, else ``str()``."""
    if isinstance(option, Mapping) and "label" in option:
        return str(option["label"])
    return str(option)


class StaticOptionsProvider:
    """Serves a fixed option list, filtered by normalized substring match.

    Results are returned through an awaitable after ``latency`` seconds.
    When called with a page number the matches are sliced into pages of
    ``page_size``; a page past the end is empty.
    """

    def __init__(
        self,
        options: Sequence[Any],
        *,
        page_size: int = 20,
        latency: float = 0.0,
        normalizer: Callable[[str], str] | None = None,
        label_for: Callable[[Any], str] = option_label,
    ) -> None:
        if page_size < 1:
            raise ValueError("page_size must be positive")
        self.options = list(options)
        self.page_size = page_size
        self.latency = latency
        self._normalizer = normalizer or InputNormalizer()
        self._label_for = label_for
        self.calls: list[tuple[str, int | None]] = []

    def matches(self, query: str) -> list[Any]:
        if not query:
            return list(self.options)
        return [option for option in self.options if query in self._normalizer(self._label_for(option))]

    def __call__(self, query: str, *args: Any):
        # (query, callback) or (query, page, callback)
        page = args[0] if len(args) == 2 else None
        self.calls.append((query, page))
        return self._fetch(query, page)

    async def _fetch(self, query: str, page: int | None) -> dict[str, list[Any]]:
        if self.latency:
            await asyncio.sleep(self.latency)
        found = self.matches(query)
        if page is not None:
            start = (page - 1) * self.page_size
            found = found[start : start + self.page_size]
        logger.debug(f"Static provider answered {query!r} page {page} with {len(found)} option(s)")
        return {"options": found}
