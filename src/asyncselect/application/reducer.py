"""Pure state transitions applied when a provider response is accepted."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Sequence

from asyncselect.domain.types import LoadState, Option, as_options


def reduce_page(
    prior: LoadState,
    page: int,
    new_options: Sequence[Option],
    error: BaseException | None = None,
) -> LoadState:
    """Fold a page of results into ``prior``.

    Page 1 replaces the visible options; any later page is appended to the
    options accumulated so far. Loading flags are cleared either way.
    """
    options = as_options(new_options)
    if page > 1:
        options = prior.options + options
    return LoadState(
        is_loading=False,
        is_loading_page=False,
        current_page=page,
        options=options,
        error=error,
    )


def extract_options(data: object) -> tuple[Option, ...]:
    """Read the ``options`` sequence from a provider payload.

    Accepts a mapping with an ``"options"`` key or an object exposing an
    ``options`` attribute. Anything else yields no options.
    """
    if data is None:
        return ()
    if isinstance(data, Mapping):
        return as_options(data.get("options"))
    return as_options(getattr(data, "options", None))
