"""Input normalization for search queries.

The normalized text is used both as the cache key and as the query sent to
the options provider. The raw text the user typed is never modified.
"""

from __future__ import annotations

import unicodedata
from typing import Callable


def remove_diacritics(text: str) -> str:
    """Remove diacritics via Unicode NFKD decomposition."""
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(character for character in decomposed if not unicodedata.combining(character))


def normalize(
    raw: str,
    *,
    strip_accents: bool,
    fold_case: bool,
    accent_stripper: Callable[[str], str] = remove_diacritics,
) -> str:
    """Return the canonical query for ``raw``.

    Args:
        raw: Text as typed by the user
        strip_accents: Remove diacritics using ``accent_stripper``
        fold_case: Lower-case the result
        accent_stripper: Pure ``str -> str`` function removing diacritics

    Returns:
        The normalized query
    """
    query = raw
    if strip_accents:
        query = accent_stripper(query)
    if fold_case:
        query = query.lower()
    return query


class InputNormalizer:
    """Binds the normalization toggles of a select control."""

    def __init__(
        self,
        ignore_accents: bool = True,
        ignore_case: bool = True,
        accent_stripper: Callable[[str], str] = remove_diacritics,
    ) -> None:
        self.ignore_accents = ignore_accents
        self.ignore_case = ignore_case
        self._accent_stripper = accent_stripper

    def __call__(self, raw: str) -> str:
        return normalize(
            raw,
            strip_accents=self.ignore_accents,
            fold_case=self.ignore_case,
            accent_stripper=self._accent_stripper,
        )
