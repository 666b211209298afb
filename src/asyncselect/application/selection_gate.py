"""Clear-after-pick rule for multi-value selects."""

from __future__ import annotations

from typing import Sequence

from asyncselect.domain.types import Option


def should_clear(
    new_values: Sequence[Option] | None,
    previous_values: Sequence[Option] | None,
    *,
    multi: bool,
    clear_on_selection: bool,
) -> bool:
    """Return True when a selection change must empty the visible options.

    Only an addition to an existing multi-value selection qualifies. An empty
    selection counts as existing; ``None`` means the control has no value at
    all and never clears. Removing a value leaves the list alone.
    """
    if not (multi and clear_on_selection) or previous_values is None:
        return False
    return len(new_values or ()) > len(previous_values)


class SelectionGate:
    def __init__(self, multi: bool = False, clear_on_selection: bool = True) -> None:
        self.multi = multi
        self.clear_on_selection = clear_on_selection

    def should_clear(self, new_values: Sequence[Option] | None, previous_values: Sequence[Option] | None) -> bool:
        return should_clear(
            new_values,
            previous_values,
            multi=self.multi,
            clear_on_selection=self.clear_on_selection,
        )
