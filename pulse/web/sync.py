"""Keep the section dropdown and the tab strip pointing at the same section."""

from __future__ import annotations

import logging
from typing import Any

from dash import no_update

from pulse.core.sections import DROPDOWN, TABS, Section, SectionSelector, UnknownSectionError

LOGGER = logging.getLogger(__name__)


def reconcile_controls(
    triggered_id: str | None,
    dropdown_value: Any,
    tab_value: Any,
    stored_value: Any = None,
) -> tuple[Any, Any, Any]:
    """Return new ``(dropdown, tabs, store)`` values for a change event.

    Controls that already show the active section get ``no_update`` so the
    callback never writes a value that would only echo back.
    """
    try:
        selector = SectionSelector(dropdown=Section.parse(dropdown_value), tabs=Section.parse(tab_value))
        if triggered_id == TABS:
            written = selector.on_tab_changed(tab_value)
        else:
            written = selector.on_dropdown_changed(dropdown_value)
    except UnknownSectionError as exc:
        LOGGER.warning("Ignoring section change: %s", exc)
        return no_update, no_update, no_update

    current = selector.current.value
    return (
        current if DROPDOWN in written else no_update,
        current if TABS in written else no_update,
        current if stored_value != current else no_update,
    )
