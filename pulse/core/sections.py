"""Section selection state shared by the dropdown and the tab strip."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

DROPDOWN = "section-select"
TABS = "section-tabs"


class UnknownSectionError(ValueError):
    """Raised when a control reports a value outside the section set."""


class Section(str, Enum):
    STOCK_IMPACT = "Stock Impact"
    INVESTIGATIONS = "Investigations"
    DATA = "Data"
    ANALYSIS = "Analysis"
    METRICS_OVERVIEW = "Metrics Overview"

    @classmethod
    def parse(cls, value: object) -> "Section":
        """Return the member matching ``value`` or raise UnknownSectionError."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError as exc:
            raise UnknownSectionError(f"Unknown section: {value!r}") from exc


DEFAULT_SECTION = Section.STOCK_IMPACT
SECTIONS: tuple[Section, ...] = tuple(Section)


@dataclass
class SectionSelector:
    """Two redundant views (dropdown, tabs) of the active section.

    Each handler records the value its own control reports and then writes
    the opposite control only when it shows something else. Writes never
    trigger the other handler, so the two cannot recurse into each other.
    """

    dropdown: Section = DEFAULT_SECTION
    tabs: Section = DEFAULT_SECTION

    @property
    def current(self) -> Section:
        return self.dropdown

    def on_dropdown_changed(self, new_section: object) -> set[str]:
        section = Section.parse(new_section)
        written: set[str] = set()
        if self.dropdown != section:
            self.dropdown = section
        if self.tabs != section:
            self.tabs = section
            written.add(TABS)
        return written

    def on_tab_changed(self, new_section: object) -> set[str]:
        section = Section.parse(new_section)
        written: set[str] = set()
        if self.tabs != section:
            self.tabs = section
        if self.dropdown != section:
            self.dropdown = section
            written.add(DROPDOWN)
        return written

    @property
    def in_sync(self) -> bool:
        return self.dropdown == self.tabs
