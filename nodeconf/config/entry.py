"""Entry and display-section records for a parsed configuration file."""

from __future__ import annotations

from dataclasses import dataclass, field

from nodeconf.config.schema import OptionSchema, ValueKind

CUSTOM_SECTION = "Custom"


@dataclass
class Entry:
    """One option's current value in a document.

    ``schema`` points at the shared catalog record, or is None for keys
    the catalog does not know about ("custom" entries).
    """

    key: str
    value: str
    schema: OptionSchema | None = None
    enabled: bool = False

    @property
    def kind(self) -> ValueKind:
        """Value kind from the catalog; custom entries are plain text."""
        if self.schema is None:
            return ValueKind.TEXT
        return self.schema.kind

    @property
    def category_name(self) -> str:
        """Name of the display section this entry is grouped under."""
        if self.schema is None:
            return CUSTOM_SECTION
        return self.schema.category.value

    @property
    def is_boolean(self) -> bool:
        return self.kind is ValueKind.BOOLEAN


@dataclass
class Section:
    """Category-grouped view over document-owned entries."""

    name: str
    entries: list[Entry] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.entries)
