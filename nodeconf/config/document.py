"""Mutable configuration document and its serialization."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from nodeconf.config.entry import CUSTOM_SECTION, Entry, Section
from nodeconf.config.parser import default_entries, parse_config
from nodeconf.config.schema import Category
from nodeconf.exceptions import ConfigSaveError
from nodeconf.logging_config import get_logger

logger = get_logger(__name__)

# Group order used when writing a file.
SAVE_ORDER: tuple[str, ...] = (*(category.value for category in Category), CUSTOM_SECTION)


class ConfigDocument:
    """All entries for one config file on disk.

    The document owns its entries. Callers may hold references returned by
    :meth:`get` for display, but changes go through :meth:`set`,
    :meth:`enable`, :meth:`disable`, :meth:`add_custom` and :meth:`remove`.
    """

    def __init__(self, path: str | Path, entries: Iterable[Entry] = ()):
        """Initialize document.

        Args:
            path: File the document is saved to.
            entries: Initial entries; later duplicates of a key replace
                earlier ones.

        """
        self.path = Path(path)
        self._entries: dict[str, Entry] = {}
        for entry in entries:
            self._entries[entry.key] = entry

    @classmethod
    def load(cls, path: str | Path) -> ConfigDocument:
        """Parse ``path`` into a document (defaults if the file is missing)."""
        return cls(path, parse_config(path))

    @classmethod
    def defaults(cls, path: str | Path) -> ConfigDocument:
        """Create a document with every catalog option disabled at its default."""
        return cls(path, default_entries())

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries.values())

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    @property
    def entries(self) -> list[Entry]:
        """Entries in document order."""
        return list(self._entries.values())

    def get(self, key: str) -> Entry | None:
        """Return the live entry for ``key``, or None."""
        return self._entries.get(key)

    get_mut = get

    def set(self, key: str, value: str) -> bool:
        """Set an existing entry's value and enable it.

        Returns False, leaving the document untouched, when ``key`` is
        unknown; new keys are added with :meth:`add_custom`.
        """
        entry = self._entries.get(key)
        if entry is None:
            return False
        entry.value = value
        entry.enabled = True
        return True

    def enable(self, key: str) -> bool:
        """Mark ``key`` to be written on save; the value is unchanged."""
        entry = self._entries.get(key)
        if entry is None:
            return False
        entry.enabled = True
        return True

    def disable(self, key: str) -> bool:
        """Exclude ``key`` from output while keeping its value in memory."""
        entry = self._entries.get(key)
        if entry is None:
            return False
        entry.enabled = False
        return True

    def add_custom(self, key: str, value: str) -> None:
        """Insert a schema-less entry, or update ``key`` in place if present.

        A catalog key keeps its schema link so it is never duplicated.
        """
        existing = self._entries.get(key)
        if existing is not None:
            existing.value = value
            existing.enabled = True
            return
        self._entries[key] = Entry(key=key, value=value, schema=None, enabled=True)

    def remove(self, key: str) -> bool:
        """Delete ``key``; True if it existed."""
        return self._entries.pop(key, None) is not None

    def enabled_entries(self) -> list[Entry]:
        return [entry for entry in self._entries.values() if entry.enabled]

    def entries_by_category(self, category: Category | str) -> list[Entry]:
        """Entries grouped under ``category`` (a Category or "Custom")."""
        name = category.value if isinstance(category, Category) else category
        return [entry for entry in self._entries.values() if entry.category_name == name]

    def to_text(self) -> str:
        """Serialize enabled entries as ``key=value`` lines grouped by category."""
        blocks: list[str] = []
        for name in SAVE_ORDER:
            lines = [
                f"{entry.key}={entry.value}"
                for entry in self._entries.values()
                if entry.enabled and entry.category_name == name
            ]
            if lines:
                blocks.append("\n".join([f"# {name}", *lines]))
        if not blocks:
            return ""
        return "\n\n".join(blocks) + "\n"

    def save(self) -> None:
        """Write the document to its own path."""
        self.save_to(self.path)

    def save_to(self, path: str | Path) -> None:
        """Write the document to ``path``, creating parent directories.

        Raises:
            ConfigSaveError: The directory or file could not be written.

        """
        target = Path(path)
        text = self.to_text()
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(text, encoding="utf-8")
        except OSError as e:
            msg = f"Cannot write {target}: {e.strerror or e}"
            raise ConfigSaveError(msg, {"path": str(target)}) from e
        logger.info("Saved %d options to %s", len(self.enabled_entries()), target)


def build_sections(document: ConfigDocument) -> list[Section]:
    """Group a document's entries into display sections sorted by name."""
    by_name: dict[str, Section] = {}
    for entry in document:
        name = entry.category_name
        section = by_name.get(name)
        if section is None:
            section = by_name[name] = Section(name)
        section.entries.append(entry)
    return [by_name[name] for name in sorted(by_name)]
